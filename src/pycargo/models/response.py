"""Typed results of contract calls.

A contract call either succeeds with a value or fails with a small
integer code, mirroring the ``(ok ...)`` / ``(err uN)`` responses of the
contracts being modelled. Failures are values, not exceptions: callers
branch on :attr:`ContractResponse.error` (or :attr:`ContractErrorCode.kind`)
and only get an exception when they explicitly call
:meth:`ContractResponse.unwrap`.
"""

from __future__ import annotations

import enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator

from pycargo.exceptions import CargoContractError

T = TypeVar("T")


class ErrorKind(enum.StrEnum):
    """The two families of contract failure."""

    NOT_FOUND = "not-found"
    NOT_AUTHORIZED = "not-authorized"


class ContractErrorCode(enum.IntEnum):
    """Error codes returned by the contracts.

    ``NOT_AUTHORIZED`` is returned when a caller may not report for a
    location (or is rejected by a gated operation). ``OWNER_ONLY`` is
    returned by owner-only operations. Both belong to
    :attr:`ErrorKind.NOT_AUTHORIZED`.
    """

    NOT_FOUND = 1
    NOT_AUTHORIZED = 2
    OWNER_ONLY = 3

    @property
    def kind(self) -> ErrorKind:
        if self is ContractErrorCode.NOT_FOUND:
            return ErrorKind.NOT_FOUND
        return ErrorKind.NOT_AUTHORIZED


class ContractResponse(BaseModel, Generic[T]):
    """Result of a contract call.

    Parameters
    ----------
    value : T or None
        Produced value on success. ``None`` is a valid success value for
        lookups that found nothing.
    error : ContractErrorCode or None
        Set when the call failed.
    method : str
        Name of the operation that produced this response.
    """

    model_config = ConfigDict(frozen=True)

    value: T | None = None
    error: ContractErrorCode | None = None
    method: str = ""

    @model_validator(mode="after")
    def _value_or_error(self) -> ContractResponse[T]:
        if self.error is not None and self.value is not None:
            raise ValueError("a failed response cannot carry a value")
        return self

    @classmethod
    def ok(cls, value: Any, *, method: str = "") -> ContractResponse[Any]:
        return cls(value=value, method=method)

    @classmethod
    def err(cls, code: ContractErrorCode, *, method: str = "") -> ContractResponse[Any]:
        return cls(error=code, method=method)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @property
    def is_err(self) -> bool:
        return self.error is not None

    def unwrap(self) -> T | None:
        """Return the value, raising :class:`CargoContractError` on failure."""
        if self.error is not None:
            raise CargoContractError(
                f"{self.method or 'contract call'} failed: code={int(self.error)} ({self.error.kind})",
                code=int(self.error),
                method=self.method,
            )
        return self.value
