"""Custom exception hierarchy for pycargo.

Contract operations never raise for business-rule failures; they return a
:class:`pycargo.models.ContractResponse` carrying an error code. These
exceptions cover misuse of the library itself, plus the opt-in
:meth:`ContractResponse.unwrap` path.
"""

from __future__ import annotations


class CargoError(Exception):
    """Base exception for all pycargo errors."""


class CargoConfigError(CargoError):
    """Invalid or missing configuration."""


class CargoContractError(CargoError):
    """A contract call returned an error and the caller asked to unwrap it."""

    def __init__(
        self,
        message: str,
        *,
        code: int,
        method: str = "",
    ) -> None:
        self.code = code
        self.method = method
        super().__init__(message)


class CargoUnknownMethodError(CargoError):
    """The dispatcher was asked for a contract or method that does not exist."""

    def __init__(
        self,
        message: str,
        *,
        contract: str = "",
        method: str = "",
    ) -> None:
        self.contract = contract
        self.method = method
        super().__init__(message)
