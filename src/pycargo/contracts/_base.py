"""Shared plumbing for the in-memory contracts."""

from __future__ import annotations

import abc
from collections.abc import Callable
from datetime import UTC, datetime
from typing import ClassVar

from pycargo.config import CargoConfig
from pycargo.models._base import ensure_utc


def utcnow() -> datetime:
    return datetime.now(UTC)


class Contract(abc.ABC):
    """Base for a deterministic, single-threaded contract.

    Subclasses own their state as plain dicts keyed by id and rebuild it
    in :meth:`reset`. Timestamps come from the injected *clock*, so given
    the same clock and the same sequence of calls a contract always ends
    in the same state.
    """

    NAME: ClassVar[str] = ""
    #: Operations that take ``caller`` as their first argument.
    PUBLIC_METHODS: ClassVar[frozenset[str]] = frozenset()
    #: Lookups; the dispatcher does not pass ``caller`` to these.
    READ_ONLY_METHODS: ClassVar[frozenset[str]] = frozenset()

    def __init__(
        self,
        *,
        config: CargoConfig | None = None,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._config = config if config is not None else CargoConfig()
        self._clock = clock
        self.reset()

    @property
    def config(self) -> CargoConfig:
        return self._config

    @property
    def owner(self) -> str:
        return self._config.owner

    def _now(self) -> datetime:
        return ensure_utc(self._clock())

    @abc.abstractmethod
    def reset(self) -> None:
        """Drop all state."""
