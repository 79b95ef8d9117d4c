"""Both contracts behind one call surface."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from datetime import datetime
from typing import Any

from pycargo.config import CargoConfig
from pycargo.contracts._base import Contract, utcnow
from pycargo.contracts.condition_monitoring import ConditionMonitoring
from pycargo.contracts.location_tracking import LocationTracking
from pycargo.exceptions import CargoUnknownMethodError
from pycargo.models._base import Actor
from pycargo.models.response import ContractResponse

_logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def normalize_method_name(method: str) -> str:
    """Map ``record-container-arrival`` / ``recordContainerArrival`` to snake_case."""
    name = method.strip().replace("-", "_")
    return _CAMEL_BOUNDARY.sub("_", name).lower()


class SupplyChain:
    """Location tracking and condition monitoring sharing config and clock.

    Use the contracts directly through :attr:`location_tracking` and
    :attr:`condition_monitoring`, or by name through :meth:`call`::

        chain = SupplyChain()
        chain.call("location-tracking", "register-location", owner,
                   "Port of Singapore", "seaport", 1294, 10394, [reporter])
    """

    def __init__(
        self,
        config: CargoConfig | None = None,
        *,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._config = config if config is not None else CargoConfig()
        self.location_tracking = LocationTracking(config=self._config, clock=clock)
        self.condition_monitoring = ConditionMonitoring(config=self._config, clock=clock)
        self._contracts: dict[str, Contract] = {
            contract.NAME: contract for contract in (self.location_tracking, self.condition_monitoring)
        }

    @property
    def config(self) -> CargoConfig:
        return self._config

    @property
    def contracts(self) -> tuple[str, ...]:
        return tuple(self._contracts)

    def call(self, contract: str, method: str, caller: Actor | None, *args: Any) -> ContractResponse[Any]:
        """Invoke *method* on *contract* by name.

        Read-only methods ignore *caller* (``None`` is fine). Unknown
        names raise :class:`CargoUnknownMethodError`; contract-level
        failures come back as error responses.
        """
        target = self._contracts.get(contract)
        if target is None:
            raise CargoUnknownMethodError(
                f"unknown contract {contract!r}; expected one of {sorted(self._contracts)}",
                contract=contract,
                method=method,
            )

        name = normalize_method_name(method)
        if name in target.READ_ONLY_METHODS:
            _logger.debug("call %s.%s%r", contract, name, args)
            response: ContractResponse[Any] = getattr(target, name)(*args)
            return response
        if name in target.PUBLIC_METHODS:
            _logger.debug("call %s.%s by %s%r", contract, name, caller, args)
            response = getattr(target, name)(caller, *args)
            return response

        raise CargoUnknownMethodError(
            f"contract {contract!r} has no method {method!r}",
            contract=contract,
            method=method,
        )

    def reset(self) -> None:
        """Drop all state in both contracts; location ids restart at 1."""
        for contract in self._contracts.values():
            contract.reset()
