"""Per-container condition thresholds, readings and alerts."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from pycargo._constants import CONDITION_MONITORING
from pycargo.config import CargoConfig
from pycargo.contracts._base import Contract, utcnow
from pycargo.contracts.thresholds import evaluate_thresholds
from pycargo.models._base import Actor
from pycargo.models.condition import (
    AlertSet,
    ConditionReading,
    ConditionRecords,
    ConditionThresholds,
)
from pycargo.models.response import ContractErrorCode, ContractResponse
from pycargo.policy import gate

_logger = logging.getLogger(__name__)


class ConditionMonitoring(Contract):
    """Threshold store plus an append-only reading log with alerting.

    Readings are evaluated against the thresholds in force when they are
    recorded; changing thresholds later never re-evaluates old readings.
    Readings, thresholds and alerts are created lazily per container.
    """

    NAME = CONDITION_MONITORING
    PUBLIC_METHODS = frozenset({"set_condition_thresholds", "record_condition"})
    READ_ONLY_METHODS = frozenset({"get_container_conditions", "get_container_thresholds", "get_container_alerts"})

    def __init__(
        self,
        *,
        config: CargoConfig | None = None,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        super().__init__(config=config, clock=clock)
        self._can_set_thresholds = gate(self.config.gate_thresholds, self.owner)
        self._can_record = gate(self.config.gate_conditions, self.owner)

    def reset(self) -> None:
        self._container_conditions: dict[int, ConditionRecords] = {}
        self._container_thresholds: dict[int, ConditionThresholds] = {}
        self._container_alerts: dict[int, AlertSet] = {}

    def set_condition_thresholds(
        self,
        caller: Actor,
        container_id: int,
        min_temperature: float,
        max_temperature: float,
        max_humidity: float,
        max_shock: float,
    ) -> ContractResponse[bool]:
        """Set (or fully replace) the thresholds for a container."""
        method = "set-condition-thresholds"
        if not self._can_set_thresholds(caller, container_id):
            _logger.debug("%s rejected: %s is not the owner", method, caller)
            return ContractResponse.err(ContractErrorCode.NOT_AUTHORIZED, method=method)

        self._container_thresholds[container_id] = ConditionThresholds(
            min_temperature=min_temperature,
            max_temperature=max_temperature,
            max_humidity=max_humidity,
            max_shock=max_shock,
        )
        _logger.debug(
            "Thresholds for container %s: temperature=[%s, %s] humidity<=%s shock<=%s",
            container_id,
            min_temperature,
            max_temperature,
            max_humidity,
            max_shock,
        )
        return ContractResponse.ok(True, method=method)

    def record_condition(
        self,
        caller: Actor,
        container_id: int,
        temperature: float,
        humidity: float,
        shock: float,
    ) -> ContractResponse[bool]:
        """Append a reading and raise alerts for any violated threshold.

        Without thresholds for the container the reading is stored and
        nothing else happens: no alert set is created.
        """
        method = "record-condition"
        if not self._can_record(caller, container_id):
            _logger.debug("%s rejected: %s is not the owner", method, caller)
            return ContractResponse.err(ContractErrorCode.NOT_AUTHORIZED, method=method)

        reading = ConditionReading(
            timestamp=self._now(),
            temperature=temperature,
            humidity=humidity,
            shock=shock,
            reported_by=caller,
        )
        records = self._container_conditions.get(container_id)
        if records is None:
            records = ConditionRecords()
            self._container_conditions[container_id] = records
        records.condition_records.append(reading)
        _logger.debug("Recorded condition for container %s (records=%d)", container_id, len(records.condition_records))

        thresholds = self._container_thresholds.get(container_id)
        if thresholds is None:
            return ContractResponse.ok(True, method=method)

        alerts = evaluate_thresholds(reading, thresholds)
        if alerts:
            alert_set = self._container_alerts.get(container_id)
            if alert_set is None:
                alert_set = AlertSet()
                self._container_alerts[container_id] = alert_set
            alert_set.alerts.extend(alerts)
            for alert in alerts:
                _logger.info(
                    "Container %s alert %s: value=%s threshold=%s",
                    container_id,
                    alert.alert_type,
                    alert.value,
                    alert.threshold,
                )
        return ContractResponse.ok(True, method=method)

    def get_container_conditions(self, container_id: int) -> ContractResponse[ConditionRecords]:
        records = self._container_conditions.get(container_id)
        value = records.model_copy(deep=True) if records is not None else None
        return ContractResponse.ok(value, method="get-container-conditions")

    def get_container_thresholds(self, container_id: int) -> ContractResponse[ConditionThresholds]:
        # Frozen model, safe to hand out.
        return ContractResponse.ok(self._container_thresholds.get(container_id), method="get-container-thresholds")

    def get_container_alerts(self, container_id: int) -> ContractResponse[AlertSet]:
        alert_set = self._container_alerts.get(container_id)
        value = alert_set.model_copy(deep=True) if alert_set is not None else None
        return ContractResponse.ok(value, method="get-container-alerts")
