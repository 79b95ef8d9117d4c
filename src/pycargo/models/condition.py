"""Condition monitoring records: thresholds, readings and alerts."""

from __future__ import annotations

import enum

from pydantic import ConfigDict, Field

from pycargo.models._base import Actor, CargoBaseModel, CargoTimestamp


class AlertType(enum.StrEnum):
    """Kind of threshold violation."""

    LOW_TEMPERATURE = "low-temperature"
    HIGH_TEMPERATURE = "high-temperature"
    HIGH_HUMIDITY = "high-humidity"
    HIGH_SHOCK = "high-shock"


class ConditionThresholds(CargoBaseModel):
    """Acceptable ranges for one container.

    Every bound is exclusive: a reading equal to a bound is in range.
    """

    model_config = ConfigDict(frozen=True)

    min_temperature: float
    max_temperature: float
    max_humidity: float
    max_shock: float


class ConditionReading(CargoBaseModel):
    """One sensor report for a container."""

    model_config = ConfigDict(frozen=True)

    timestamp: CargoTimestamp
    temperature: float
    humidity: float
    shock: float
    reported_by: Actor


class ConditionRecords(CargoBaseModel):
    """All readings recorded for one container, oldest first."""

    condition_records: list[ConditionReading] = Field(default_factory=list)


class Alert(CargoBaseModel):
    """A threshold violation raised by a reading.

    ``value`` is the offending measurement and ``threshold`` the bound
    it crossed. ``timestamp`` equals the reading's timestamp.
    """

    model_config = ConfigDict(frozen=True)

    timestamp: CargoTimestamp
    alert_type: AlertType
    value: float
    threshold: float


class AlertSet(CargoBaseModel):
    """Alerts raised for one container, oldest first."""

    alerts: list[Alert] = Field(default_factory=list)

    def of_type(self, alert_type: AlertType) -> list[Alert]:
        return [alert for alert in self.alerts if alert.alert_type == alert_type]
