"""Pure threshold evaluation for condition readings."""

from __future__ import annotations

import operator
from collections.abc import Callable

from pycargo.models.condition import Alert, AlertType, ConditionReading, ConditionThresholds

# (alert type, reading field, threshold field, violated-if)
_CHECKS: tuple[tuple[AlertType, str, str, Callable[[float, float], bool]], ...] = (
    (AlertType.LOW_TEMPERATURE, "temperature", "min_temperature", operator.lt),
    (AlertType.HIGH_TEMPERATURE, "temperature", "max_temperature", operator.gt),
    (AlertType.HIGH_HUMIDITY, "humidity", "max_humidity", operator.gt),
    (AlertType.HIGH_SHOCK, "shock", "max_shock", operator.gt),
)


def evaluate_thresholds(reading: ConditionReading, thresholds: ConditionThresholds) -> list[Alert]:
    """Return one alert per bound *reading* violates, in check order.

    Checks are independent, so a single reading may raise several
    alerts. Comparisons are strict: a value equal to its bound passes.
    """
    alerts: list[Alert] = []
    for alert_type, reading_field, threshold_field, violated in _CHECKS:
        value = getattr(reading, reading_field)
        bound = getattr(thresholds, threshold_field)
        if violated(value, bound):
            alerts.append(
                Alert(
                    timestamp=reading.timestamp,
                    alert_type=alert_type,
                    value=value,
                    threshold=bound,
                )
            )
    return alerts
