"""In-memory contracts.

Each contract owns its own state. They share nothing but configuration
and the clock, both injected at construction.
"""

from pycargo.contracts._base import Contract, utcnow
from pycargo.contracts.condition_monitoring import ConditionMonitoring
from pycargo.contracts.location_tracking import LocationTracking
from pycargo.contracts.thresholds import evaluate_thresholds

__all__ = [
    "ConditionMonitoring",
    "Contract",
    "LocationTracking",
    "evaluate_thresholds",
    "utcnow",
]
