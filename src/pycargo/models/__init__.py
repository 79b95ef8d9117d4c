"""Data models for pycargo contract state and responses."""

from pycargo.models._base import Actor, CargoBaseModel, CargoTimestamp, ensure_utc
from pycargo.models.condition import (
    Alert,
    AlertSet,
    AlertType,
    ConditionReading,
    ConditionRecords,
    ConditionThresholds,
)
from pycargo.models.location import ContainerLocationHistory, Location, LocationEvent
from pycargo.models.response import ContractErrorCode, ContractResponse, ErrorKind

__all__ = [
    "Actor",
    "Alert",
    "AlertSet",
    "AlertType",
    "CargoBaseModel",
    "CargoTimestamp",
    "ConditionReading",
    "ConditionRecords",
    "ConditionThresholds",
    "ContainerLocationHistory",
    "ContractErrorCode",
    "ContractResponse",
    "ErrorKind",
    "Location",
    "LocationEvent",
    "ensure_utc",
]
