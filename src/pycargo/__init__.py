"""pycargo - In-memory supply-chain location tracking and condition monitoring contracts."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pycargo")
except PackageNotFoundError:
    __version__ = "0+local"
from pycargo.client import SupplyChain
from pycargo.config import CargoConfig
from pycargo.contracts import ConditionMonitoring, LocationTracking, evaluate_thresholds
from pycargo.exceptions import (
    CargoConfigError,
    CargoContractError,
    CargoError,
    CargoUnknownMethodError,
)
from pycargo.models import (
    Alert,
    AlertSet,
    AlertType,
    ConditionReading,
    ConditionRecords,
    ConditionThresholds,
    ContainerLocationHistory,
    ContractErrorCode,
    ContractResponse,
    ErrorKind,
    Location,
    LocationEvent,
)

__all__ = [
    "__version__",
    "Alert",
    "AlertSet",
    "AlertType",
    "CargoConfig",
    "CargoConfigError",
    "CargoContractError",
    "CargoError",
    "CargoUnknownMethodError",
    "ConditionMonitoring",
    "ConditionReading",
    "ConditionRecords",
    "ConditionThresholds",
    "ContainerLocationHistory",
    "ContractErrorCode",
    "ContractResponse",
    "ErrorKind",
    "Location",
    "LocationEvent",
    "LocationTracking",
    "SupplyChain",
    "evaluate_thresholds",
]
