"""Tests for the by-name contract call surface."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from pycargo import SupplyChain
from pycargo.client import normalize_method_name
from pycargo.config import CargoConfig
from pycargo.exceptions import CargoUnknownMethodError
from pycargo.models.response import ContractErrorCode

DEPLOYER = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
USER1 = "ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG"
USER2 = "ST2JHG361ZXG51QTKY2NQCVBPPRRE2KZB1HR05NNC"


def _dt() -> datetime:
    return datetime(2026, 1, 1, tzinfo=UTC)


@pytest.fixture
def chain() -> SupplyChain:
    return SupplyChain(clock=_dt)


@pytest.mark.parametrize(
    "method",
    ["record-container-arrival", "recordContainerArrival", "record_container_arrival"],
)
def test_normalize_method_name(method: str) -> None:
    assert normalize_method_name(method) == "record_container_arrival"


def test_contract_names(chain: SupplyChain) -> None:
    assert set(chain.contracts) == {"location-tracking", "condition-monitoring"}


def test_location_flow_by_name(chain: SupplyChain) -> None:
    registered = chain.call(
        "location-tracking",
        "registerLocation",
        DEPLOYER,
        "Port of Singapore",
        "seaport",
        1294,
        10394,
        [USER1],
    )
    assert registered.value == 1
    assert registered.method == "register-location"

    denied = chain.call("location-tracking", "record-container-arrival", USER2, 1, 1, "arrived")
    assert denied.error == ContractErrorCode.NOT_AUTHORIZED

    accepted = chain.call("location-tracking", "record-container-arrival", USER1, 1, 1, "arrived")
    assert accepted.value is True

    current = chain.call("location-tracking", "getContainerCurrentLocation", None, 1)
    assert current.value is not None
    assert current.value.reported_by == USER1


def test_condition_flow_by_name(chain: SupplyChain) -> None:
    chain.call("condition-monitoring", "set-condition-thresholds", USER1, 1, -5, 20, 60, 30)
    chain.call("condition-monitoring", "record-condition", USER1, 1, 30, 70, 40)

    alerts = chain.call("condition-monitoring", "get-container-alerts", None, 1).value
    assert alerts is not None
    assert len(alerts.alerts) == 3

    missing = chain.call("condition-monitoring", "getContainerConditions", None, 999)
    assert missing.is_ok
    assert missing.value is None


def test_unknown_contract_raises(chain: SupplyChain) -> None:
    with pytest.raises(CargoUnknownMethodError) as exc_info:
        chain.call("customs-clearance", "register-location", DEPLOYER)
    assert exc_info.value.contract == "customs-clearance"


def test_unknown_method_raises(chain: SupplyChain) -> None:
    with pytest.raises(CargoUnknownMethodError) as exc_info:
        chain.call("location-tracking", "delete-location", DEPLOYER, 1)
    assert exc_info.value.method == "delete-location"


def test_method_of_other_contract_is_unknown(chain: SupplyChain) -> None:
    with pytest.raises(CargoUnknownMethodError):
        chain.call("location-tracking", "record-condition", USER1, 1, 20, 50, 10)


def test_reset_clears_both_contracts(chain: SupplyChain) -> None:
    chain.call("location-tracking", "register-location", DEPLOYER, "Port of Singapore", "seaport", 1294, 10394, [])
    chain.call("condition-monitoring", "record-condition", USER1, 1, 20, 50, 10)

    chain.reset()

    assert chain.location_tracking.location_count == 0
    assert chain.condition_monitoring.get_container_conditions(1).value is None
    again = chain.call("location-tracking", "register-location", DEPLOYER, "Rotterdam Harbor", "seaport", 51964, 4117, [])
    assert again.value == 1


def test_config_is_shared() -> None:
    config = CargoConfig(owner=USER1, gate_conditions=True)
    chain = SupplyChain(config, clock=_dt)

    assert chain.location_tracking.config is config
    assert chain.condition_monitoring.config is config
    assert chain.call("condition-monitoring", "record-condition", USER2, 1, 20, 50, 10).is_err
    assert chain.call("condition-monitoring", "record-condition", USER1, 1, 20, 50, 10).is_ok
