from __future__ import annotations

from datetime import UTC, datetime

import pytest

from pycargo.contracts import ConditionMonitoring, Contract, LocationTracking, utcnow


def test_contract_base_is_abstract() -> None:
    with pytest.raises(TypeError):
        Contract()  # type: ignore[abstract]


def test_utcnow_is_timezone_aware() -> None:
    assert utcnow().tzinfo is UTC


def test_default_clock_stamps_utc() -> None:
    before = datetime.now(UTC)
    monitoring = ConditionMonitoring()
    monitoring.record_condition("ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG", 1, 20, 50, 10)

    records = monitoring.get_container_conditions(1).value
    assert records is not None
    (reading,) = records.condition_records
    assert reading.timestamp.tzinfo is not None
    assert reading.timestamp >= before


@pytest.mark.parametrize("contract_cls", [LocationTracking, ConditionMonitoring])
def test_naive_clock_is_read_as_utc(contract_cls: type[Contract]) -> None:
    contract = contract_cls(clock=lambda: datetime(2026, 1, 1))
    assert contract._now() == datetime(2026, 1, 1, tzinfo=UTC)  # noqa: SLF001
