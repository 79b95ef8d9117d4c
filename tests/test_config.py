from __future__ import annotations

import pytest

from pycargo._constants import DEFAULT_OWNER
from pycargo.config import CargoConfig
from pycargo.exceptions import CargoConfigError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("CARGO_OWNER", "CARGO_GATE_THRESHOLDS", "CARGO_GATE_CONDITIONS"):
        monkeypatch.delenv(key, raising=False)


def test_defaults() -> None:
    config = CargoConfig()
    assert config.owner == DEFAULT_OWNER
    assert config.gate_thresholds is False
    assert config.gate_conditions is False


def test_from_env_reads_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CARGO_OWNER", "  ST3OWNER  ")
    monkeypatch.setenv("CARGO_GATE_THRESHOLDS", "yes")
    monkeypatch.setenv("CARGO_GATE_CONDITIONS", "off")

    config = CargoConfig.from_env()
    assert config.owner == "ST3OWNER"
    assert config.gate_thresholds is True
    assert config.gate_conditions is False


def test_from_env_unrecognized_bool_uses_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CARGO_GATE_THRESHOLDS", "maybe")
    assert CargoConfig.from_env().gate_thresholds is False


def test_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CARGO_OWNER", "ST3OWNER")
    monkeypatch.setenv("CARGO_GATE_CONDITIONS", "1")

    config = CargoConfig.from_env(owner="ST4OTHER", gate_conditions=False)
    assert config.owner == "ST4OTHER"
    assert config.gate_conditions is False


@pytest.mark.parametrize("owner", ["", "   "])
def test_empty_owner_rejected(owner: str) -> None:
    with pytest.raises(CargoConfigError):
        CargoConfig(owner=owner)


def test_empty_owner_from_env_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CARGO_OWNER", "")
    with pytest.raises(CargoConfigError):
        CargoConfig.from_env()
