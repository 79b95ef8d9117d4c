"""Contract configuration for pycargo."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pycargo._constants import DEFAULT_OWNER
from pycargo.exceptions import CargoConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class CargoConfig:
    """Contract configuration.

    Parameters
    ----------
    owner : str
        Principal with owner privileges: may add authorized reporters
        and may record arrivals at any location.
    gate_thresholds : bool
        Require the owner for ``set_condition_thresholds``. Off by
        default, so any caller may set thresholds.
    gate_conditions : bool
        Require the owner for ``record_condition``. Off by default.
    """

    owner: str = DEFAULT_OWNER
    gate_thresholds: bool = False
    gate_conditions: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.owner, str) or not self.owner.strip():
            raise CargoConfigError("owner must be a non-empty principal")

    @classmethod
    def from_env(cls, **overrides: Any) -> CargoConfig:
        """Create configuration from environment variables.

        Reads ``CARGO_OWNER``, ``CARGO_GATE_THRESHOLDS`` and
        ``CARGO_GATE_CONDITIONS``. Explicit keyword arguments override
        environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        CargoConfig
            Populated configuration.
        """
        env = os.environ

        config_kwargs: dict[str, Any] = {}
        owner = env.get("CARGO_OWNER")
        if owner is not None:
            config_kwargs["owner"] = owner.strip()

        if "gate_thresholds" not in overrides:
            config_kwargs["gate_thresholds"] = _env_bool(env.get("CARGO_GATE_THRESHOLDS"), False)
        if "gate_conditions" not in overrides:
            config_kwargs["gate_conditions"] = _env_bool(env.get("CARGO_GATE_CONDITIONS"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
