"""Location registry and per-container location history."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import datetime

from pycargo._constants import FIRST_LOCATION_ID, LOCATION_TRACKING
from pycargo.config import CargoConfig
from pycargo.contracts._base import Contract, utcnow
from pycargo.models._base import Actor
from pycargo.models.location import ContainerLocationHistory, Location, LocationEvent
from pycargo.models.response import ContractErrorCode, ContractResponse
from pycargo.policy import is_owner, owner_or_reporter

_logger = logging.getLogger(__name__)


class LocationTracking(Contract):
    """Registry of locations plus the arrival history of each container.

    Location ids are handed out sequentially from 1 and never reused.
    A container's history exists only after its first recorded arrival.
    """

    NAME = LOCATION_TRACKING
    PUBLIC_METHODS = frozenset({"register_location", "record_container_arrival", "add_authorized_reporter"})
    READ_ONLY_METHODS = frozenset({"get_location", "get_container_location_history", "get_container_current_location"})

    def __init__(
        self,
        *,
        config: CargoConfig | None = None,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        super().__init__(config=config, clock=clock)
        self._can_report = owner_or_reporter(self.owner)

    def reset(self) -> None:
        self._last_location_id = FIRST_LOCATION_ID - 1
        self._locations: dict[int, Location] = {}
        self._container_locations: dict[int, ContainerLocationHistory] = {}

    @property
    def last_location_id(self) -> int:
        """Id handed out by the most recent registration (0 before any)."""
        return self._last_location_id

    @property
    def location_count(self) -> int:
        return len(self._locations)

    # ------------------------------------------------------------------
    # Location registry
    # ------------------------------------------------------------------

    def register_location(
        self,
        caller: Actor,
        name: str,
        location_type: str,
        latitude: float,
        longitude: float,
        authorized_reporters: Iterable[Actor] = (),
    ) -> ContractResponse[int]:
        """Register a location and return its new id.

        Any caller may register. The reporter list is copied, so later
        changes to the caller's list do not leak into the registry. A bare
        string or ``None`` in place of the list raises
        :class:`pydantic.ValidationError` and consumes no id.
        """
        location = Location(
            name=name,
            location_type=location_type,
            latitude=latitude,
            longitude=longitude,
            authorized_reporters=authorized_reporters,
        )
        location_id = self._last_location_id + 1
        self._locations[location_id] = location
        self._last_location_id = location_id
        _logger.debug("Registered location id=%d name=%r by %s", location_id, name, caller)
        return ContractResponse.ok(location_id, method="register-location")

    def get_location(self, location_id: int) -> ContractResponse[Location]:
        location = self._locations.get(location_id)
        value = location.model_copy(deep=True) if location is not None else None
        return ContractResponse.ok(value, method="get-location")

    def add_authorized_reporter(
        self,
        caller: Actor,
        location_id: int,
        reporter: Actor,
    ) -> ContractResponse[bool]:
        """Append *reporter* to a location's allow-list. Owner only.

        The owner check comes first, so a non-owner gets
        ``OWNER_ONLY`` even for an unknown location. Adding a reporter
        that is already listed appends a duplicate entry.
        """
        method = "add-authorized-reporter"
        if not is_owner(caller, self.owner):
            _logger.debug("%s rejected: %s is not the owner", method, caller)
            return ContractResponse.err(ContractErrorCode.OWNER_ONLY, method=method)

        location = self._locations.get(location_id)
        if location is None:
            _logger.debug("%s rejected: unknown location id=%s", method, location_id)
            return ContractResponse.err(ContractErrorCode.NOT_FOUND, method=method)

        location.authorized_reporters.append(reporter)
        _logger.debug("Added reporter %s to location id=%d", reporter, location_id)
        return ContractResponse.ok(True, method=method)

    # ------------------------------------------------------------------
    # Container location history
    # ------------------------------------------------------------------

    def record_container_arrival(
        self,
        caller: Actor,
        container_id: int,
        location_id: int,
        status: str,
    ) -> ContractResponse[bool]:
        """Append an arrival/status event to a container's history.

        Fails with ``NOT_FOUND`` for an unknown location and with
        ``NOT_AUTHORIZED`` unless *caller* is the owner or one of the
        location's reporters. A failed call leaves the history untouched.
        """
        method = "record-container-arrival"
        location = self._locations.get(location_id)
        if location is None:
            _logger.debug("%s rejected: unknown location id=%s", method, location_id)
            return ContractResponse.err(ContractErrorCode.NOT_FOUND, method=method)

        if not self._can_report(caller, location):
            _logger.debug("%s rejected: %s may not report at location id=%d", method, caller, location_id)
            return ContractResponse.err(ContractErrorCode.NOT_AUTHORIZED, method=method)

        event = LocationEvent(
            location_id=location_id,
            timestamp=self._now(),
            status=status,
            reported_by=caller,
        )
        history = self._container_locations.get(container_id)
        if history is None:
            history = ContainerLocationHistory()
            self._container_locations[container_id] = history
        history.location_history.append(event)
        _logger.debug(
            "Container %s %s at location id=%d (events=%d)",
            container_id,
            status,
            location_id,
            len(history.location_history),
        )
        return ContractResponse.ok(True, method=method)

    def get_container_location_history(self, container_id: int) -> ContractResponse[ContainerLocationHistory]:
        history = self._container_locations.get(container_id)
        value = history.model_copy(deep=True) if history is not None else None
        return ContractResponse.ok(value, method="get-container-location-history")

    def get_container_current_location(self, container_id: int) -> ContractResponse[LocationEvent]:
        """Return the latest event for the container, or ``None`` without history."""
        history = self._container_locations.get(container_id)
        current = history.current if history is not None else None
        return ContractResponse.ok(current, method="get-container-current-location")
