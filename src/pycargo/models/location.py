"""Location registry and container location history records."""

from __future__ import annotations

from pydantic import ConfigDict, Field

from pycargo.models._base import Actor, CargoBaseModel, CargoTimestamp


class Location(CargoBaseModel):
    """A registered physical location.

    Parameters
    ----------
    name : str
        Human readable name (e.g. ``"Port of Singapore"``).
    location_type : str
        Free-form kind of site (``"seaport"``, ``"warehouse"``...).
    latitude : float
        Latitude as supplied at registration. No unit or scale is
        enforced; the contract stores what it is given.
    longitude : float
        Longitude, same convention as ``latitude``.
    authorized_reporters : list of str
        Principals allowed to record arrivals here. May contain
        duplicates.
    """

    name: str
    location_type: str
    latitude: float
    longitude: float
    authorized_reporters: list[Actor] = Field(default_factory=list)


class LocationEvent(CargoBaseModel):
    """One arrival/status report for a container."""

    model_config = ConfigDict(frozen=True)

    location_id: int
    timestamp: CargoTimestamp
    status: str
    reported_by: Actor


class ContainerLocationHistory(CargoBaseModel):
    """All location events for one container, oldest first."""

    location_history: list[LocationEvent] = Field(default_factory=list)

    @property
    def current(self) -> LocationEvent | None:
        """Most recent event, or ``None`` for an empty history."""
        if not self.location_history:
            return None
        return self.location_history[-1]
