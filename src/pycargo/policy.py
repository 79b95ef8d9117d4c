"""Authorization checks.

Every check is a plain callable ``(actor, resource) -> bool`` so the same
shape covers "is this the owner?" and "is this actor on the location's
allow-list?". Contracts pick their checks at construction time from
:class:`pycargo.config.CargoConfig`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pycargo.models._base import Actor
from pycargo.models.location import Location

Capability = Callable[[Actor, Any], bool]


def is_owner(actor: Actor, owner: Actor) -> bool:
    """Return ``True`` when *actor* is the owner principal."""
    return actor == owner


def is_authorized_reporter(actor: Actor, location: Location) -> bool:
    """Return ``True`` when *actor* is on the location's allow-list."""
    return actor in location.authorized_reporters


def allow_any(actor: Actor, resource: Any) -> bool:
    return True


def owner_only(owner: Actor) -> Capability:
    """Build a check that ignores the resource and only admits *owner*."""

    def check(actor: Actor, resource: Any) -> bool:
        return is_owner(actor, owner)

    return check


def owner_or_reporter(owner: Actor) -> Capability:
    """Build a check that admits *owner* or any reporter listed on the location."""

    def check(actor: Actor, location: Location) -> bool:
        return is_owner(actor, owner) or is_authorized_reporter(actor, location)

    return check


def gate(enabled: bool, owner: Actor) -> Capability:
    """Return :func:`owner_only` when *enabled*, otherwise :func:`allow_any`."""
    return owner_only(owner) if enabled else allow_any
