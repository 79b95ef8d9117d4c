"""Base model shared by every pycargo record.

Every record inherits from :class:`CargoBaseModel` which provides:

* ``alias_generator=to_camel`` so records dump to (and validate from)
  the camelCase shape the contract call surface uses
  (``locationType``, ``reportedBy``...).
* ``populate_by_name=True`` so Python callers can keep using
  snake_case field names.
* ``extra="forbid"`` so a misspelt field is a validation error rather
  than silently dropped state.

Timestamps go through :data:`CargoTimestamp`, which makes naive
datetimes timezone-aware (UTC).
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

Actor = str
"""Opaque principal identifier (e.g. a Stacks ``ST...`` address)."""


def ensure_utc(value: datetime) -> datetime:
    """Return *value* as a timezone-aware datetime, assuming UTC when naive."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


CargoTimestamp = Annotated[datetime, AfterValidator(ensure_utc)]
"""Annotated datetime that is always timezone-aware."""


class CargoBaseModel(BaseModel):
    """Base for pycargo records."""

    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )
