"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass, fields, replace
from datetime import datetime
from typing import Any

from events.domain.value_objects import EventId


def _require_title(title: str) -> None:
    if not title or not title.strip():
        raise ValueError("Event title cannot be blank")


@dataclass(frozen=True)
class EventCreate:
    """Input for creating an Event. The id is assigned on persistence."""

    title: str
    description: str
    date: datetime
    location: str
    organizer: str

    def __post_init__(self) -> None:
        _require_title(self.title)

    def as_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class EventUpdate:
    """Partial change set for an Event. ``None`` leaves a field untouched."""

    title: str | None = None
    description: str | None = None
    date: datetime | None = None
    location: str | None = None
    organizer: str | None = None

    def __post_init__(self) -> None:
        if self.title is not None:
            _require_title(self.title)

    def changes(self) -> dict[str, Any]:
        """Return only the fields that were specified."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    title: str
    description: str
    date: datetime
    location: str
    organizer: str

    def __post_init__(self) -> None:
        _require_title(self.title)

    def apply(self, update: EventUpdate) -> "Event":
        """Merge an update into this event, keeping unspecified fields."""
        return replace(self, **update.changes())
