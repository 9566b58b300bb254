"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from events.domain import Event, EventCreate, EventId

IdGenerator = Callable[[], EventId]


class StoreError(Exception):
    """Raised when the underlying storage fails. Wraps driver exceptions."""


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def create_event(self, data: EventCreate) -> Event:
        """Persist a new event under a freshly generated ID."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by created_at ascending."""
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, changes: dict[str, Any]) -> Event | None:
        """Merge changes into an event and return it, or None if not found."""
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> Event | None:
        """Remove an event and return its last state, or None if not found."""
        ...
