"""Application layer for event CRUD.

The use case holds no state of its own and adds no behaviour: every call is a
single delegation to the EventService, and every domain error raised there
reaches the caller unchanged.
"""

from events.domain import Event, EventCreate, EventUpdate
from events.services.interfaces import EventService


class EventUseCase:
    """Orchestrates one CRUD operation per call."""

    def __init__(self, service: EventService) -> None:
        self._service = service

    def create_new_event(self, data: EventCreate) -> Event:
        """Create an event. Raises EventNotCreatedError."""
        return self._service.create(data)

    def get_all_events(self) -> list[Event]:
        """Return every event. Raises EventNotFoundError."""
        return self._service.get_all()

    def get_event_by_id(self, event_id: str) -> Event:
        """Return one event. Raises EventNotFoundError."""
        return self._service.get_by_id(event_id)

    def update_event(self, event_id: str, changes: EventUpdate) -> Event:
        """Merge changes into an event. Raises EventNotUpdatedError."""
        return self._service.update(event_id, changes)

    def delete_event(self, event_id: str) -> Event:
        """Delete an event, returning its prior state. Raises EventNotDeletedError."""
        return self._service.delete(event_id)
