"""Event service - maps storage outcomes onto domain errors.

Services:
- Depend only on interfaces (stores)
- Perform error mapping
- Return domain models or domain errors
"""

import logging

from events.domain import Event, EventCreate, EventId, EventUpdate
from events.domain.errors import (
    EventNotCreatedError,
    EventNotDeletedError,
    EventNotFoundError,
    EventNotUpdatedError,
)
from events.services.interfaces import EventService
from events.stores.interfaces import EventStore, StoreError

logger = logging.getLogger(__name__)


def _parse_id(event_id: str) -> EventId | None:
    try:
        return EventId.from_string(event_id)
    except ValueError:
        return None


class StoreEventService(EventService):
    """EventService backed by an EventStore."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def create(self, data: EventCreate) -> Event:
        """Persist a new event.

        Raises:
            EventNotCreatedError: If the store fails.
        """
        try:
            return self._store.create_event(data)
        except StoreError as exc:
            logger.exception("Failed to create event")
            raise EventNotCreatedError() from exc

    def get_by_id(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            EventNotFoundError: If the event does not exist or the lookup fails.
        """
        parsed = _parse_id(event_id)
        if parsed is None:
            raise EventNotFoundError(event_id)
        try:
            event = self._store.get_event(parsed)
        except StoreError as exc:
            logger.exception("Failed to fetch event %s", event_id)
            raise EventNotFoundError(event_id) from exc
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def get_all(self) -> list[Event]:
        """Return all events in store order.

        Raises:
            EventNotFoundError: If there are no events or the lookup fails.
        """
        try:
            events = self._store.list_events()
        except StoreError as exc:
            logger.exception("Failed to list events")
            raise EventNotFoundError() from exc
        if not events:
            raise EventNotFoundError()
        return events

    def update(self, event_id: str, changes: EventUpdate) -> Event:
        """Merge the specified fields into an event.

        Raises:
            EventNotUpdatedError: If the event does not exist or the store fails.
        """
        parsed = _parse_id(event_id)
        if parsed is None:
            raise EventNotUpdatedError(event_id)
        try:
            fields = changes.changes()
            if fields:
                event = self._store.update_event(parsed, fields)
            else:
                event = self._store.get_event(parsed)
        except StoreError as exc:
            logger.exception("Failed to update event %s", event_id)
            raise EventNotUpdatedError(event_id) from exc
        if event is None:
            raise EventNotUpdatedError(event_id)
        return event

    def delete(self, event_id: str) -> Event:
        """Delete an event and return its last state.

        Raises:
            EventNotDeletedError: If the event does not exist or the store fails.
        """
        parsed = _parse_id(event_id)
        if parsed is None:
            raise EventNotDeletedError(event_id)
        try:
            event = self._store.delete_event(parsed)
        except StoreError as exc:
            logger.exception("Failed to delete event %s", event_id)
            raise EventNotDeletedError(event_id) from exc
        if event is None:
            raise EventNotDeletedError(event_id)
        return event
