"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone
from typing import Any

import pytest
from rest_framework.test import APIClient

from events.domain import Event, EventCreate, EventId
from events.stores.interfaces import EventStore, StoreError

EVENT_DATE = datetime(2026, 5, 1, 18, 0, tzinfo=timezone.utc)


class InMemoryEventStore(EventStore):
    """Dict-backed store with sequential IDs."""

    def __init__(self) -> None:
        self._events: dict[str, Event] = {}
        self._next_id = 1

    def create_event(self, data: EventCreate) -> Event:
        event = Event(id=EventId(value=str(self._next_id)), **data.as_dict())
        self._next_id += 1
        self._events[event.id.value] = event
        return event

    def get_event(self, event_id: EventId) -> Event | None:
        return self._events.get(event_id.value)

    def list_events(self) -> list[Event]:
        return list(self._events.values())

    def update_event(self, event_id: EventId, changes: dict[str, Any]) -> Event | None:
        current = self._events.get(event_id.value)
        if current is None:
            return None
        updated = Event(**{**current.__dict__, **changes})
        self._events[event_id.value] = updated
        return updated

    def delete_event(self, event_id: EventId) -> Event | None:
        return self._events.pop(event_id.value, None)


class FailingEventStore(EventStore):
    """Store whose backend is always down."""

    def create_event(self, data):
        raise StoreError("down")

    def get_event(self, event_id):
        raise StoreError("down")

    def list_events(self):
        raise StoreError("down")

    def update_event(self, event_id, changes):
        raise StoreError("down")

    def delete_event(self, event_id):
        raise StoreError("down")


@pytest.fixture
def event_create() -> EventCreate:
    return EventCreate(
        title="Sample Event",
        description="Event description",
        date=EVENT_DATE,
        location="Event location",
        organizer="Organizer",
    )


@pytest.fixture
def memory_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def failing_store() -> FailingEventStore:
    return FailingEventStore()


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def reset_use_case():
    from events.wiring import get_event_use_case

    get_event_use_case.cache_clear()
    yield
    get_event_use_case.cache_clear()


@pytest.fixture
def event_date() -> datetime:
    return EVENT_DATE
