"""Unit tests for StoreEventService.

These test error handling and domain error mapping.
Run with: pytest tests/test_services.py -v
"""

import logging

import pytest

from events.domain import EventId, EventUpdate
from events.domain.errors import (
    EventNotCreatedError,
    EventNotDeletedError,
    EventNotFoundError,
    EventNotUpdatedError,
)
from events.services import StoreEventService
from events.stores import StoreError


@pytest.fixture
def service(memory_store) -> StoreEventService:
    return StoreEventService(memory_store)


@pytest.fixture
def failing_service(failing_store) -> StoreEventService:
    return StoreEventService(failing_store)


class TestStoreEventService:
    """Tests for StoreEventService against a working store."""

    def test_create_assigns_id(self, service, event_create):
        event = service.create(event_create)

        assert event.id == EventId("1")
        assert event.title == event_create.title
        assert event.description == event_create.description
        assert event.date == event_create.date
        assert event.location == event_create.location
        assert event.organizer == event_create.organizer

    def test_get_by_id_returns_event(self, service, event_create):
        created = service.create(event_create)
        assert service.get_by_id("1") == created

    def test_get_by_id_unknown_raises_not_found(self, service):
        with pytest.raises(EventNotFoundError) as exc_info:
            service.get_by_id("missing")
        assert exc_info.value.event_id == "missing"

    def test_get_by_id_empty_id_raises_not_found(self, service):
        with pytest.raises(EventNotFoundError):
            service.get_by_id("")

    def test_get_all_returns_store_order(self, service, event_create):
        service.create(event_create)
        service.create(event_create)

        assert [event.id.value for event in service.get_all()] == ["1", "2"]

    def test_get_all_empty_raises_not_found(self, service):
        with pytest.raises(EventNotFoundError):
            service.get_all()

    def test_update_merges_fields(self, service, event_create):
        created = service.create(event_create)

        updated = service.update("1", EventUpdate(title="Updated Event"))

        assert updated == created.apply(EventUpdate(title="Updated Event"))
        assert service.get_by_id("1").title == "Updated Event"

    def test_update_without_fields_returns_current(self, service, event_create):
        created = service.create(event_create)
        assert service.update("1", EventUpdate()) == created

    def test_update_unknown_raises_not_updated(self, service):
        with pytest.raises(EventNotUpdatedError):
            service.update("missing", EventUpdate(title="Updated Event"))

    def test_update_without_fields_unknown_raises_not_updated(self, service):
        with pytest.raises(EventNotUpdatedError):
            service.update("missing", EventUpdate())

    def test_delete_returns_last_state(self, service, event_create):
        created = service.create(event_create)

        assert service.delete("1") == created
        with pytest.raises(EventNotFoundError):
            service.get_by_id("1")

    def test_delete_unknown_raises_not_deleted(self, service):
        with pytest.raises(EventNotDeletedError):
            service.delete("missing")


class TestStoreEventServiceFailures:
    """Store failures map to the operation's error kind and are logged."""

    def test_create(self, failing_service, event_create, caplog):
        with caplog.at_level(logging.ERROR, logger="events.services.event_service"):
            with pytest.raises(EventNotCreatedError) as exc_info:
                failing_service.create(event_create)

        assert isinstance(exc_info.value.__cause__, StoreError)
        assert "Failed to create event" in caplog.text

    def test_get_by_id(self, failing_service):
        with pytest.raises(EventNotFoundError):
            failing_service.get_by_id("1")

    def test_get_all(self, failing_service):
        with pytest.raises(EventNotFoundError):
            failing_service.get_all()

    def test_update(self, failing_service):
        with pytest.raises(EventNotUpdatedError) as exc_info:
            failing_service.update("1", EventUpdate(title="Updated Event"))
        assert isinstance(exc_info.value.__cause__, StoreError)

    def test_delete(self, failing_service):
        with pytest.raises(EventNotDeletedError) as exc_info:
            failing_service.delete("1")
        assert isinstance(exc_info.value.__cause__, StoreError)
