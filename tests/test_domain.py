"""Unit tests for domain primitives and errors.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from events.domain import Event, EventCreate, EventId, EventUpdate
from events.domain.errors import (
    ErrorCode,
    EventNotCreatedError,
    EventNotDeletedError,
    EventNotFoundError,
    EventNotUpdatedError,
    InternalError,
)

DATE = datetime(2026, 5, 1, 18, 0, tzinfo=timezone.utc)


def make_event(**overrides) -> Event:
    fields = {
        "id": EventId("1"),
        "title": "Sample Event",
        "description": "Event description",
        "date": DATE,
        "location": "Event location",
        "organizer": "Organizer",
    }
    fields.update(overrides)
    return Event(**fields)


class TestEventId:
    """Tests for EventId value object."""

    def test_from_string_keeps_value(self):
        assert EventId.from_string("abc").value == "abc"

    def test_from_string_rejects_empty(self):
        with pytest.raises(ValueError):
            EventId.from_string("")

    def test_generate_returns_distinct_ids(self):
        assert EventId.generate() != EventId.generate()

    def test_str_is_raw_value(self):
        assert str(EventId("42")) == "42"


class TestEvent:
    """Tests for Event and its inputs."""

    def test_blank_title_rejected(self):
        with pytest.raises(ValueError):
            make_event(title="   ")

    def test_event_create_blank_title_rejected(self):
        with pytest.raises(ValueError):
            EventCreate(
                title="",
                description="d",
                date=DATE,
                location="l",
                organizer="o",
            )

    def test_event_is_immutable(self):
        event = make_event()
        with pytest.raises(FrozenInstanceError):
            event.title = "Other"

    def test_apply_changes_only_given_fields(self):
        event = make_event()

        updated = event.apply(EventUpdate(title="Updated Event"))

        assert updated == make_event(title="Updated Event")

    def test_apply_empty_update_is_identity(self):
        event = make_event()
        assert event.apply(EventUpdate()) == event

    def test_update_changes_skips_unspecified(self):
        update = EventUpdate(location="Elsewhere", date=DATE)
        assert update.changes() == {"location": "Elsewhere", "date": DATE}

    def test_update_blank_title_rejected(self):
        with pytest.raises(ValueError):
            EventUpdate(title="")


class TestDomainErrors:
    """Each error kind carries its own code."""

    @pytest.mark.parametrize(
        ("error", "code"),
        [
            (EventNotCreatedError(), ErrorCode.EVENT_NOT_CREATED),
            (EventNotFoundError("1"), ErrorCode.EVENT_NOT_FOUND),
            (EventNotUpdatedError("1"), ErrorCode.EVENT_NOT_UPDATED),
            (EventNotDeletedError("1"), ErrorCode.EVENT_NOT_DELETED),
            (InternalError(), ErrorCode.INTERNAL_ERROR),
        ],
    )
    def test_error_codes(self, error, code):
        assert error.code is code
        assert str(error).startswith(code.value)

    def test_not_found_keeps_event_id(self):
        assert EventNotFoundError("abc").event_id == "abc"

    def test_not_found_without_id_describes_collection(self):
        error = EventNotFoundError()
        assert error.event_id is None
        assert error.message == "No events found"
