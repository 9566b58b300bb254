from events.domain.models import Event, EventCreate, EventUpdate
from events.domain.value_objects import EventId, new_event_id

__all__ = [
    "Event",
    "EventCreate",
    "EventUpdate",
    "EventId",
    "new_event_id",
]
