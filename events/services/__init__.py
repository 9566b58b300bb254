from events.services.event_service import StoreEventService
from events.services.interfaces import EventService

__all__ = ["EventService", "StoreEventService"]
