"""Composes the use case from explicit configuration."""

from functools import lru_cache

from django.conf import settings

from events.application import EventUseCase
from events.config import EventsConfig
from events.services import StoreEventService
from events.stores.factory import build_event_store


def build_event_use_case(config: EventsConfig) -> EventUseCase:
    return EventUseCase(StoreEventService(build_event_store(config)))


@lru_cache(maxsize=1)
def get_event_use_case() -> EventUseCase:
    """Process-wide use case, built on first request from Django settings."""
    return build_event_use_case(EventsConfig.from_settings(settings))
