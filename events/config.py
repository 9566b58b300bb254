"""Explicit configuration for building the event store.

Settings are read from the environment once, by the Django settings module.
Everything downstream receives an ``EventsConfig`` value instead of reading
globals.
"""

from dataclasses import dataclass
from typing import Any, Self

from django.core.exceptions import ImproperlyConfigured

STORE_BACKENDS = ("mongo", "django")


@dataclass(frozen=True)
class EventsConfig:
    """Connection and backend settings for event persistence."""

    mongo_uri: str = ""
    database_host: str = "localhost"
    database_port: int = 27017
    database_name: str = "events"
    collection_name: str = "events"
    store_backend: str = "mongo"

    def __post_init__(self) -> None:
        if self.store_backend not in STORE_BACKENDS:
            raise ImproperlyConfigured(
                f"Unknown events store backend {self.store_backend!r}; "
                f"expected one of {', '.join(STORE_BACKENDS)}"
            )

    @classmethod
    def from_settings(cls, settings: Any) -> Self:
        """Build from a Django settings object (or anything with the same attributes)."""
        raw_port = getattr(settings, "DATABASE_PORT", cls.database_port)
        try:
            port = int(raw_port)
        except (TypeError, ValueError) as exc:
            raise ImproperlyConfigured(
                f"DATABASE_PORT must be an integer, got {raw_port!r}"
            ) from exc
        return cls(
            mongo_uri=getattr(settings, "MONGO_URI", cls.mongo_uri),
            database_host=getattr(settings, "DATABASE_HOST", cls.database_host),
            database_port=port,
            database_name=getattr(settings, "MONGO_DATABASE", cls.database_name),
            collection_name=getattr(settings, "MONGO_COLLECTION", cls.collection_name),
            store_backend=getattr(settings, "EVENTS_STORE_BACKEND", cls.store_backend),
        )
