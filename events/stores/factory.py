"""Builds the configured EventStore."""

import logging

from pymongo import MongoClient

from events.config import EventsConfig
from events.stores.django_store import DjangoEventStore
from events.stores.interfaces import EventStore
from events.stores.mongo_store import MongoEventStore

logger = logging.getLogger(__name__)


def build_mongo_client(config: EventsConfig) -> MongoClient:
    # MongoClient connects lazily; a URI takes precedence over host/port.
    return MongoClient(
        host=config.mongo_uri or config.database_host,
        port=config.database_port,
        tz_aware=True,
    )


def build_event_store(config: EventsConfig) -> EventStore:
    """Return the store selected by ``config.store_backend``."""
    if config.store_backend == "django":
        logger.info("Using Django ORM event store")
        return DjangoEventStore()

    client = build_mongo_client(config)
    logger.info(
        "Using MongoDB event store (database=%s, collection=%s)",
        config.database_name,
        config.collection_name,
    )
    return MongoEventStore(client[config.database_name][config.collection_name])
