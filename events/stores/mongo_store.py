"""MongoDB implementation of the EventStore.

One document per event. The event ID is stored as ``_id``. ``seq`` is an
ObjectId taken at insert time; it breaks ties between events whose
``created_at`` falls in the same millisecond.
"""

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from bson import ObjectId
from pymongo import ASCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from events.domain import Event, EventCreate, EventId
from events.stores.interfaces import EventStore, IdGenerator, StoreError


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _to_bson_precision(value: datetime) -> datetime:
    # BSON dates hold milliseconds.
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


def _as_utc(value: datetime) -> datetime:
    # BSON dates come back naive unless the client is tz_aware.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _to_domain(document: dict[str, Any]) -> Event:
    return Event(
        id=EventId(value=document["_id"]),
        title=document["title"],
        description=document["description"],
        date=_as_utc(document["date"]),
        location=document["location"],
        organizer=document["organizer"],
    )


class MongoEventStore(EventStore):
    """Document-backed event store using pymongo."""

    def __init__(
        self,
        collection: Collection,
        id_generator: IdGenerator = EventId.generate,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._collection = collection
        self._id_generator = id_generator
        self._clock = clock

    def create_event(self, data: EventCreate) -> Event:
        now = _to_bson_precision(self._clock())
        document = {
            "_id": self._id_generator().value,
            **data.as_dict(),
            "date": _to_bson_precision(data.date),
            "seq": ObjectId(),
            "created_at": now,
            "updated_at": now,
        }
        try:
            self._collection.insert_one(document)
        except PyMongoError as exc:
            raise StoreError("insert failed") from exc
        return _to_domain(document)

    def get_event(self, event_id: EventId) -> Event | None:
        try:
            document = self._collection.find_one({"_id": event_id.value})
        except PyMongoError as exc:
            raise StoreError("find failed") from exc
        return _to_domain(document) if document is not None else None

    def list_events(self) -> list[Event]:
        try:
            documents = list(
                self._collection.find().sort(
                    [("created_at", ASCENDING), ("seq", ASCENDING)]
                )
            )
        except PyMongoError as exc:
            raise StoreError("find failed") from exc
        return [_to_domain(document) for document in documents]

    def update_event(self, event_id: EventId, changes: dict[str, Any]) -> Event | None:
        if "date" in changes:
            changes = {**changes, "date": _to_bson_precision(changes["date"])}
        try:
            document = self._collection.find_one_and_update(
                {"_id": event_id.value},
                {"$set": {**changes, "updated_at": _to_bson_precision(self._clock())}},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as exc:
            raise StoreError("update failed") from exc
        return _to_domain(document) if document is not None else None

    def delete_event(self, event_id: EventId) -> Event | None:
        try:
            document = self._collection.find_one_and_delete({"_id": event_id.value})
        except PyMongoError as exc:
            raise StoreError("delete failed") from exc
        return _to_domain(document) if document is not None else None
