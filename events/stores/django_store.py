"""Django ORM implementation of the EventStore."""

from typing import Any

from django.db import DatabaseError, transaction

from events import models
from events.domain import Event, EventCreate, EventId
from events.stores.interfaces import EventStore, IdGenerator, StoreError


def _to_domain(row: models.Event) -> Event:
    return Event(
        id=EventId(value=row.id),
        title=row.title,
        description=row.description,
        date=row.date,
        location=row.location,
        organizer=row.organizer,
    )


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def __init__(self, id_generator: IdGenerator = EventId.generate) -> None:
        self._id_generator = id_generator

    def create_event(self, data: EventCreate) -> Event:
        try:
            row = models.Event.objects.create(
                id=self._id_generator().value, **data.as_dict()
            )
        except DatabaseError as exc:
            raise StoreError("insert failed") from exc
        return _to_domain(row)

    def get_event(self, event_id: EventId) -> Event | None:
        try:
            row = models.Event.objects.filter(pk=event_id.value).first()
        except DatabaseError as exc:
            raise StoreError("select failed") from exc
        return _to_domain(row) if row is not None else None

    def list_events(self) -> list[Event]:
        try:
            rows = list(models.Event.objects.order_by("created_at", "pk"))
        except DatabaseError as exc:
            raise StoreError("select failed") from exc
        return [_to_domain(row) for row in rows]

    def update_event(self, event_id: EventId, changes: dict[str, Any]) -> Event | None:
        try:
            with transaction.atomic():
                row = (
                    models.Event.objects.select_for_update()
                    .filter(pk=event_id.value)
                    .first()
                )
                if row is None:
                    return None
                for field, value in changes.items():
                    setattr(row, field, value)
                row.save(update_fields=[*changes, "updated_at"])
        except DatabaseError as exc:
            raise StoreError("update failed") from exc
        return _to_domain(row)

    def delete_event(self, event_id: EventId) -> Event | None:
        try:
            with transaction.atomic():
                row = (
                    models.Event.objects.select_for_update()
                    .filter(pk=event_id.value)
                    .first()
                )
                if row is None:
                    return None
                snapshot = _to_domain(row)
                row.delete()
        except DatabaseError as exc:
            raise StoreError("delete failed") from exc
        return snapshot
