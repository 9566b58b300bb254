"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models

from events.domain.value_objects import new_event_id


class Event(models.Model):
    """Persistence model for events."""

    id = models.CharField(
        primary_key=True, max_length=64, default=new_event_id, editable=False
    )
    title = models.CharField(max_length=255)
    description = models.TextField()
    date = models.DateTimeField()
    location = models.CharField(max_length=255)
    organizer = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["created_at"], name="events_created_at_idx"),
        ]

    def __str__(self) -> str:
        return self.title
