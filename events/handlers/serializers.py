"""Serializers for transforming between API payloads and domain models."""

from rest_framework import serializers

from events.domain import EventCreate, EventUpdate
from events.handlers.validation import SerializerSchema


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField(source="id.value", read_only=True)
    title = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    date = serializers.DateTimeField(read_only=True)
    location = serializers.CharField(read_only=True)
    organizer = serializers.CharField(read_only=True)


class EventCreateSerializer(serializers.Serializer):
    """Input for POST /events."""

    title = serializers.CharField(max_length=255)
    description = serializers.CharField(allow_blank=True)
    date = serializers.DateTimeField()
    location = serializers.CharField(max_length=255)
    organizer = serializers.CharField(max_length=255)

    def to_domain(self) -> EventCreate:
        return EventCreate(**self.validated_data)


class EventUpdateSerializer(serializers.Serializer):
    """Input for PUT/PATCH /events/{event_id}. All fields optional."""

    title = serializers.CharField(max_length=255, required=False)
    description = serializers.CharField(allow_blank=True, required=False)
    date = serializers.DateTimeField(required=False)
    location = serializers.CharField(max_length=255, required=False)
    organizer = serializers.CharField(max_length=255, required=False)

    def to_domain(self) -> EventUpdate:
        return EventUpdate(**self.validated_data)


EVENT_CREATE_SCHEMA = SerializerSchema(EventCreateSerializer)
EVENT_UPDATE_SCHEMA = SerializerSchema(EventUpdateSerializer, partial=True)
