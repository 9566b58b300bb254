"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Validate input format through the body validation gate
- Call the use case
- Leave domain error mapping to events.handlers.errors
- Never contain business logic
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.handlers.serializers import (
    EVENT_CREATE_SCHEMA,
    EVENT_UPDATE_SCHEMA,
    EventCreateSerializer,
    EventSerializer,
    EventUpdateSerializer,
)
from events.handlers.validation import invalid_body_response, validate_body
from events.wiring import get_event_use_case


class EventListView(APIView):
    """Handler for GET and POST /events"""

    def get(self, request: Request) -> Response:
        events = get_event_use_case().get_all_events()
        return Response(EventSerializer(events, many=True).data)

    @validate_body(EVENT_CREATE_SCHEMA)
    def post(self, request: Request) -> Response:
        serializer = EventCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_body_response()
        event = get_event_use_case().create_new_event(serializer.to_domain())
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(APIView):
    """Handler for GET, PUT, PATCH and DELETE /events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        event = get_event_use_case().get_event_by_id(event_id)
        return Response(EventSerializer(event).data)

    @validate_body(EVENT_UPDATE_SCHEMA)
    def put(self, request: Request, event_id: str) -> Response:
        return self._update(request, event_id)

    @validate_body(EVENT_UPDATE_SCHEMA)
    def patch(self, request: Request, event_id: str) -> Response:
        return self._update(request, event_id)

    def delete(self, request: Request, event_id: str) -> Response:
        event = get_event_use_case().delete_event(event_id)
        return Response(EventSerializer(event).data)

    def _update(self, request: Request, event_id: str) -> Response:
        serializer = EventUpdateSerializer(data=request.data, partial=True)
        if not serializer.is_valid():
            return invalid_body_response()
        event = get_event_use_case().update_event(event_id, serializer.to_domain())
        return Response(EventSerializer(event).data)
