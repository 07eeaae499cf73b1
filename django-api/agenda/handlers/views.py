"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Never contain business logic
- Leave domain error mapping to handlers.exceptions
"""

import logging

from django.apps import apps
from django.utils import timezone
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from agenda.handlers.serializers import (
    EventCreateSerializer,
    EventDateSerializer,
    EventListQuerySerializer,
    EventSerializer,
    EventUpdateSerializer,
)
from agenda.services.event_service import EventService
from agenda.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class EventServiceMixin:
    """Resolves the EventService a view talks to.

    `store` can be injected through `as_view(store=...)`; otherwise the store
    owned by the agenda app config is used.
    """

    store: EventStore | None = None

    def get_service(self) -> EventService:
        store = self.store
        if store is None:
            store = apps.get_app_config("agenda").get_store()
        return EventService(store)


class HealthView(APIView):
    """Handler for GET /api/health"""

    def get(self, request: Request) -> Response:
        return Response(
            {
                "status": "ok",
                "service": "agenda",
                "time": timezone.now().isoformat(),
            }
        )


class EventListView(EventServiceMixin, APIView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        query = EventListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        filters = query.validated_data
        events = self.get_service().list_events(
            on_date=filters.get("date"),
            tag=filters.get("tag"),
            limit=filters.get("limit"),
        )
        return Response(
            {"events": EventSerializer(events, many=True).data, "count": len(events)}
        )

    def post(self, request: Request) -> Response:
        serializer = EventCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        event = self.get_service().create_event(
            title=data["title"],
            start_time=data["start_time"],
            end_time=data["end_time"],
            tags=data.get("tags"),
        )
        return Response(
            {"message": "Event created", "event": EventSerializer(event).data},
            status=status.HTTP_201_CREATED,
        )


class EventDetailView(EventServiceMixin, APIView):
    """Handler for GET/PUT/PATCH/DELETE /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        event = self.get_service().get_event(event_id)
        return Response(EventSerializer(event).data)

    def put(self, request: Request, event_id: str) -> Response:
        serializer = EventUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        event = self.get_service().update_event(
            event_id,
            title=data.get("title"),
            start_time=data.get("start_time"),
            end_time=data.get("end_time"),
            tags=data.get("tags"),
        )
        return Response({"message": "Event updated", "event": EventSerializer(event).data})

    # Every update is partial.
    patch = put

    def delete(self, request: Request, event_id: str) -> Response:
        self.get_service().delete_event(event_id)
        return Response({"message": "Event deleted", "id": event_id})


class EventsByDateView(EventServiceMixin, APIView):
    """Handler for GET /api/events/date/{date}; today when no date is given."""

    def get(self, request: Request, date: str | None = None) -> Response:
        if date:
            serializer = EventDateSerializer(data={"date": date})
            serializer.is_valid(raise_exception=True)
            day = serializer.validated_data["date"]
        else:
            day = timezone.localdate()
        events = self.get_service().events_on(day)
        return Response(
            {
                "events": EventSerializer(events, many=True).data,
                "date": day.isoformat(),
                "count": len(events),
            }
        )


class EventSearchView(EventServiceMixin, APIView):
    """Handler for GET /api/events/search/{query} and /api/events/search/?q="""

    def get(self, request: Request, query: str | None = None) -> Response:
        query = query or request.query_params.get("q", "")
        events = self.get_service().search_events(query)
        logger.debug("Search %r matched %d events", query, len(events))
        return Response(
            {
                "events": EventSerializer(events, many=True).data,
                "query": query,
                "count": len(events),
            }
        )
