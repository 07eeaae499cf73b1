from django.urls import path

from agenda.handlers import (
    EventDetailView,
    EventListView,
    EventSearchView,
    EventsByDateView,
    HealthView,
)

urlpatterns = [
    path("health", HealthView.as_view(), name="health"),
    path("events", EventListView.as_view(), name="event-list"),
    path("events/date/", EventsByDateView.as_view(), name="events-today"),
    path("events/date/<str:date>", EventsByDateView.as_view(), name="events-by-date"),
    path("events/search/", EventSearchView.as_view(), name="event-search"),
    path("events/search/<path:query>", EventSearchView.as_view(), name="event-search-path"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
]
