from agenda.handlers.views import (
    EventDetailView,
    EventListView,
    EventSearchView,
    EventsByDateView,
    HealthView,
)

__all__ = [
    "EventDetailView",
    "EventListView",
    "EventSearchView",
    "EventsByDateView",
    "HealthView",
]
