"""App config owning the process-wide event store."""

import logging
from zoneinfo import ZoneInfo

from django.apps import AppConfig
from django.conf import settings

from agenda.stores.interfaces import EventStore
from agenda.stores.json_store import JsonFileEventStore

logger = logging.getLogger(__name__)


class AgendaConfig(AppConfig):
    name = "agenda"
    verbose_name = "Agenda"

    store: EventStore | None = None

    def ready(self) -> None:
        # A corrupt events file must stop the process here, not on first request.
        if settings.AGENDA.get("LOAD_ON_STARTUP", True):
            self.get_store()

    def get_store(self) -> EventStore:
        if self.store is None:
            self.store = build_store()
        return self.store

    def set_store(self, store: EventStore | None) -> None:
        """Swap the store views use; None rebuilds it from settings on next use."""
        self.store = store


def build_store() -> JsonFileEventStore:
    config = settings.AGENDA
    store = JsonFileEventStore(config["EVENTS_FILE"], tz=ZoneInfo(config["TIME_ZONE"]))
    logger.info("Event store ready at %s (time zone %s)", store.path, config["TIME_ZONE"])
    return store
