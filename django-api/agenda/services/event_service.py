"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and partial-update merging
- Return domain models or raise domain errors
"""

from datetime import date, datetime

from agenda.domain import Event, ValidationError
from agenda.stores.interfaces import EventStore


class EventService:
    """Service for calendar event operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def list_events(
        self,
        on_date: date | None = None,
        tag: str | None = None,
        limit: int | None = None,
    ) -> list[Event]:
        """Return events, optionally filtered, ordered by start_time.

        `tag` matches whole tags ignoring case. `limit` caps the result after
        ordering.
        """
        if on_date is not None:
            events = self._store.get_by_date(on_date)
        else:
            events = self._store.get_all()
        if tag:
            wanted = tag.casefold()
            events = [
                event
                for event in events
                if any(candidate.casefold() == wanted for candidate in event.tags)
            ]
        events.sort(key=lambda event: (event.start_time, event.id))
        if limit is not None and limit > 0:
            events = events[:limit]
        return events

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        return self._store.get_by_id(event_id)

    def events_on(self, day: date | datetime) -> list[Event]:
        """Return the events starting on `day`, earliest first."""
        return self._store.get_by_date(day)

    def search_events(self, query: str) -> list[Event]:
        """Return events whose title contains `query`.

        Raises:
            ValidationError: If the query is empty.
        """
        if not query:
            raise ValidationError(field="query", message="Search query cannot be empty")
        return self._store.search(query)

    def create_event(
        self,
        title: str,
        start_time: datetime,
        end_time: datetime,
        tags: list[str] | None = None,
    ) -> Event:
        """Validate and store a new event.

        Raises:
            ValidationError: If the event breaks a field invariant.
            PersistenceError: If the store could not save it.
        """
        event = Event.create(title, start_time, end_time, tags)
        event.validate()
        self._store.create(event)
        return event

    def update_event(
        self,
        event_id: str,
        title: str | None = None,
        start_time: datetime | None = None,
        end_time: datetime | None = None,
        tags: list[str] | None = None,
    ) -> Event:
        """Apply a partial update; fields left as None keep their value.

        Raises:
            EventNotFoundError: If the event does not exist.
            ValidationError: If the merged event breaks a field invariant.
            PersistenceError: If the store could not save it.
        """
        event = self._store.get_by_id(event_id)
        event.update(
            title=event.title if title is None else title,
            start_time=event.start_time if start_time is None else start_time,
            end_time=event.end_time if end_time is None else end_time,
            tags=event.tags if tags is None else tags,
        )
        event.validate()
        self._store.update(event)
        return event

    def delete_event(self, event_id: str) -> None:
        """Delete an event by ID.

        Raises:
            EventNotFoundError: If the event does not exist.
            PersistenceError: If the store could not save the removal.
        """
        self._store.get_by_id(event_id)
        self._store.delete(event_id)
