"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
Every operation must be safe to call from several threads at once.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime

from agenda.domain import Event


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def get_all(self) -> list[Event]:
        """Return every event, ordered by id."""
        ...

    @abstractmethod
    def get_by_id(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        ...

    @abstractmethod
    def get_by_date(self, day: date | datetime) -> list[Event]:
        """Return events starting on `day`, ordered by start_time ascending."""
        ...

    @abstractmethod
    def search(self, query: str) -> list[Event]:
        """Return events whose title contains `query`, ignoring case."""
        ...

    @abstractmethod
    def create(self, event: Event) -> None:
        """Insert a new event and persist.

        Raises:
            EventAlreadyExistsError: If the id is already taken.
            PersistenceError: If the new state could not be saved.
        """
        ...

    @abstractmethod
    def update(self, event: Event) -> None:
        """Replace the stored event with the same id and persist.

        Raises:
            EventNotFoundError: If the event does not exist.
            PersistenceError: If the new state could not be saved.
        """
        ...

    @abstractmethod
    def delete(self, event_id: str) -> None:
        """Remove an event and persist.

        Raises:
            EventNotFoundError: If the event does not exist.
            PersistenceError: If the new state could not be saved.
        """
        ...
