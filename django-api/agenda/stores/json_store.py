"""JSON file implementation of the EventStore.

The whole collection lives in memory, keyed by id, and is mirrored to a
single JSON array on disk. Every mutation rewrites the file through a
temporary sibling that is atomically renamed over the target, so the file on
disk is always a complete snapshot.
"""

from contextlib import suppress
from dataclasses import replace
from datetime import UTC, date, datetime, tzinfo
import json
import logging
import os
from pathlib import Path
import tempfile
from typing import Any

from agenda.domain import (
    Event,
    EventAlreadyExistsError,
    EventFileFormatError,
    EventNotFoundError,
    PersistenceError,
)
from agenda.stores.interfaces import EventStore
from agenda.stores.locks import ReadWriteLock

logger = logging.getLogger(__name__)


def event_to_dict(event: Event) -> dict[str, Any]:
    """Map an event to its on-disk record."""
    return {
        "id": event.id,
        "title": event.title,
        "startTime": event.start_time.isoformat(),
        "endTime": event.end_time.isoformat(),
        "tags": list(event.tags),
        "createdAt": event.created_at.isoformat(),
        "updatedAt": event.updated_at.isoformat(),
    }


def event_from_dict(record: dict[str, Any], tz: tzinfo = UTC) -> Event:
    """Rebuild an event from its on-disk record.

    Raises KeyError, TypeError or ValueError when the record is unusable.
    Naive timestamps are read in `tz`; `null` tags load as an empty list.
    """
    event_id = record["id"]
    title = record["title"]
    if not isinstance(event_id, str) or not isinstance(title, str):
        raise TypeError("id and title must be strings")
    tags = record["tags"] or []
    if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
        raise TypeError("tags must be a list of strings")
    return Event(
        id=event_id,
        title=title,
        start_time=_parse_timestamp(record["startTime"], tz),
        end_time=_parse_timestamp(record["endTime"], tz),
        tags=tags,
        created_at=_parse_timestamp(record["createdAt"], tz),
        updated_at=_parse_timestamp(record["updatedAt"], tz),
    )


def _parse_timestamp(value: Any, tz: tzinfo) -> datetime:
    if not isinstance(value, str):
        raise TypeError(f"timestamp must be a string, got {type(value).__name__}")
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz)
    return parsed


def _copy(event: Event) -> Event:
    return replace(event, tags=list(event.tags))


class JsonFileEventStore(EventStore):
    """File-backed event store guarded by a reader/writer lock.

    Reads run concurrently. Mutations hold the lock exclusively across both
    the in-memory change and the disk write, so snapshots reach disk in the
    order the mutations completed. If writing fails the in-memory change is
    rolled back and PersistenceError is raised.

    Events handed in or out are copies; mutate a returned event and call
    update() to change stored state.
    """

    def __init__(self, path: str | Path, tz: tzinfo = UTC) -> None:
        self.path = Path(path).expanduser()
        self.tz = tz
        self._lock = ReadWriteLock()
        self._events: dict[str, Event] = {}
        self._load()

    def get_all(self) -> list[Event]:
        with self._lock.read_locked():
            return [_copy(event) for event in self._sorted_events()]

    def get_by_id(self, event_id: str) -> Event:
        with self._lock.read_locked():
            event = self._events.get(event_id)
            if event is None:
                raise EventNotFoundError(event_id)
            return _copy(event)

    def get_by_date(self, day: date | datetime) -> list[Event]:
        if isinstance(day, datetime):
            day = (day.astimezone(self.tz) if day.tzinfo else day).date()
        with self._lock.read_locked():
            matches = [
                _copy(event)
                for event in self._events.values()
                if event.starts_on(day, self.tz)
            ]
        matches.sort(key=lambda event: (event.start_time, event.id))
        return matches

    def search(self, query: str) -> list[Event]:
        needle = query.casefold()
        with self._lock.read_locked():
            return [
                _copy(event)
                for event in self._sorted_events()
                if needle in event.title.casefold()
            ]

    def create(self, event: Event) -> None:
        with self._lock.write_locked():
            if event.id in self._events:
                raise EventAlreadyExistsError(event.id)
            self._events[event.id] = _copy(event)
            try:
                self._save()
            except PersistenceError:
                del self._events[event.id]
                raise
        logger.info("Created event %s", event.id)

    def update(self, event: Event) -> None:
        with self._lock.write_locked():
            previous = self._events.get(event.id)
            if previous is None:
                raise EventNotFoundError(event.id)
            self._events[event.id] = _copy(event)
            try:
                self._save()
            except PersistenceError:
                self._events[event.id] = previous
                raise
        logger.info("Updated event %s", event.id)

    def delete(self, event_id: str) -> None:
        with self._lock.write_locked():
            previous = self._events.pop(event_id, None)
            if previous is None:
                raise EventNotFoundError(event_id)
            try:
                self._save()
            except PersistenceError:
                self._events[event_id] = previous
                raise
        logger.info("Deleted event %s", event_id)

    def _sorted_events(self) -> list[Event]:
        return [self._events[key] for key in sorted(self._events)]

    def _load(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("No events file at %s, starting empty", self.path)
            self._save()
            return
        except UnicodeDecodeError as exc:
            raise EventFileFormatError(str(self.path), f"not UTF-8 ({exc})") from exc
        except OSError as exc:
            raise PersistenceError(f"Failed to read events file {self.path}") from exc

        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise EventFileFormatError(str(self.path), f"invalid JSON ({exc})") from exc
        if not isinstance(payload, list):
            raise EventFileFormatError(str(self.path), "top-level value is not an array")

        events: dict[str, Event] = {}
        for index, record in enumerate(payload):
            if not isinstance(record, dict):
                raise EventFileFormatError(str(self.path), f"record {index} is not an object")
            try:
                event = event_from_dict(record, self.tz)
            except KeyError as exc:
                raise EventFileFormatError(
                    str(self.path), f"record {index} is missing {exc}"
                ) from exc
            except (TypeError, ValueError) as exc:
                raise EventFileFormatError(str(self.path), f"record {index}: {exc}") from exc
            # Later duplicates win.
            events[event.id] = event
        self._events = events
        logger.info("Loaded %d events from %s", len(events), self.path)

    def _save(self) -> None:
        """Write the full collection. Callers hold the write lock."""
        payload = [event_to_dict(event) for event in self._sorted_events()]
        try:
            data = json.dumps(payload, ensure_ascii=False, indent=2)
        except (TypeError, ValueError) as exc:
            raise PersistenceError("Failed to serialize events") from exc

        tmp_path: Path | None = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_path = Path(tmp.name)
                tmp.write(data)
                tmp.flush()
                os.fsync(tmp.fileno())
            tmp_path.chmod(0o644)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            if tmp_path is not None:
                with suppress(OSError):
                    tmp_path.unlink(missing_ok=True)
            raise PersistenceError("Failed to write events file") from exc
        logger.debug("Saved %d events to %s", len(payload), self.path)
