"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
The JSON file mapping lives in stores/json_store.py.
"""

from dataclasses import dataclass
from datetime import UTC, date, datetime, tzinfo
from typing import Self
from uuid import uuid4

from agenda.domain.errors import ValidationError


def generate_event_id(now: datetime | None = None) -> str:
    """Return a fresh opaque event id: UTC timestamp plus a random suffix."""
    now = now or datetime.now(UTC)
    return f"{now.strftime('%Y%m%d%H%M%S')}-{uuid4().hex[:8]}"


@dataclass
class Event:
    """Domain representation of a calendar Event."""

    id: str
    title: str
    start_time: datetime
    end_time: datetime
    tags: list[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(
        cls,
        title: str,
        start_time: datetime,
        end_time: datetime,
        tags: list[str] | None = None,
    ) -> Self:
        """Build a new event with a fresh id. Does not validate."""
        now = datetime.now(UTC)
        return cls(
            id=generate_event_id(now),
            title=title,
            start_time=start_time,
            end_time=end_time,
            tags=list(tags or []),
            created_at=now,
            updated_at=now,
        )

    def update(
        self,
        title: str,
        start_time: datetime,
        end_time: datetime,
        tags: list[str],
    ) -> None:
        """Replace every mutable field and refresh updated_at."""
        self.title = title
        self.start_time = start_time
        self.end_time = end_time
        self.tags = list(tags)
        self.updated_at = datetime.now(UTC)

    def validate(self) -> None:
        """Raise ValidationError when the event breaks a field invariant."""
        if self.title == "":
            raise ValidationError(field="title", message="Title cannot be empty")
        if self.start_time > self.end_time:
            raise ValidationError(
                field="endTime",
                message="End time cannot be before start time",
            )

    def starts_on(self, day: date, tz: tzinfo) -> bool:
        """Whether start_time falls on the calendar day `day` in zone `tz`."""
        return self.start_time.astimezone(tz).date() == day
