"""Domain error codes for the agenda module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    EVENT_ALREADY_EXISTS = "EVENT_ALREADY_EXISTS"
    PERSISTENCE_FAILURE = "PERSISTENCE_FAILURE"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Raised when an event violates a field-level invariant."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(code=ErrorCode.VALIDATION_ERROR, message=message)
        self.field = field


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class EventAlreadyExistsError(DomainError):
    """Raised when an event id is already taken."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_ALREADY_EXISTS,
            message="Event already exists",
        )
        self.event_id = event_id


class PersistenceError(DomainError):
    """Raised when the events file cannot be read or written."""

    def __init__(self, message: str = "Failed to persist events") -> None:
        super().__init__(code=ErrorCode.PERSISTENCE_FAILURE, message=message)


class EventFileFormatError(PersistenceError):
    """Raised when the events file exists but cannot be decoded."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(message=f"Events file {path} is malformed: {reason}")
        self.path = path
        self.reason = reason
