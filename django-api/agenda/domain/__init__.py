from agenda.domain.errors import (
    DomainError,
    ErrorCode,
    EventAlreadyExistsError,
    EventFileFormatError,
    EventNotFoundError,
    PersistenceError,
    ValidationError,
)
from agenda.domain.models import Event, generate_event_id

__all__ = [
    "Event",
    "generate_event_id",
    "DomainError",
    "ErrorCode",
    "EventAlreadyExistsError",
    "EventFileFormatError",
    "EventNotFoundError",
    "PersistenceError",
    "ValidationError",
]
