"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_CREATED = "EVENT_NOT_CREATED"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    EVENT_NOT_UPDATED = "EVENT_NOT_UPDATED"
    EVENT_NOT_DELETED = "EVENT_NOT_DELETED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotCreatedError(DomainError):
    """Raised when a new event could not be persisted."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_CREATED,
            message="Event could not be created",
        )


class EventNotFoundError(DomainError):
    """Raised when an event, or the event collection, is not found."""

    def __init__(self, event_id: str | None = None) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found" if event_id is not None else "No events found",
        )
        self.event_id = event_id


class EventNotUpdatedError(DomainError):
    """Raised when an update could not be applied."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_UPDATED,
            message="Event could not be updated",
        )
        self.event_id = event_id


class EventNotDeletedError(DomainError):
    """Raised when an event could not be deleted."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_DELETED,
            message="Event could not be deleted",
        )
        self.event_id = event_id


class InternalError(DomainError):
    """Raised for failures that have no operation-specific kind."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INTERNAL_ERROR,
            message="Internal server error",
        )
