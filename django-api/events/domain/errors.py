"""Domain error codes for the events module.

Errors fall into two categories, ``InvalidArgumentError`` and
``NotFoundError``, so callers can branch on the category instead of
matching message text.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_EVENT = "INVALID_EVENT"
    INVALID_TICKET_PRICE = "INVALID_TICKET_PRICE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidArgumentError(DomainError):
    """Caller-supplied data violates a precondition."""


class NotFoundError(DomainError):
    """A referenced identifier does not exist."""


class EventNotFoundError(NotFoundError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class InvalidEventIdError(InvalidArgumentError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidEventError(InvalidArgumentError):
    """Raised when a required event payload is missing."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT,
            message="Event cannot be null",
        )


class InvalidTicketPriceError(InvalidArgumentError):
    """Raised when a ticket price is missing or negative."""

    def __init__(self, message: str = "Ticket price cannot be negative") -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_PRICE,
            message=message,
        )
