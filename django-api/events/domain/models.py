"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from events.domain.value_objects import EventId


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event.

    ``tags`` and ``ticket_price`` keep ``None`` distinct from an empty set
    and from zero. A ``duration_minutes`` of 0 means no duration was given.
    """

    id: EventId | None = None
    event_name: str | None = None
    tags: frozenset[str] | None = None
    ticket_price: Decimal | None = None
    event_date_time: datetime | None = None
    duration_minutes: int = 0


@dataclass(frozen=True)
class EventPatch:
    """Fields to overwrite on an existing Event.

    Fields left at their default are not applied.
    """

    event_name: str | None = None
    tags: frozenset[str] | None = None
    ticket_price: Decimal | None = None
    event_date_time: datetime | None = None
    duration_minutes: int = 0
