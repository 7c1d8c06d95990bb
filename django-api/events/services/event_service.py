"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

Queries load every event from the store and filter in memory.
"""

import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from operator import attrgetter
from uuid import UUID

from django.utils.timezone import is_naive, make_aware

from events.domain import Event, EventId, EventPatch, Money
from events.domain.errors import (
    EventNotFoundError,
    InvalidEventError,
    InvalidEventIdError,
    InvalidTicketPriceError,
)
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

DEFAULT_MIN_PRICE = Decimal("0")
DEFAULT_MAX_PRICE = Decimal("1000000")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    """Read naive datetimes as UTC so they compare with stored aware values."""
    if is_naive(value):
        return make_aware(value, timezone.utc)
    return value


class EventService:
    """Service for event catalog operations.

    Event IDs may be passed as ``EventId``, ``UUID`` or a UUID string.
    Naive datetimes are read as UTC.
    """

    def __init__(
        self,
        store: EventStore,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._store = store
        self._clock = clock or _utc_now

    def create_event(self, event: Event | None) -> Event:
        """Store a new event, generating an ID when it has none.

        Raises:
            InvalidEventError: If event is None.
            InvalidTicketPriceError: If the ticket price is negative.
        """
        if event is None:
            raise InvalidEventError()
        event = self._normalize(event)
        if event.id is None:
            event = replace(event, id=EventId.generate())
        saved = self._store.save_event(event)
        logger.info("Created event %s", saved.id)
        return saved

    def get_event_by_id(self, event_id: EventId | UUID | str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        parsed_id = self._parse_event_id(event_id)
        event = self._store.get_event(parsed_id)
        if event is None:
            raise EventNotFoundError(str(parsed_id))
        return event

    def get_all_events(self) -> list[Event]:
        """Return all events."""
        return self._store.list_events()

    def update_event(self, event_id: EventId | UUID | str, event: Event | None) -> Event:
        """Replace a stored event. The stored ID always wins over event.id.

        Raises:
            InvalidEventError: If event is None.
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            InvalidTicketPriceError: If the ticket price is negative.
        """
        if event is None:
            raise InvalidEventError()
        parsed_id = self._parse_event_id(event_id)
        if not self._store.event_exists(parsed_id):
            raise EventNotFoundError(str(parsed_id))
        event = self._normalize(event)
        saved = self._store.save_event(replace(event, id=parsed_id))
        logger.info("Updated event %s", parsed_id)
        return saved

    def partial_update_event(
        self, event_id: EventId | UUID | str, patch: EventPatch | None
    ) -> Event:
        """Overwrite only the fields that are set on the patch.

        Empty tags and non-positive durations count as not set.

        Raises:
            InvalidEventError: If patch is None.
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            InvalidTicketPriceError: If the ticket price is negative.
        """
        if patch is None:
            raise InvalidEventError()
        existing = self.get_event_by_id(event_id)

        changes = {}
        if patch.event_name is not None:
            changes["event_name"] = patch.event_name
        if patch.tags:
            changes["tags"] = frozenset(patch.tags)
        if patch.ticket_price is not None:
            changes["ticket_price"] = self._validate_price(patch.ticket_price)
        if patch.event_date_time is not None:
            changes["event_date_time"] = _as_utc(patch.event_date_time)
        if patch.duration_minutes and patch.duration_minutes > 0:
            changes["duration_minutes"] = patch.duration_minutes

        saved = self._store.save_event(replace(existing, **changes))
        logger.info("Patched event %s fields=%s", existing.id, sorted(changes))
        return saved

    def delete_event(self, event_id: EventId | UUID | str) -> None:
        """Delete an event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        parsed_id = self._parse_event_id(event_id)
        if not self._store.event_exists(parsed_id):
            raise EventNotFoundError(str(parsed_id))
        self._store.delete_event(parsed_id)
        logger.info("Deleted event %s", parsed_id)

    def get_events_by_tag(self, tag: str | None) -> list[Event]:
        """Return events with a tag containing ``tag``, case-insensitively."""
        if tag is None or not tag.strip():
            return []
        needle = tag.strip().lower()
        matches = [
            event
            for event in self._store.list_events()
            if event.tags is not None
            and any(t is not None and needle in t.lower() for t in event.tags)
        ]
        logger.debug("Tag %r matched %d events", needle, len(matches))
        return matches

    def get_upcoming_events(self) -> list[Event]:
        """Return events strictly after now, soonest first."""
        now = _as_utc(self._clock())
        upcoming = [
            event
            for event in self._store.list_events()
            if event.event_date_time is not None and event.event_date_time > now
        ]
        return sorted(upcoming, key=attrgetter("event_date_time"))

    def get_events_by_price_range(
        self,
        min_price: Decimal | None = None,
        max_price: Decimal | None = None,
    ) -> list[Event]:
        """Return priced events within [min_price, max_price].

        Missing bounds default to 0 and 1,000,000. Inverted bounds are swapped.
        """
        low = DEFAULT_MIN_PRICE if min_price is None else self._parse_price(min_price)
        high = DEFAULT_MAX_PRICE if max_price is None else self._parse_price(max_price)
        if low > high:
            low, high = high, low
        return [
            event
            for event in self._store.list_events()
            if event.ticket_price is not None and low <= event.ticket_price <= high
        ]

    def get_events_by_date_range(
        self, start: datetime | None, end: datetime | None
    ) -> list[Event]:
        """Return dated events within [start, end], or [] if a bound is missing."""
        if start is None or end is None:
            return []
        start, end = _as_utc(start), _as_utc(end)
        if start > end:
            start, end = end, start
        return [
            event
            for event in self._store.list_events()
            if event.event_date_time is not None
            and start <= event.event_date_time <= end
        ]

    def update_event_price(
        self, event_id: EventId | UUID | str, new_price: Decimal | None
    ) -> Event:
        """Set the ticket price of an event.

        Raises:
            InvalidTicketPriceError: If new_price is None or negative.
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        if new_price is None:
            logger.warning("Rejected missing ticket price for event %s", event_id)
            raise InvalidTicketPriceError("Ticket price is required")
        price = self._validate_price(new_price)
        event = self.get_event_by_id(event_id)
        saved = self._store.save_event(replace(event, ticket_price=price))
        logger.info("Updated price of event %s to %s", event.id, Money(price))
        return saved

    def _parse_event_id(self, event_id: EventId | UUID | str) -> EventId:
        if isinstance(event_id, EventId):
            return event_id
        if isinstance(event_id, UUID):
            return EventId(value=event_id)
        try:
            return EventId.from_string(event_id)
        except (TypeError, ValueError, AttributeError) as exc:
            raise InvalidEventIdError() from exc

    def _normalize(self, event: Event) -> Event:
        changes = {}
        if event.ticket_price is not None:
            changes["ticket_price"] = self._validate_price(event.ticket_price)
        if event.event_date_time is not None:
            changes["event_date_time"] = _as_utc(event.event_date_time)
        return replace(event, **changes)

    def _parse_price(self, price: Decimal | int | str) -> Decimal:
        try:
            return Decimal(price)
        except (InvalidOperation, TypeError):
            logger.warning("Rejected malformed ticket price %r", price)
            raise InvalidTicketPriceError("Invalid ticket price") from None

    def _validate_price(self, price: Decimal | int | str) -> Decimal:
        try:
            return Money(self._parse_price(price)).amount
        except ValueError:
            logger.warning("Rejected negative ticket price %s", price)
            raise InvalidTicketPriceError() from None
