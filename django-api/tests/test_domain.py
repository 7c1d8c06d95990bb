"""Unit tests for domain primitives and errors.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from dataclasses import FrozenInstanceError
from decimal import Decimal
from uuid import UUID

import pytest

from events.domain import Event, EventId, EventPatch, Money
from events.domain.errors import (
    ErrorCode,
    EventNotFoundError,
    InvalidArgumentError,
    InvalidEventIdError,
    InvalidTicketPriceError,
    NotFoundError,
)


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_positive_amount(self):
        """Money can be created with positive amount."""
        assert Money(Decimal("19.99")).amount == Decimal("19.99")

    def test_money_accepts_zero(self):
        """Money can be created with zero."""
        assert Money(Decimal("0")).amount == 0

    def test_money_rejects_negative_amount(self):
        """Money raises ValueError for negative amount."""
        with pytest.raises(ValueError):
            Money(Decimal("-0.01"))

    def test_money_str_format(self):
        """Money string representation is formatted to 2 decimal places."""
        assert str(Money(Decimal("5"))) == "5.00"


class TestEventId:
    """Tests for EventId value object."""

    def test_from_string_valid_uuid(self):
        """EventId.from_string parses valid UUID."""
        raw = "12345678-1234-5678-1234-567812345678"
        assert EventId.from_string(raw).value == UUID(raw)

    def test_from_string_invalid_uuid(self):
        """EventId.from_string raises ValueError for invalid UUID."""
        with pytest.raises(ValueError):
            EventId.from_string("not-a-uuid")

    def test_generate_returns_distinct_ids(self):
        """EventId.generate never repeats."""
        assert len({EventId.generate() for _ in range(100)}) == 100

    def test_str_is_uuid_text(self):
        event_id = EventId.generate()
        assert str(event_id) == str(event_id.value)


class TestEvent:
    """Tests for the Event and EventPatch domain models."""

    def test_defaults_mean_not_provided(self):
        event = Event()
        assert event.id is None
        assert event.tags is None
        assert event.ticket_price is None
        assert event.duration_minutes == 0

    def test_event_is_immutable(self):
        with pytest.raises(FrozenInstanceError):
            Event().event_name = "changed"

    def test_patch_defaults_mean_not_provided(self):
        assert EventPatch() == EventPatch(
            event_name=None,
            tags=None,
            ticket_price=None,
            event_date_time=None,
            duration_minutes=0,
        )


class TestErrors:
    """Tests for domain error categories."""

    def test_not_found_carries_event_id(self):
        error = EventNotFoundError("abc")
        assert isinstance(error, NotFoundError)
        assert error.event_id == "abc"
        assert error.code is ErrorCode.EVENT_NOT_FOUND

    def test_invalid_errors_share_category(self):
        assert isinstance(InvalidEventIdError(), InvalidArgumentError)
        assert isinstance(InvalidTicketPriceError(), InvalidArgumentError)

    def test_str_includes_code_and_message(self):
        assert str(InvalidTicketPriceError()) == (
            "INVALID_TICKET_PRICE: Ticket price cannot be negative"
        )
