"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from events.domain import Event, EventId
from events.services import EventService
from events.stores import InMemoryEventStore

NOW = datetime(2026, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def service(store: InMemoryEventStore) -> EventService:
    return EventService(store=store, clock=lambda: NOW)


@pytest.fixture
def make_event():
    """Build a stored-ready Event with sensible defaults."""

    def _make_event(**overrides) -> Event:
        fields = {
            "id": EventId.generate(),
            "event_name": "Summer Concert",
            "tags": frozenset({"Rock", "Outdoor"}),
            "ticket_price": Decimal("25.00"),
            "event_date_time": NOW + timedelta(days=7),
            "duration_minutes": 120,
        }
        fields.update(overrides)
        return Event(**fields)

    return _make_event
