"""Django ORM implementation of the EventStore."""

from events import models
from events.domain import Event, EventId
from events.stores.interfaces import EventStore


class DjangoEventStore(EventStore):
    """Database-backed event store using Django ORM."""

    def save_event(self, event: Event) -> Event:
        if event.id is None:
            raise ValueError("Cannot store an event without an ID")
        models.Event.objects.update_or_create(
            id=event.id.value,
            defaults={
                "event_name": event.event_name,
                "tags": sorted(event.tags) if event.tags is not None else None,
                "ticket_price": event.ticket_price,
                "event_date_time": event.event_date_time,
                "duration_minutes": event.duration_minutes,
            },
        )
        return self.get_event(event.id)

    def get_event(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.filter(id=event_id.value).first()
        if row is None:
            return None
        return _to_domain(row)

    def list_events(self) -> list[Event]:
        return [_to_domain(row) for row in models.Event.objects.all()]

    def event_exists(self, event_id: EventId) -> bool:
        return models.Event.objects.filter(id=event_id.value).exists()

    def delete_event(self, event_id: EventId) -> None:
        models.Event.objects.filter(id=event_id.value).delete()


def _to_domain(row: models.Event) -> Event:
    return Event(
        id=EventId(value=row.id),
        event_name=row.event_name,
        tags=frozenset(row.tags) if row.tags is not None else None,
        ticket_price=row.ticket_price,
        event_date_time=row.event_date_time,
        duration_minutes=row.duration_minutes,
    )
