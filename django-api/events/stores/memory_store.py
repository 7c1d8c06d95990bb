"""Dict-backed EventStore, used for tests and local wiring."""

from events.domain import Event, EventId
from events.stores.interfaces import EventStore


class InMemoryEventStore(EventStore):
    """Keeps events in insertion order. Replacing an event keeps its position."""

    def __init__(self, events: list[Event] | None = None) -> None:
        self._events: dict[EventId, Event] = {}
        for event in events or ():
            self.save_event(event)

    def save_event(self, event: Event) -> Event:
        if event.id is None:
            raise ValueError("Cannot store an event without an ID")
        self._events[event.id] = event
        return event

    def get_event(self, event_id: EventId) -> Event | None:
        return self._events.get(event_id)

    def list_events(self) -> list[Event]:
        return list(self._events.values())

    def event_exists(self, event_id: EventId) -> bool:
        return event_id in self._events

    def delete_event(self, event_id: EventId) -> None:
        self._events.pop(event_id, None)
