from events.domain.models import Event, EventPatch
from events.domain.value_objects import EventId, Money

__all__ = [
    "Event",
    "EventPatch",
    "EventId",
    "Money",
]
