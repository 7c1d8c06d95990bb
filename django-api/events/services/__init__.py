"""Service wiring.

The store is passed in explicitly. When it is omitted, the class named by
the ``EVENTS_STORE`` setting is instantiated.
"""

from django.conf import settings
from django.utils.module_loading import import_string

from events.services.event_service import EventService
from events.stores.interfaces import EventStore

__all__ = ["EventService", "build_event_service"]


def build_event_service(store: EventStore | None = None) -> EventService:
    if store is None:
        store_class = import_string(settings.EVENTS_STORE)
        store = store_class()
    return EventService(store=store)
