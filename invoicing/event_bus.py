"""
Event bus for invoicing domain events.

Synchronous in-process pub/sub, cheap enough to fire on every keystroke-level
draft edit. Handlers run in the publisher's thread. A failing handler is
logged and skipped; the draft change it reacts to has already been applied.
"""

import logging
from collections import defaultdict
from typing import Callable

from invoicing.events import InvoicingEvent

logger = logging.getLogger(__name__)


def _event_name(event_type: str | type) -> str:
    return event_type if isinstance(event_type, str) else event_type.__name__


class EventBus:
    """
    In-process event bus.

    Subscribe by event class or class name, publish by event instance.
    Handlers are called in subscription order.
    """

    def __init__(self):
        self._subscribers: dict[str, list[Callable]] = defaultdict(list)

    def subscribe(self, event_type: str | type, callback: Callable) -> None:
        """
        Subscribe to events of a specific type.

        Args:
            event_type: Event class or its name (e.g. DraftUpdated or 'DraftUpdated')
            callback: Called with the event instance
        """
        self._subscribers[_event_name(event_type)].append(callback)

    def unsubscribe(self, event_type: str | type, callback: Callable) -> bool:
        """Remove a handler. Returns False if it was not subscribed."""
        handlers = self._subscribers.get(_event_name(event_type), [])
        if callback not in handlers:
            return False
        handlers.remove(callback)
        return True

    def publish(self, event: InvoicingEvent) -> None:
        """Deliver an event to every subscriber of its class."""
        event_type = type(event).__name__

        for callback in list(self._subscribers.get(event_type, [])):
            try:
                callback(event)
            except Exception:
                logger.exception(
                    "Handler %s failed for %s (event_id=%s)",
                    getattr(callback, "__name__", repr(callback)),
                    event_type,
                    event.event_id,
                )
