"""LocalEventBus: a thread-safe, in-process ``EventSource``."""

from __future__ import annotations

import logging
import threading
from typing import Any

from autoannouncer.host.protocols import EventHandler, Subscription
from autoannouncer.models.events import EventKind

logger = logging.getLogger(__name__)


class LocalEventBus:
    """Delivers published events to the handlers subscribed to their kind.

    A failing handler is logged and does not stop the remaining handlers.

    Usage
    -----
    >>> bus = LocalEventBus()
    >>> token = bus.subscribe(EventKind.GAME_ENDED, print)
    >>> bus.unsubscribe(token)
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._subscriptions: dict[str, Subscription] = {}

    def subscribe(self, kind: EventKind, handler: EventHandler) -> Subscription:
        subscription = Subscription(kind=EventKind(kind), handler=handler)
        with self._lock:
            self._subscriptions[subscription.subscription_id] = subscription
        logger.debug("Subscribed %s to %s", subscription.subscription_id, kind)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        with self._lock:
            removed = self._subscriptions.pop(subscription.subscription_id, None)
        if removed is not None:
            logger.debug("Unsubscribed %s", subscription.subscription_id)

    def subscriber_count(self, kind: EventKind | None = None) -> int:
        """Number of live subscriptions, optionally for one kind."""
        with self._lock:
            subs = list(self._subscriptions.values())
        if kind is None:
            return len(subs)
        return sum(1 for sub in subs if sub.kind == kind)

    def publish(self, event: Any) -> int:
        """Deliver *event* to every handler subscribed to ``event.kind``.

        Returns the number of handlers invoked.
        """
        kind = EventKind(event.kind)
        with self._lock:
            handlers = [sub.handler for sub in self._subscriptions.values() if sub.kind == kind]

        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception("Handler for %s event failed", kind.value)
        return len(handlers)
