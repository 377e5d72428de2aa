"""Host capabilities consumed by AutoAnnouncer.

The game server owns its event bus and its running game instances.  The
plugin only needs:

* an ``EventSource`` with token-based ``subscribe`` / ``unsubscribe``;
* a ``TargetProvider`` that enumerates the current ``BroadcastTarget``
  objects, each able to send one chat line to all of its members.

``LocalEventBus`` is an in-process ``EventSource`` for hosts without a
bus of their own (and for tests and the ``simulate`` command).
"""

from autoannouncer.host.local_bus import LocalEventBus
from autoannouncer.host.protocols import (
    BroadcastTarget,
    EventHandler,
    EventSource,
    Subscription,
    TargetProvider,
)

__all__ = [
    "BroadcastTarget",
    "EventHandler",
    "EventSource",
    "LocalEventBus",
    "Subscription",
    "TargetProvider",
]
