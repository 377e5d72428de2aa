"""EventBridge — turns host events into rendered, broadcast announcements.

Each handler reads the active configuration once, builds a
``TemplateContext`` from the few fields it needs, renders, and hands the
result to the fan-out.  A malformed payload costs only that one
announcement: the failure is logged and the host's dispatch carries on.
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Any

from autoannouncer.core.config_store import ConfigStore
from autoannouncer.core.renderer import render
from autoannouncer.host.protocols import EventSource, Subscription
from autoannouncer.models.config import AnnouncementConfig
from autoannouncer.models.events import EventKind, TemplateContext
from autoannouncer.routing.fanout import BroadcastFanout

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"


# ---------------------------------------------------------------------------
# Field extraction
# ---------------------------------------------------------------------------

def extract_player_name(event: Any) -> str:
    """Display name of the joining player, ``"Unknown"`` if missing."""
    name = getattr(event, "player_name", None)
    if name is None:
        return UNKNOWN
    text = str(name)
    return text if text.strip() else UNKNOWN


def extract_room(event: Any) -> str:
    """Room / session name, empty if missing."""
    room = getattr(event, "room", None)
    return "" if room is None else str(room)


def describe_reason(reason: Any) -> str:
    """Human-readable end reason.

    Enum members use their name (``GameOverReason.HostLeft`` -> ``"HostLeft"``).
    Anything absent, blank, or that cannot be turned into text is ``"Unknown"``.
    """
    if reason is None:
        return UNKNOWN
    if isinstance(reason, Enum):
        text = reason.name
    else:
        try:
            text = str(reason)
        except Exception:
            return UNKNOWN
    return text if text.strip() else UNKNOWN


# ---------------------------------------------------------------------------
# Bridge
# ---------------------------------------------------------------------------

class EventBridge:
    """Subscribes to the host's event source and announces what happens.

    ``enable`` and ``disable`` are idempotent: the bridge holds at most one
    subscription per event kind, and every token it took is released on
    ``disable``.

    Parameters
    ----------
    store:
        Source of the active templates.
    fanout:
        Delivers rendered announcements.
    event_source:
        Host event source to subscribe to.
    """

    def __init__(
        self,
        store: ConfigStore,
        fanout: BroadcastFanout,
        event_source: EventSource,
    ) -> None:
        self._store = store
        self._fanout = fanout
        self._event_source = event_source
        self._lock = threading.Lock()
        self._subscriptions: list[Subscription] = []

    @property
    def enabled(self) -> bool:
        return bool(self._subscriptions)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def enable(self) -> bool:
        """Subscribe both handlers.  Returns ``False`` if already subscribed.

        If the second subscription fails, the first is released before the
        error propagates, so nothing leaks.
        """
        with self._lock:
            if self._subscriptions:
                return False

            taken: list[Subscription] = []
            try:
                taken.append(
                    self._event_source.subscribe(EventKind.PLAYER_JOINED, self.on_player_joined)
                )
                taken.append(
                    self._event_source.subscribe(EventKind.GAME_ENDED, self.on_game_ended)
                )
            except Exception:
                for subscription in taken:
                    self._event_source.unsubscribe(subscription)
                raise

            self._subscriptions = taken
            logger.debug("EventBridge subscribed to %d event kinds", len(taken))
            return True

    def disable(self) -> bool:
        """Release every subscription.  Returns ``False`` if none were held."""
        with self._lock:
            if not self._subscriptions:
                return False

            subscriptions, self._subscriptions = self._subscriptions, []
            for subscription in subscriptions:
                try:
                    self._event_source.unsubscribe(subscription)
                except Exception:
                    logger.exception(
                        "Failed to unsubscribe %s", subscription.subscription_id
                    )
            logger.debug("EventBridge unsubscribed from %d event kinds", len(subscriptions))
            return True

    def reload(self) -> AnnouncementConfig:
        """Reload the templates.  Subscriptions are left as they are."""
        return self._store.reload()

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def on_player_joined(self, event: Any) -> None:
        try:
            config = self._store.current
            context = TemplateContext(
                player=extract_player_name(event),
                room=extract_room(event),
            )
            message = render(config.player_join_message, context)
            self._fanout.broadcast(message)
        except Exception:
            logger.exception("Failed to announce player join, announcement skipped")

    def on_game_ended(self, event: Any) -> None:
        try:
            config = self._store.current
            context = TemplateContext(reason=describe_reason(getattr(event, "reason", None)))
            message = render(config.game_ended_message, context)
            self._fanout.broadcast(message)
        except Exception:
            logger.exception("Failed to announce game end, announcement skipped")
