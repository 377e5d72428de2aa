"""AutoAnnouncerPlugin — the lifecycle the game server drives.

Wires ``ConfigStore``, ``BroadcastFanout`` and ``EventBridge`` together
and exposes ``enable`` / ``disable`` / ``reload`` plus the two event
entry points.  No error raised in here reaches the host.
"""

from __future__ import annotations

import logging
from typing import Any

from autoannouncer.config import Settings
from autoannouncer.config import settings as default_settings
from autoannouncer.core.bridge import EventBridge
from autoannouncer.core.config_store import ConfigStore
from autoannouncer.host.protocols import EventSource, TargetProvider
from autoannouncer.models.config import AnnouncementConfig
from autoannouncer.routing.fanout import BroadcastFanout

logger = logging.getLogger(__name__)


class AutoAnnouncerPlugin:
    """Announces player joins and game ends to every running game.

    Parameters
    ----------
    event_source:
        The host's event source.
    target_provider:
        Zero-argument callable returning the current game instances.
    settings:
        Where to find the announcements file.  Defaults to the
        environment-driven module settings.

    Usage
    -----
    >>> bus = LocalEventBus()
    >>> plugin = AutoAnnouncerPlugin(bus, lambda: server.games)
    >>> plugin.enable()
    >>> bus.publish(PlayerJoinedEvent(player_name="Ann", room="Lobby"))
    """

    name = "AutoAnnouncer"

    def __init__(
        self,
        event_source: EventSource,
        target_provider: TargetProvider,
        *,
        settings: Settings | None = None,
    ) -> None:
        settings = settings or default_settings
        self._store = ConfigStore(
            settings.base_dir,
            config_dir=settings.config_dir,
            file_name=settings.config_file,
        )
        self._fanout = BroadcastFanout(target_provider)
        self._bridge = EventBridge(self._store, self._fanout, event_source)

    @property
    def store(self) -> ConfigStore:
        return self._store

    @property
    def config(self) -> AnnouncementConfig:
        """The templates currently in effect."""
        return self._store.current

    @property
    def enabled(self) -> bool:
        return self._bridge.enabled

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def enable(self) -> bool:
        """Load the templates and subscribe to events.

        Returns ``True`` if the plugin went from disabled to enabled.
        """
        if self._bridge.enabled:
            logger.debug("%s already enabled", self.name)
            return False

        self._store.load()
        try:
            changed = self._bridge.enable()
        except Exception:
            logger.exception("%s failed to subscribe to host events", self.name)
            return False

        if changed:
            logger.info("%s enabled", self.name)
        return changed

    def disable(self) -> bool:
        """Unsubscribe from events.  Returns ``True`` if it was enabled."""
        changed = self._bridge.disable()
        if changed:
            logger.info("%s disabled", self.name)
        return changed

    def reload(self) -> AnnouncementConfig:
        """Re-read the templates without touching subscriptions."""
        config = self._bridge.reload()
        logger.info("%s reloaded", self.name)
        return config

    # ------------------------------------------------------------------
    # Event entry points
    # ------------------------------------------------------------------

    def on_player_joined(self, event: Any) -> None:
        self._bridge.on_player_joined(event)

    def on_game_ended(self, event: Any) -> None:
        self._bridge.on_game_ended(event)
