"""AutoAnnouncer data models: Pydantic v2, frozen (immutable)."""

from autoannouncer.models.config import (
    DEFAULT_GAME_ENDED_MESSAGE,
    DEFAULT_PLAYER_JOIN_MESSAGE,
    AnnouncementConfig,
)
from autoannouncer.models.events import (
    AnnouncerEvent,
    EventKind,
    GameEndedEvent,
    PlayerJoinedEvent,
    TemplateContext,
)

__all__ = [
    # config
    "AnnouncementConfig",
    "DEFAULT_PLAYER_JOIN_MESSAGE",
    "DEFAULT_GAME_ENDED_MESSAGE",
    # events
    "EventKind",
    "PlayerJoinedEvent",
    "GameEndedEvent",
    "AnnouncerEvent",
    "TemplateContext",
]
