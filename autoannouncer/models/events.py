"""Host event payloads and the per-event template context.

The plugin only needs two or three scalar fields per event kind, so the
payloads are a small tagged variant rather than a mirror of the host's
object model.  Handlers read these fields with ``getattr``, so any host
object exposing the same attribute names is accepted as well.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class EventKind(str, Enum):
    """The two host event kinds the announcer listens to."""

    PLAYER_JOINED = "player_joined"
    GAME_ENDED = "game_ended"


class PlayerJoinedEvent(BaseModel):
    """A player joined a game instance."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[EventKind.PLAYER_JOINED] = EventKind.PLAYER_JOINED
    player_name: str | None = None
    room: str | None = None  # room / session code


class GameEndedEvent(BaseModel):
    """A game instance finished.

    ``reason`` is whatever the host reports (a string, an enum member, ...);
    it is turned into text when the announcement is built.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal[EventKind.GAME_ENDED] = EventKind.GAME_ENDED
    reason: Any = None


AnnouncerEvent = Union[PlayerJoinedEvent, GameEndedEvent]


class TemplateContext(BaseModel):
    """Values available to a template for one event occurrence."""

    model_config = ConfigDict(frozen=True)

    player: str = ""
    room: str = ""
    reason: str | None = None
    time: datetime = Field(default_factory=datetime.now)
