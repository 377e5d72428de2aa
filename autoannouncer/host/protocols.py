"""Protocols and the subscription token shared with the host."""

from __future__ import annotations

import uuid
from collections.abc import Callable, Iterable
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from autoannouncer.models.events import EventKind

EventHandler = Callable[[Any], None]


class Subscription(BaseModel):
    """Registration token returned by ``EventSource.subscribe``."""

    model_config = ConfigDict(frozen=True)

    subscription_id: str = Field(default_factory=lambda: f"sub-{uuid.uuid4().hex[:12]}")
    kind: EventKind
    handler: EventHandler


@runtime_checkable
class EventSource(Protocol):
    """Where "player joined" / "game ended" notifications come from."""

    def subscribe(self, kind: EventKind, handler: EventHandler) -> Subscription:
        """Register *handler* for *kind* and return its token."""
        ...

    def unsubscribe(self, subscription: Subscription) -> None:
        """Release a token.  Unknown tokens are ignored."""
        ...


@runtime_checkable
class BroadcastTarget(Protocol):
    """One recipient group, typically a running game instance.

    Attributes
    ----------
    target_name : str
        Human-readable identifier used in log entries (e.g. the room code).
    """

    @property
    def target_name(self) -> str:
        ...

    def send_chat(self, message: str) -> None:
        """Send *message* to every member.  May raise; the caller copes."""
        ...


TargetProvider = Callable[[], Iterable[BroadcastTarget]]
