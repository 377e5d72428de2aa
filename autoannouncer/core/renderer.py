"""Template rendering: literal placeholder substitution.

Exactly four tokens are recognised: ``{player}``, ``{room}``, ``{reason}``
and ``{time}``.  Everything else, including other ``{...}`` text, is
copied through unchanged.  Substituted values are never re-scanned, so a
player called ``{room}`` shows up literally.
"""

from __future__ import annotations

import re
from enum import Enum

from autoannouncer.models.events import TemplateContext

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class Placeholder(str, Enum):
    """Tokens substituted at render time."""

    PLAYER = "{player}"
    ROOM = "{room}"
    REASON = "{reason}"
    TIME = "{time}"


_PLACEHOLDER_RE = re.compile(
    "|".join(re.escape(token.value) for token in Placeholder)
)


def format_time(context: TemplateContext) -> str:
    """Format the context timestamp in the host's local time zone."""
    moment = context.time
    if moment.tzinfo is not None:
        moment = moment.astimezone()
    return moment.strftime(TIME_FORMAT)


def render(template: str, context: TemplateContext) -> str:
    """Render *template* with the values in *context*.

    A blank template renders to ``""`` so an operator can silence one
    announcement by emptying its template.

    Examples
    --------
    >>> render("{player} joined {room}", TemplateContext(player="Ann", room="Lobby"))
    'Ann joined Lobby'
    >>> render("   ", TemplateContext(player="Ann"))
    ''
    """
    if not template or not template.strip():
        return ""

    values = {
        Placeholder.PLAYER.value: context.player,
        Placeholder.ROOM.value: context.room,
        Placeholder.REASON.value: context.reason or "",
        Placeholder.TIME.value: format_time(context),
    }
    return _PLACEHOLDER_RE.sub(lambda match: values[match.group(0)], template)
