"""BroadcastFanout — best-effort delivery of one announcement to every instance.

Targets are enumerated fresh for each call.  A target that refuses the
message (or has gone away) is logged at info level and skipped; the rest
still get their copy.  If the targets cannot be enumerated at all, the
broadcast is abandoned for that call only.  Nothing is retried and
nothing is raised to the caller.
"""

from __future__ import annotations

import logging
from typing import Any

from autoannouncer.host.protocols import TargetProvider

logger = logging.getLogger(__name__)


def target_label(target: Any) -> str:
    """Name used for *target* in log entries."""
    try:
        return str(target.target_name)
    except Exception:
        return f"<{type(target).__name__}>"


class BroadcastFanout:
    """Sends announcements to all targets yielded by *target_provider*.

    Usage
    -----
    >>> fanout = BroadcastFanout(lambda: server.games)
    >>> fanout.broadcast("Welcome Ann!")
    """

    def __init__(self, target_provider: TargetProvider) -> None:
        self._target_provider = target_provider

    def broadcast(self, message: str) -> None:
        """Deliver *message* to every current target.

        Blank messages are never sent.
        """
        if not message or not message.strip():
            logger.debug("Blank announcement, nothing to broadcast")
            return

        try:
            targets = list(self._target_provider())
        except Exception:
            logger.exception("Failed to enumerate broadcast targets, announcement dropped")
            return

        delivered = 0
        for target in targets:
            try:
                target.send_chat(message)
                delivered += 1
            except Exception as exc:
                logger.info(
                    "Announcement not delivered to %s: %s", target_label(target), exc
                )

        logger.info("[AutoAnnouncer] %s", message)
        logger.debug("Announcement delivered to %d/%d targets", delivered, len(targets))
