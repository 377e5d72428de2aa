"""AutoAnnouncer: templated chat announcements for a multiplayer game server.

Listens for "player joined" and "game ended" events, renders the matching
template from ``config/announcements.json`` and broadcasts the result to
every running game instance.  The templates can be reloaded at any time
without restarting the host.
"""

__version__ = "1.0.0"
__description__ = "Templated join / game-end announcements for game server hosts"

from autoannouncer.host import LocalEventBus
from autoannouncer.models import GameEndedEvent, PlayerJoinedEvent
from autoannouncer.plugin import AutoAnnouncerPlugin

__all__ = [
    "AutoAnnouncerPlugin",
    "GameEndedEvent",
    "LocalEventBus",
    "PlayerJoinedEvent",
    "__version__",
]
