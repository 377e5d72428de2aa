"""Announcement routing: fans one rendered message out to every game instance.

Delivery is best effort: a failing instance never blocks the others and
never surfaces to the event that triggered the announcement.
"""

from autoannouncer.routing.fanout import BroadcastFanout

__all__ = ["BroadcastFanout"]
