"""AutoAnnouncer CLI: Typer-based operator tooling.

Provides the ``autoannouncer`` command for creating, checking and
previewing the announcements file, and for simulating an event end to
end.  The game server itself never calls into this package.

All output uses Rich for formatted terminal display.
"""
