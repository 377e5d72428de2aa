"""Exception types raised inside AutoAnnouncer.

None of these cross the plugin boundary: ``ConfigStore.load`` absorbs
``ConfigLoadError`` and falls back to defaults.  The strict reader is
exposed for operator tooling that wants to report the problem instead.
"""

from __future__ import annotations

from pathlib import Path


class AnnouncerError(Exception):
    """Base class for AutoAnnouncer errors."""


class ConfigLoadError(AnnouncerError):
    """Raised when the announcements file cannot be read or validated."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")
