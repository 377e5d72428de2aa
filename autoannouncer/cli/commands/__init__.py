"""CLI subcommands."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from autoannouncer.config import settings
from autoannouncer.core.config_store import ConfigStore


def open_store(base_dir: Path | None) -> ConfigStore:
    """ConfigStore for *base_dir*, or for the configured base directory."""
    return ConfigStore(
        base_dir or settings.base_dir,
        config_dir=settings.config_dir,
        file_name=settings.config_file,
    )


class EventChoice(str, Enum):
    """Event kinds as spelled on the command line."""

    PLAYER_JOINED = "player-joined"
    GAME_ENDED = "game-ended"
