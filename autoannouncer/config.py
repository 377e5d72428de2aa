"""Process settings: env-driven via pydantic-settings.

Reads AUTOANNOUNCER_* environment variables and an optional .env file.
These settings locate the announcements file; the templates themselves
live in that file and are handled by ``ConfigStore``.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings with environment variable overrides.

    Examples
    --------
    Override via environment::

        export AUTOANNOUNCER_BASE_DIR=/srv/impostor
        export AUTOANNOUNCER_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="AUTOANNOUNCER_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application base directory; the config directory is created under it
    base_dir: Path = Field(default_factory=Path.cwd)
    config_dir: str = "config"
    config_file: str = "announcements.json"

    log_level: str = "INFO"

    @property
    def config_path(self) -> Path:
        """Full path of the announcements file."""
        return self.base_dir / self.config_dir / self.config_file


# Module-level singleton, import as `from autoannouncer.config import settings`
settings = Settings()
