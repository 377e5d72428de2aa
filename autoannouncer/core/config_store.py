"""ConfigStore — loads, defaults, and hot-reloads the announcement templates.

Layout: {base_dir}/config/announcements.json

The first load writes the default templates when no file exists.  Any
later failure (unreadable file, broken JSON, wrong field types) is logged
and the defaults are used in memory only; the file on disk is left alone
so the operator can fix it and reload.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from autoannouncer.errors import ConfigLoadError
from autoannouncer.models.config import AnnouncementConfig

logger = logging.getLogger(__name__)


def dump_config(config: AnnouncementConfig) -> str:
    """Serialize *config* the way it is stored on disk (indented, UTF-8 text)."""
    return json.dumps(config.to_file_dict(), indent=2, ensure_ascii=False) + "\n"


class ConfigStore:
    """Owns the active ``AnnouncementConfig`` for one plugin instance.

    ``current`` is replaced as a whole on every load, so a reader that
    grabs it once always sees both templates from the same file version.

    Parameters
    ----------
    base_dir:
        Application base directory.
    config_dir:
        Directory under *base_dir* holding the file.
    file_name:
        Name of the JSON file.
    """

    def __init__(
        self,
        base_dir: Path | str,
        *,
        config_dir: str = "config",
        file_name: str = "announcements.json",
    ) -> None:
        self._path = Path(base_dir) / config_dir / file_name
        self._current = AnnouncementConfig()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def current(self) -> AnnouncementConfig:
        """The configuration handlers should render with."""
        return self._current

    # ------------------------------------------------------------------
    # Load / reload
    # ------------------------------------------------------------------

    def load(self) -> AnnouncementConfig:
        """Load the file, creating it with defaults first if it is missing.

        Never raises.  On failure the defaults become current and the error
        is logged with its traceback.
        """
        try:
            self.ensure_file()
            config = self.read()
        except Exception:
            logger.exception(
                "Failed to load announcements config from %s, using defaults",
                self._path,
            )
            config = AnnouncementConfig()

        self._current = config
        return config

    def reload(self) -> AnnouncementConfig:
        """Re-read the file; same failure policy as ``load``."""
        config = self.load()
        logger.info("Announcements config reloaded from %s", self._path)
        return config

    # ------------------------------------------------------------------
    # File access
    # ------------------------------------------------------------------

    def ensure_file(self) -> bool:
        """Create the directory and the default file if absent.

        Returns ``True`` when a new file was written.
        """
        self._path.parent.mkdir(parents=True, exist_ok=True)
        if self._path.exists():
            return False

        self._path.write_text(dump_config(AnnouncementConfig()), encoding="utf-8")
        logger.info("Wrote default config to %s", self._path)
        return True

    def read(self) -> AnnouncementConfig:
        """Read and validate the file without touching ``current``.

        Raises
        ------
        ConfigLoadError
            If the file cannot be read, is not valid JSON, or does not
            validate as an ``AnnouncementConfig``.
        """
        try:
            # utf-8-sig: editors on Windows like to prepend a BOM
            text = self._path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigLoadError(self._path, f"cannot read file: {exc}") from exc

        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigLoadError(self._path, f"invalid JSON: {exc}") from exc

        if data is None:
            logger.warning("Config file %s holds null, using defaults", self._path)
            return AnnouncementConfig()

        try:
            return AnnouncementConfig.model_validate(data)
        except ValidationError as exc:
            raise ConfigLoadError(self._path, f"invalid config: {exc}") from exc
