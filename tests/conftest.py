"""Shared test fixtures for AutoAnnouncer."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from autoannouncer.config import Settings
from autoannouncer.core.bridge import EventBridge
from autoannouncer.core.config_store import ConfigStore
from autoannouncer.host import LocalEventBus
from autoannouncer.plugin import AutoAnnouncerPlugin
from autoannouncer.routing.fanout import BroadcastFanout


# ---------------------------------------------------------------------------
# Fake game instances
# ---------------------------------------------------------------------------


class FakeGame:
    """A game instance that records every chat line it is sent."""

    def __init__(self, code: str) -> None:
        self.code = code
        self.received: list[str] = []

    @property
    def target_name(self) -> str:
        return self.code

    def send_chat(self, message: str) -> None:
        self.received.append(message)


class BrokenGame(FakeGame):
    """A game instance whose send always fails."""

    def __init__(self, code: str) -> None:
        super().__init__(code)
        self.attempts = 0

    def send_chat(self, message: str) -> None:
        self.attempts += 1
        raise ConnectionError(f"{self.code} has gone away")


@pytest.fixture
def games() -> list[FakeGame]:
    """Three healthy game instances."""
    return [FakeGame("AAAA"), FakeGame("BBBB"), FakeGame("CCCC")]


@pytest.fixture
def make_game() -> Callable[..., FakeGame]:
    """Factory fixture: build a healthy or broken game instance."""

    def _factory(code: str = "GAME", *, broken: bool = False) -> FakeGame:
        return BrokenGame(code) if broken else FakeGame(code)

    return _factory


# ---------------------------------------------------------------------------
# Components
# ---------------------------------------------------------------------------


@pytest.fixture
def store(tmp_path: Path) -> ConfigStore:
    """A ConfigStore rooted at a temp base directory (nothing loaded yet)."""
    return ConfigStore(tmp_path)


@pytest.fixture
def config_path(store: ConfigStore) -> Path:
    return store.path


@pytest.fixture
def bus() -> LocalEventBus:
    return LocalEventBus()


@pytest.fixture
def fanout(games: list[FakeGame]) -> BroadcastFanout:
    return BroadcastFanout(lambda: games)


@pytest.fixture
def bridge(store: ConfigStore, fanout: BroadcastFanout, bus: LocalEventBus) -> EventBridge:
    store.load()
    return EventBridge(store, fanout, bus)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(base_dir=tmp_path)


@pytest.fixture
def plugin(bus: LocalEventBus, games: list[FakeGame], settings: Settings) -> AutoAnnouncerPlugin:
    """A plugin wired to the local bus and the fake games (not yet enabled)."""
    return AutoAnnouncerPlugin(bus, lambda: games, settings=settings)


@pytest.fixture
def write_config(config_path: Path) -> Callable[[Any], Path]:
    """Factory fixture: write *data* as the announcements file."""

    def _write(data: Any) -> Path:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        text = data if isinstance(data, str) else json.dumps(data, ensure_ascii=False)
        config_path.write_text(text, encoding="utf-8")
        return config_path

    return _write
