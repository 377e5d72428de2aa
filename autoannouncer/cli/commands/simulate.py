"""``autoannouncer simulate``: run one event through the whole pipeline.

Builds a ``LocalEventBus`` and a handful of console-backed game
instances, enables the plugin, publishes the event, then disables the
plugin again.  Instances listed with ``--fail`` refuse the message, which
shows the partial-failure path.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from autoannouncer.cli.commands import EventChoice
from autoannouncer.config import Settings, settings
from autoannouncer.host import LocalEventBus
from autoannouncer.models.events import GameEndedEvent, PlayerJoinedEvent
from autoannouncer.plugin import AutoAnnouncerPlugin

console = Console()


class ConsoleInstance:
    """A fake game instance that prints what it receives."""

    def __init__(self, code: str, *, fail: bool = False) -> None:
        self.code = code
        self.fail = fail
        self.received: list[str] = []

    @property
    def target_name(self) -> str:
        return self.code

    def send_chat(self, message: str) -> None:
        if self.fail:
            raise ConnectionError(f"instance {self.code} is not accepting messages")
        self.received.append(message)
        console.print(f"[cyan]{self.code}[/cyan] <- {escape(message)}")


def simulate_cmd(
    event: EventChoice = typer.Option(
        EventChoice.PLAYER_JOINED, "--event", "-e", help="Which event to publish."
    ),
    player: Optional[str] = typer.Option(None, "--player", help="Joining player's name."),
    room: Optional[str] = typer.Option(None, "--room", help="Room the player joined."),
    reason: Optional[str] = typer.Option(None, "--reason", help="Why the game ended."),
    instances: int = typer.Option(3, "--instances", "-n", min=0, help="Number of game instances."),
    fail: Optional[List[int]] = typer.Option(
        None, "--fail", help="Index of an instance that rejects messages (repeatable)."
    ),
    base_dir: Optional[Path] = typer.Option(
        None,
        "--base-dir",
        "-d",
        help="Application base directory (defaults to AUTOANNOUNCER_BASE_DIR or cwd).",
    ),
) -> None:
    """Publish one event and show which instances received the announcement."""
    failing = set(fail or [])
    games = [
        ConsoleInstance(f"GAME{index}", fail=index in failing)
        for index in range(instances)
    ]
    bus = LocalEventBus()
    run_settings = Settings(
        base_dir=base_dir or settings.base_dir,
        config_dir=settings.config_dir,
        config_file=settings.config_file,
        log_level=settings.log_level,
    )
    plugin = AutoAnnouncerPlugin(bus, lambda: games, settings=run_settings)

    plugin.enable()
    try:
        if event == EventChoice.PLAYER_JOINED:
            bus.publish(PlayerJoinedEvent(player_name=player, room=room))
        else:
            bus.publish(GameEndedEvent(reason=reason))
    finally:
        plugin.disable()

    delivered = sum(1 for game in games if game.received)
    console.print(f"[bold]Delivered to {delivered}/{len(games)} instances[/bold]")
