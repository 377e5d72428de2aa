"""``autoannouncer preview``: render a template with sample values."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from autoannouncer.cli.commands import EventChoice, open_store
from autoannouncer.core.bridge import UNKNOWN
from autoannouncer.core.renderer import render
from autoannouncer.errors import ConfigLoadError
from autoannouncer.models.config import AnnouncementConfig
from autoannouncer.models.events import TemplateContext

console = Console()


def preview_cmd(
    event: EventChoice = typer.Option(
        EventChoice.PLAYER_JOINED, "--event", "-e", help="Which template to render."
    ),
    player: str = typer.Option(UNKNOWN, "--player", help="Sample player name."),
    room: str = typer.Option("", "--room", help="Sample room name."),
    reason: str = typer.Option(UNKNOWN, "--reason", help="Sample end reason."),
    base_dir: Optional[Path] = typer.Option(
        None,
        "--base-dir",
        "-d",
        help="Application base directory (defaults to AUTOANNOUNCER_BASE_DIR or cwd).",
    ),
) -> None:
    """Render the configured template for *event* and print it.

    Falls back to the default templates when no file exists yet.
    """
    store = open_store(base_dir)
    if store.path.exists():
        try:
            config = store.read()
        except ConfigLoadError as exc:
            console.print(f"[bold red]Invalid config:[/bold red] {escape(str(exc))}")
            raise typer.Exit(code=1)
    else:
        config = AnnouncementConfig()

    if event == EventChoice.PLAYER_JOINED:
        message = render(config.player_join_message, TemplateContext(player=player, room=room))
    else:
        message = render(config.game_ended_message, TemplateContext(reason=reason))

    if not message:
        console.print("[dim](silenced: template is blank)[/dim]")
        return
    console.print(escape(message))
