"""``autoannouncer init``: materialize the default announcements file."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from autoannouncer.cli.commands import open_store

console = Console()


def init_cmd(
    base_dir: Optional[Path] = typer.Option(
        None,
        "--base-dir",
        "-d",
        help="Application base directory (defaults to AUTOANNOUNCER_BASE_DIR or cwd).",
    ),
) -> None:
    """Write ``config/announcements.json`` with the default templates.

    An existing file is never overwritten.
    """
    store = open_store(base_dir)
    try:
        created = store.ensure_file()
    except OSError as exc:
        console.print(f"[bold red]Cannot create {store.path}:[/bold red] {exc}")
        raise typer.Exit(code=1)

    if created:
        console.print(f"[green]Created[/green] {store.path}")
    else:
        console.print(f"[yellow]Already exists:[/yellow] {store.path}")
