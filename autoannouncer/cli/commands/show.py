"""``autoannouncer show``: strictly validate and print the announcements file.

Unlike the plugin, which silently falls back to defaults, this command
reports what is wrong with the file and exits non-zero.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from autoannouncer.cli.commands import open_store
from autoannouncer.errors import ConfigLoadError

console = Console()


def show_cmd(
    base_dir: Optional[Path] = typer.Option(
        None,
        "--base-dir",
        "-d",
        help="Application base directory (defaults to AUTOANNOUNCER_BASE_DIR or cwd).",
    ),
) -> None:
    """Validate the announcements file and display both templates."""
    store = open_store(base_dir)
    if not store.path.exists():
        console.print(f"[yellow]No announcements file at {store.path}[/yellow]")
        console.print("[dim]Run 'autoannouncer init' to create one.[/dim]")
        raise typer.Exit(code=1)

    try:
        config = store.read()
    except ConfigLoadError as exc:
        console.print(f"[bold red]Invalid config:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    table = Table(title="Announcements")
    table.add_column("Field", style="cyan")
    table.add_column("Template")

    for key, template in config.to_file_dict().items():
        shown = escape(template) if template.strip() else "[dim](silenced)[/dim]"
        table.add_row(key, shown)

    console.print(table)
    console.print(f"[dim]{store.path}[/dim]")
