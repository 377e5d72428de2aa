"""Main Typer application: imports and registers all CLI commands.

Entry point: ``autoannouncer`` (configured via pyproject.toml scripts).

Commands: init, show, preview, simulate.
"""

from __future__ import annotations

import logging

import typer
from rich.logging import RichHandler

from autoannouncer.cli.commands.init_cmd import init_cmd
from autoannouncer.cli.commands.preview import preview_cmd
from autoannouncer.cli.commands.show import show_cmd
from autoannouncer.cli.commands.simulate import simulate_cmd
from autoannouncer.config import settings

app = typer.Typer(
    name="autoannouncer",
    help="AutoAnnouncer: templated join / game-end announcements.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def main(
    log_level: str = typer.Option(
        None, "--log-level", help="Logging level (defaults to AUTOANNOUNCER_LOG_LEVEL)."
    ),
) -> None:
    """Configure logging before any command runs."""
    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format="%(name)s: %(message)s",
        handlers=[RichHandler(show_path=False)],
    )


# Register subcommands
app.command(name="init", help="Write the default announcements file if missing.")(init_cmd)
app.command(name="show", help="Validate and display the announcements file.")(show_cmd)
app.command(name="preview", help="Render a template with sample values.")(preview_cmd)
app.command(name="simulate", help="Publish one event through a local bus.")(simulate_cmd)
