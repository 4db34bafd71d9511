"""Typer CLI application."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from termglyph.cli.core.controls import CONTROLS
from termglyph.cli.core.terminal import Terminal
from termglyph.cli.game.loop import run_game
from termglyph.errors import GameError, SetupError
from termglyph.log import configure_logging

logger = logging.getLogger(__name__)


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="termglyph",
        help="Move a glyph around a raw-mode terminal in real time.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    @app.command()
    def play(
        log_file: Annotated[Optional[Path], typer.Option("--log-file", "-l", help="Write debug log to this file")] = None,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log at DEBUG level")] = False,
    ) -> None:
        """Play until q is pressed."""
        configure_logging(log_file, verbose)
        terminal = Terminal()
        message: Optional[str] = None

        try:
            with terminal.managed_mode():
                run_game(terminal)
        except SetupError as exc:
            logger.error("Terminal setup failed: %s", exc.__cause__ or exc)
            message = "Could not take over the terminal."
        except GameError as exc:
            logger.error("Game stopped: %s", exc.__cause__ or exc)
            message = "Game stopped after a terminal error."

        # Terminal is restored by now
        if message:
            console.print(f"[yellow]{message}[/]")

    @app.command()
    def keys() -> None:
        """Show the keyboard controls."""
        table = Table(title="Controls")
        table.add_column("Key", style="bold cyan")
        table.add_column("Action")
        for control in CONTROLS:
            table.add_row(control.key, control.description)
        console.print(table)

    return app
