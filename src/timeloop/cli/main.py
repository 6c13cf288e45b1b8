"""Typer CLI application."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from timeloop.errors import TimeloopError

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="timeloop",
    help="Escape a prison ship, one time loop at a time",
    no_args_is_help=False,
)


@app.command()
def play(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to a config.toml"),
    plain: bool = typer.Option(False, "--plain", help="Use numbered prompts instead of the full-screen UI"),
    tui: bool = typer.Option(False, "--tui", help="Force the full-screen UI"),
) -> None:
    """Start the game."""
    from timeloop.app import GameApp

    if plain and tui:
        raise typer.BadParameter("--plain and --tui can't be used together")
    mode = "plain" if plain else "tui" if tui else None

    game_app = GameApp(config_path=config, display_mode=mode)
    try:
        game_app.run()
    except TimeloopError as exc:
        logger.exception("Game stopped")
        Console(stderr=True).print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=1)


@app.command()
def check() -> None:
    """Check whether this terminal can run the full-screen UI."""
    from timeloop.cli.menu import supports_tui
    from timeloop.cli.rendering import is_too_small

    console = Console()
    width, height = console.size.width, console.size.height
    console.print(f"Terminal size: {width}x{height}")

    if not supports_tui():
        console.print("[yellow]Full-screen UI unavailable[/yellow]: needs a POSIX terminal on stdin and stdout")
    elif is_too_small(width, height):
        console.print("[yellow]Terminal too small[/yellow]: the full-screen UI needs at least 55x14")
    else:
        console.print("[green]Full-screen UI available[/green]")


if __name__ == "__main__":
    app()
