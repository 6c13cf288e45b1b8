"""Application bootstrap: reads config, sets up logging and runs the game."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config.toml"


def _load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load config.toml from project root."""
    import tomllib

    config_path = config_path or DEFAULT_CONFIG_PATH
    if config_path.exists():
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    return {}


def _setup_logging(logging_cfg: dict[str, Any]) -> None:
    """Send logs to a file; the full-screen UI owns the terminal."""
    level = getattr(logging, str(logging_cfg.get("level", "WARNING")).upper(), logging.WARNING)
    log_file = logging_cfg.get("file", "timeloop.log")
    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    else:
        logging.getLogger().setLevel(level)
        logging.getLogger().addHandler(logging.NullHandler())


class GameApp:
    """Main application class that bootstraps and runs the game."""

    def __init__(self, config_path: Path | None = None, display_mode: str | None = None):
        self.config = _load_config(config_path)
        self.display_mode = display_mode
        _setup_logging(self.config.get("logging", {}))

        # Lazy-initialized components
        self._console = None
        self._menu = None

    # -- Component initialization (lazy) --

    @property
    def console(self):
        if self._console is None:
            from rich.console import Console

            self._console = Console()
        return self._console

    @property
    def menu(self):
        if self._menu is None:
            from timeloop.cli.menu import init_menu

            display_cfg = self.config.get("display", {})
            mode = self.display_mode or display_cfg.get("mode", "auto")
            self._menu = init_menu(
                mode=mode,
                console=self.console,
                fps=display_cfg.get("fps", 30),
                chars_per_second=display_cfg.get("chars_per_second", 50),
            )
            logger.debug("Using %s menu", type(self._menu).__name__)
        return self._menu

    def run(self) -> None:
        """Play until the player escapes."""
        from timeloop.engine.game_loop import GameLoop

        with self.menu as menu:
            game = GameLoop(menu, self.config.get("game", {}))
            game.run()
        logger.info("Game finished after %d loop resets", game.loops)
