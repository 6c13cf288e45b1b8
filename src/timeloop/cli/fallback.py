"""Line-based console menu for terminals that can't run the full-screen UI."""
from __future__ import annotations

import logging
from typing import IO, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from timeloop.cli.menu import Menu, OptionList, Screen

logger = logging.getLogger(__name__)


class ConsoleMenu(Menu):
    """Numbered option lists and boxed screens printed with rich."""

    def __init__(self, console: Optional[Console] = None, stream: Optional[IO[str]] = None):
        self.console = console or Console()
        # Read answers from here instead of stdin when set
        self.stream = stream

    def show_option_list(self, option_list: OptionList) -> int:
        count = len(option_list.options)
        number_width = len(str(count))

        self.console.print(Text(option_list.prompt, style="bold"))
        for i, option in enumerate(option_list.options, 1):
            line = Text(f"{i:>{number_width}}) ", style="cyan")
            line.append(option)
            self.console.print(line)
        self.console.print()

        choice = self._number_input(count)
        self.console.print()
        return choice - 1

    def _number_input(self, maximum: int) -> int:
        """Ask until the player types a number from 1 to *maximum*."""
        while True:
            raw = self.console.input(f"Enter your selection from 1 to {maximum}: ", stream=self.stream)
            if self.stream is not None and not raw:
                raise EOFError("Input stream closed")
            text = raw.strip()
            if not text.isdigit():
                self.console.print("[red]Not a valid integer[/red]")
                continue
            value = int(text)
            if value == 0:
                self.console.print("[red]Value can't be 0[/red]")
            elif value > maximum:
                self.console.print("[red]Value too large[/red]")
            else:
                logger.debug("Selected option %d of %d", value, maximum)
                return value

    def show_screen(self, screen: Screen) -> None:
        self.console.print(Panel(
            Text(screen.content),
            title=Text(screen.title, style="bold"),
            border_style="green",
            box=box.ROUNDED,
            padding=(1, 2),
        ))
        self.console.print()
