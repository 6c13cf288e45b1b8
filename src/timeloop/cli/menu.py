"""The menu boundary. Every prompt and screen the game shows goes through a Menu.

Two implementations exist: a full-screen TUI for POSIX terminals
(`timeloop.cli.tui.Tui`) and a plain numbered-prompt console
(`timeloop.cli.fallback.ConsoleMenu`). Use `init_menu` to pick one.
"""
from __future__ import annotations

import os
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

from timeloop.errors import TimeloopError

if TYPE_CHECKING:
    from rich.console import Console

CANCEL_OPTION = "Cancel"


class MenuError(TimeloopError):
    """Base exception for presentation failures."""


class IncompatibleCharacterError(MenuError):
    """A grapheme's display width could not be determined."""


@dataclass(frozen=True)
class OptionList:
    """A prompt and the options to choose from. Needs at least one option."""

    options: Sequence[str]
    prompt: str

    def __post_init__(self) -> None:
        if not self.options:
            raise ValueError("Options should not be empty")


@dataclass(frozen=True)
class Screen:
    """A screen of text shown until the player acknowledges it."""

    title: str
    content: str


class Menu(ABC):
    """Shows option lists and screens. Used as a context manager."""

    @abstractmethod
    def show_option_list(self, option_list: OptionList) -> int:
        """Block until an option is picked; return its 0-based index."""

    def show_option_list_cancellable(self, option_list: OptionList) -> int | None:
        """Like show_option_list with an extra Cancel entry; None means cancelled."""
        with_cancel = OptionList([*option_list.options, CANCEL_OPTION], option_list.prompt)
        choice = self.show_option_list(with_cancel)
        if choice == len(option_list.options):
            return None
        return choice

    @abstractmethod
    def show_screen(self, screen: Screen) -> None:
        """Show a screen and block until it is acknowledged."""

    def __enter__(self) -> Menu:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        return None


def supports_tui() -> bool:
    """Whether the full-screen interface can run here."""
    return os.name == "posix" and sys.stdin.isatty() and sys.stdout.isatty()


def init_menu(
    mode: str = "auto",
    console: Console | None = None,
    fps: int = 30,
    chars_per_second: int = 50,
) -> Menu:
    """Build the menu for *mode*: "tui", "plain", or "auto"."""
    if mode == "tui" or (mode == "auto" and supports_tui()):
        from timeloop.cli.tui import Tui

        return Tui(console=console, fps=fps, chars_per_second=chars_per_second)
    if mode not in ("auto", "plain", "tui"):
        raise ValueError(f"Unknown display mode: {mode}")

    from timeloop.cli.fallback import ConsoleMenu

    return ConsoleMenu(console=console)
