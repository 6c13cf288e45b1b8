"""Full-screen terminal menu.

Draws into the alternate screen at a fixed frame rate and polls stdin
between frames. Arrow keys move the selection, Enter picks it. Screens are
revealed a few characters per frame; any key skips the reveal, and a key
after the text is complete dismisses the screen.
"""
from __future__ import annotations

import logging
import time
from contextlib import ExitStack
from typing import Callable, Optional

from rich.console import Console, Group

from timeloop.cli.consts import ANSI_DOWN, ANSI_UP
from timeloop.cli.menu import IncompatibleCharacterError, Menu, OptionList, Screen
from timeloop.cli.rendering import (
    build_frame,
    content_height,
    content_width,
    is_too_small,
    list_rows,
    too_small_frame,
)
from timeloop.cli.reveal import RevealState, advance, skip, visible_lines
from timeloop.cli.terminal import TerminalModeGuard
from timeloop.cli.text_layout import TextLayout, replace_incompatible, text_width
from timeloop.cli.viewport import compute_scroll_offset

logger = logging.getLogger(__name__)

ENTER_KEYS = ("\r", "\n")


class Tui(Menu):
    """Menu drawn full-screen with rich, for POSIX terminals."""

    def __init__(
        self,
        console: Optional[Console] = None,
        fps: int = 30,
        chars_per_second: int = 50,
        guard_factory: Callable[[], TerminalModeGuard] = TerminalModeGuard,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.console = console or Console()
        self.ms_per_frame = max(1, 1000 // fps)
        self.ms_per_char = max(1, 1000 // chars_per_second)
        self._guard_factory = guard_factory
        self._sleep = sleep
        self._stack: Optional[ExitStack] = None
        self._guard: Optional[TerminalModeGuard] = None
        self._screen = None

    def __enter__(self) -> Tui:
        with ExitStack() as stack:
            self._guard = stack.enter_context(self._guard_factory())
            self._screen = stack.enter_context(self.console.screen(hide_cursor=True))
            self._stack = stack.pop_all()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._stack is not None:
            self._stack.close()
        self._stack = None
        self._guard = None
        self._screen = None

    # -- frame loop helpers --

    def _require_active(self) -> TerminalModeGuard:
        if self._guard is None:
            raise RuntimeError("Tui must be entered with 'with' before use")
        return self._guard

    def _wait_frame(self) -> tuple[int, int]:
        self._sleep(self.ms_per_frame / 1000)
        size = self.console.size
        return size.width, size.height

    def _draw(self, lines) -> None:
        self._screen.update(Group(*lines))

    def _printable(self, text: str) -> str:
        try:
            for part in text.split("\n"):
                text_width(part)
        except IncompatibleCharacterError as exc:
            logger.warning("Replacing unrenderable characters: %s", exc)
            return replace_incompatible(text)
        return text

    # -- Menu --

    def show_option_list(self, option_list: OptionList) -> int:
        guard = self._require_active()
        items = [self._printable(option) for option in option_list.options]
        prompt = self._printable(option_list.prompt)
        selected = 0
        offset = 0

        while True:
            width, height = self._wait_frame()
            if is_too_small(width, height):
                self._draw(too_small_frame(width, height))
                continue

            offset = compute_scroll_offset(len(items), content_height(height), selected, offset)
            rows = list_rows(items, width, height, offset, selected)
            self._draw(build_frame(width, height, prompt, rows))

            key = guard.poll()
            if key == ANSI_UP and selected > 0:
                selected -= 1
            elif key == ANSI_DOWN and selected < len(items) - 1:
                selected += 1
            elif key in ENTER_KEYS:
                logger.debug("Selected option %d of %d: %s", selected, len(items), items[selected])
                return selected

    def show_screen(self, screen: Screen) -> None:
        guard = self._require_active()
        title = self._printable(screen.title)
        content = self._printable(screen.content)
        layout: Optional[TextLayout] = None
        state = RevealState()

        while True:
            width, height = self._wait_frame()
            if is_too_small(width, height):
                self._draw(too_small_frame(width, height))
                continue

            # Re-wrap when the terminal is resized
            if layout is None or layout.max_width != content_width(width):
                layout = TextLayout(content, content_width(width))
            state = advance(state, self.ms_per_frame, self.ms_per_char, layout.total_length)

            rows = visible_lines(layout, state.revealed, content_height(height))
            self._draw(build_frame(width, height, title, rows))

            if guard.poll() is not None:
                if state.completed:
                    return
                state = skip(state, layout.total_length)
