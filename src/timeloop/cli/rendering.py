"""Frame composition for the full-screen interface.

Frames are built as a list of rich ``Text`` rows, each exactly as wide as
the terminal, so the TUI can hand them to the alternate screen in one update
and tests can inspect them without a terminal.
"""
from __future__ import annotations

from itertools import cycle, islice
from typing import Sequence

from rich.text import Text

from timeloop.cli.consts import (
    BORDER_PATTERN_HORIZONTAL,
    BORDER_PATTERN_VERTICAL,
    BOTTOM_LEFT_CORNER,
    BOTTOM_OFFSET,
    BOTTOM_RIGHT_CORNER,
    ELLIPSIS,
    LEFT_OFFSET,
    MIN_CONTENT_HEIGHT,
    MIN_CONTENT_WIDTH,
    RIGHT_OFFSET,
    TOP_LEFT_CORNER,
    TOP_OFFSET,
    TOP_RIGHT_CORNER,
)
from timeloop.cli.text_layout import text_width, truncate_to_width
from timeloop.cli.viewport import visible_item_rows

TOO_SMALL_MESSAGE = "Terminal too small"
SELECTED_STYLE = "reverse"


def is_too_small(width: int, height: int) -> bool:
    return (
        width < LEFT_OFFSET + RIGHT_OFFSET + MIN_CONTENT_WIDTH
        or height < TOP_OFFSET + BOTTOM_OFFSET + MIN_CONTENT_HEIGHT
    )


def content_width(width: int) -> int:
    """Cells available to list items and body text."""
    return width - LEFT_OFFSET - RIGHT_OFFSET - 1


def content_height(height: int) -> int:
    return height - TOP_OFFSET - BOTTOM_OFFSET


def _pattern(pattern: str, length: int) -> str:
    return "".join(islice(cycle(pattern), length))


def _fit(text: Text, width: int) -> Text:
    text = text.copy()
    text.no_wrap = True
    text.truncate(width, overflow="crop", pad=True)
    return text


def title_row(title: str, width: int) -> Text:
    """*title* centred between the side offsets, cut with ``⋯`` if too wide."""
    max_width = width - LEFT_OFFSET - RIGHT_OFFSET
    left = max(0, max_width - text_width(title)) // 2
    return Text(" " * left + truncate_to_width(title, max_width))


def list_rows(items: Sequence[str], width: int, height: int, offset: int, selected: int) -> list[Text]:
    """Rows for the visible window of *items*, the selection inverted."""
    max_width = content_width(width)
    count, ellipsis = visible_item_rows(len(items), content_height(height), offset)
    rows = []
    for index in range(offset, offset + count):
        style = SELECTED_STYLE if index == selected else ""
        rows.append(Text(truncate_to_width(items[index], max_width), style=style))
    if ellipsis:
        rows.append(Text(ELLIPSIS))
    return rows


def build_frame(width: int, height: int, title: str, rows: Sequence[Text | str]) -> list[Text]:
    """Border, centred title and content rows for a *width* x *height* terminal.

    Content row ``y`` lands on terminal row ``TOP_OFFSET + y`` at column
    ``LEFT_OFFSET``; rows past the bottom of the content area are dropped.
    """
    inner = width - 2
    frame = [Text(TOP_LEFT_CORNER + _pattern(BORDER_PATTERN_HORIZONTAL, inner) + TOP_RIGHT_CORNER)]

    title_line = title_row(title, width)
    for r in range(1, height - 1):
        edge = BORDER_PATTERN_VERTICAL[(r - 1) % len(BORDER_PATTERN_VERTICAL)]
        y = r - TOP_OFFSET
        if r == TOP_OFFSET - 1:
            body = Text(" " * (LEFT_OFFSET - 1)) + title_line
        elif 0 <= y < min(len(rows), content_height(height)):
            row = rows[y]
            body = Text(" " * (LEFT_OFFSET - 1)) + (row if isinstance(row, Text) else Text(row))
        else:
            body = Text()
        frame.append(Text(edge) + _fit(body, inner) + Text(edge))

    frame.append(Text(BOTTOM_LEFT_CORNER + _pattern(BORDER_PATTERN_HORIZONTAL, inner) + BOTTOM_RIGHT_CORNER))
    return [_fit(line, width) for line in frame]


def too_small_frame(width: int, height: int) -> list[Text]:
    """A blank frame with the too-small notice in the top left corner."""
    frame = [_fit(Text(TOO_SMALL_MESSAGE, style="red"), width)]
    frame.extend(Text(" " * width) for _ in range(height - 1))
    return frame
