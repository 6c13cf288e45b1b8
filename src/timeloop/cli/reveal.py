"""Typewriter reveal bookkeeping for screens of text.

The TUI owns one RevealState per screen and replaces it every frame.
"""
from __future__ import annotations

from dataclasses import dataclass, replace

from timeloop.cli.text_layout import TextLayout, graphemes


@dataclass(frozen=True)
class RevealState:
    elapsed_ms: int = 0
    revealed: int = 0
    completed: bool = False


def advance(state: RevealState, frame_ms: int, ms_per_grapheme: int, total: int) -> RevealState:
    """Move the reveal on by one frame of *frame_ms* milliseconds."""
    if state.completed:
        return state
    elapsed = state.elapsed_ms + frame_ms
    revealed = elapsed // ms_per_grapheme
    if revealed >= total:
        return RevealState(elapsed_ms=elapsed, revealed=total, completed=True)
    return RevealState(elapsed_ms=elapsed, revealed=revealed, completed=False)


def skip(state: RevealState, total: int) -> RevealState:
    """Jump straight to the fully revealed text."""
    return replace(state, revealed=total, completed=True)


def visible_lines(layout: TextLayout, revealed: int, max_lines: int) -> list[str]:
    """The rows to draw after *revealed* graphemes, at most *max_lines* of them.

    The last row may be cut mid-line. Once the text is taller than the
    screen, the oldest rows scroll off the top.
    """
    needed = 0
    so_far = 0
    partial = False
    for line in layout.lines:
        needed += 1
        if so_far + line.length > revealed:
            partial = True
            break
        so_far += line.length

    first = max(0, needed - max_lines)
    rows: list[str] = []
    for index in range(first, needed):
        line = layout.lines[index]
        if partial and index == needed - 1:
            rows.append("".join(graphemes(line.content)[:revealed - so_far]))
        else:
            rows.append(line.rendered)
    return rows
