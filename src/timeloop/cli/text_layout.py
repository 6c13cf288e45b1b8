"""Wraps text to a column budget, hyphenating long words.

Widths are terminal cells (double-width emoji count as 2), lengths are
grapheme clusters so a typewriter reveal can step one visible character at
a time.
"""
from __future__ import annotations

import unicodedata
from dataclasses import dataclass, field

import regex
from rich.cells import cell_len

from timeloop.cli.consts import ELLIPSIS, HYPHEN, TEXT_WRAPPING_MIN_SEGMENT_SIZE
from timeloop.cli.menu import IncompatibleCharacterError

_GRAPHEME_RE = regex.compile(r"\X")


def graphemes(text: str) -> list[str]:
    return _GRAPHEME_RE.findall(text)


def grapheme_count(text: str) -> int:
    return len(graphemes(text))


def grapheme_width(grapheme: str) -> int:
    """Display width of one grapheme cluster."""
    for ch in grapheme:
        if unicodedata.category(ch) == "Cc":
            raise IncompatibleCharacterError(f"Cannot measure the width of {ch!r}")
    return cell_len(grapheme)


def text_width(text: str) -> int:
    return sum(grapheme_width(g) for g in graphemes(text))


def replace_incompatible(text: str, replacement: str = "?") -> str:
    """*text* with every grapheme holding a control character replaced.

    Newlines are kept; they are line breaks, not display characters.
    """
    out = []
    for g in graphemes(text):
        if g != "\n" and any(unicodedata.category(ch) == "Cc" for ch in g):
            out.append(replacement)
        else:
            out.append(g)
    return "".join(out)


def truncate_to_width(text: str, max_width: int) -> str:
    """Cut *text* to *max_width* cells, marking the cut with an ellipsis."""
    out: list[str] = []
    width = 0
    for g in graphemes(text):
        width += grapheme_width(g)
        if width > max_width:
            out.append(ELLIPSIS)
            break
        out.append(g)
    return "".join(out)


@dataclass(frozen=True)
class TextLine:
    """One display line: a slice of the source text."""

    content: str
    # Offsets of content in the source text
    start: int
    end: int
    # The line stops in the middle of a word and a hyphen should follow it
    dash_at_end: bool
    # Length in grapheme clusters
    length: int

    @property
    def rendered(self) -> str:
        return self.content + HYPHEN if self.dash_at_end else self.content


@dataclass
class TextLayout:
    """*text* laid out in lines no wider than *max_width* cells."""

    text: str
    max_width: int
    lines: list[TextLine] = field(init=False, default_factory=list)

    def __post_init__(self) -> None:
        if self.max_width < 2:
            raise ValueError(f"max_width must be at least 2, got {self.max_width}")
        offset = 0
        for source_line in self.text.split("\n"):
            _LineBuilder(self, source_line, offset).run()
            offset += len(source_line) + 1

    @property
    def total_length(self) -> int:
        return sum(line.length for line in self.lines)


class _LineBuilder:
    """Greedy word wrapping for one hard line of the source text."""

    def __init__(self, layout: TextLayout, line: str, offset: int):
        self.layout = layout
        self.max_width = layout.max_width
        self.line = line
        self.offset = offset
        # Current render line: [start, end) into self.line and its width
        self.start = 0
        self.end = 0
        self.x = 0
        self.empty = True

    def emit(self, dash_at_end: bool) -> None:
        content = self.line[self.start:self.end]
        self.layout.lines.append(TextLine(
            content=content,
            start=self.offset + self.start,
            end=self.offset + self.end,
            dash_at_end=dash_at_end,
            length=grapheme_count(content),
        ))

    def new_line(self, at: int) -> None:
        """Emit the current line and start the next one at index *at*."""
        self.emit(dash_at_end=False)
        self.start = self.end = at
        self.x = 0
        self.empty = True

    def run(self) -> None:
        pos = 0
        for word in self.line.split(" "):
            self.place(word, pos)
            pos += len(word) + 1
        self.emit(dash_at_end=False)

    def place(self, word: str, pos: int) -> None:
        width = text_width(word)
        # A separating space is needed unless the line is empty
        available = self.max_width if self.empty else self.max_width - self.x - 1

        if width <= available:
            self.append(word, pos, width)
            return

        if self.empty:
            # Longer than a whole line
            self.split(word, pos)
            return

        needs_hyphen = width > available * 2
        could_hyphenate = (
            available >= TEXT_WRAPPING_MIN_SEGMENT_SIZE
            and width - available >= TEXT_WRAPPING_MIN_SEGMENT_SIZE
        )

        if could_hyphenate:
            self.split(word, pos)
            return

        self.new_line(pos)
        if needs_hyphen or width > self.max_width:
            self.split(word, pos)
        else:
            self.append(word, pos, width)

    def append(self, word: str, pos: int, width: int) -> None:
        self.x += width if self.empty else width + 1
        self.end = pos + len(word)
        self.empty = False

    def split(self, word: str, pos: int) -> None:
        """Lay *word* out from the current position, hyphenating at grapheme boundaries."""
        pieces = graphemes(word)
        i = 0
        index = pos
        while i < len(pieces):
            rest = pieces[i:]
            rest_width = sum(grapheme_width(g) for g in rest)
            available = self.max_width if self.empty else self.max_width - self.x - 1
            if rest_width <= available:
                self.append("".join(rest), index, rest_width)
                return

            # Fill what fits, keeping one cell for the hyphen
            budget = available - 1
            taken = 0
            taken_width = 0
            for g in rest:
                w = grapheme_width(g)
                if taken_width + w > budget:
                    break
                taken += 1
                taken_width += w
            if taken == 0 and self.empty:
                # A single grapheme wider than the line still has to go somewhere
                taken = 1
                taken_width = grapheme_width(rest[0])

            if taken:
                chunk = "".join(rest[:taken])
                self.append(chunk, index, taken_width)
                index += len(chunk)
                i += taken
                self.emit(dash_at_end=True)
            else:
                self.emit(dash_at_end=False)
            self.start = self.end = index
            self.x = 0
            self.empty = True
