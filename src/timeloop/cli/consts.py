"""Layout constants for the full-screen interface."""
from __future__ import annotations

# Border patterns, cycled along each edge
BORDER_PATTERN_HORIZONTAL = "=-"
BORDER_PATTERN_VERTICAL = "\\/"

TOP_LEFT_CORNER = "/"
TOP_RIGHT_CORNER = "\\"
BOTTOM_LEFT_CORNER = "\\"
BOTTOM_RIGHT_CORNER = "/"

# Offsets of the content area from each edge of the terminal
LEFT_OFFSET = 3
TOP_OFFSET = 2
BOTTOM_OFFSET = 2
RIGHT_OFFSET = 2

# Smallest usable content area
MIN_CONTENT_WIDTH = 50
MIN_CONTENT_HEIGHT = 10

# Smallest piece a word is split into when wrapping
TEXT_WRAPPING_MIN_SEGMENT_SIZE = 5

ELLIPSIS = "⋯"
HYPHEN = "-"

ANSI_UP = "\x1b[A"
ANSI_DOWN = "\x1b[B"
