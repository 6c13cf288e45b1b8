"""Terminal mode handling for the full-screen interface (POSIX only)."""
from __future__ import annotations

import logging
import os
import select
import sys
import termios
import tty
from typing import IO, Optional

logger = logging.getLogger(__name__)

# Keystrokes arrive one small burst at a time
READ_SIZE = 256


class TerminalModeGuard:
    """Puts the terminal into cbreak mode for the lifetime of a ``with`` block.

    Keys are delivered without waiting for Enter and are not echoed. The
    original attributes are restored on every exit path.
    """

    def __init__(self, stream: Optional[IO] = None):
        self.fd = (stream or sys.stdin).fileno()
        self._saved: Optional[list] = None

    def __enter__(self) -> TerminalModeGuard:
        self._saved = termios.tcgetattr(self.fd)
        tty.setcbreak(self.fd)
        logger.debug("Terminal on fd %d switched to cbreak mode", self.fd)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._saved is not None:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self._saved)
            self._saved = None
            logger.debug("Terminal on fd %d restored", self.fd)

    def poll(self) -> Optional[str]:
        """Return pending input without blocking, or None if there is none."""
        ready, _, _ = select.select([self.fd], [], [], 0)
        if not ready:
            return None
        data = os.read(self.fd, READ_SIZE)
        return data.decode("utf-8", errors="replace")
