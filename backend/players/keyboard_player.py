"""
Keyboard player - reads keys from the controlling terminal without blocking.
"""

import logging
import os
import sys
from typing import Optional

try:
    import msvcrt  # Windows only
except ImportError:
    msvcrt = None

try:
    import select
    import termios
    import tty
except ImportError:
    select = None
    termios = None
    tty = None

from .base import END_OF_INPUT, Player

logger = logging.getLogger(__name__)


class KeyboardPlayer(Player):
    """
    Input source backed by the real terminal.

    Use it as a context manager: on POSIX the terminal is switched to cbreak
    mode (no line buffering, no echo) on enter and restored on exit.
    """

    def __init__(self, stream=None):
        self.stream = stream or sys.stdin
        self._fd = None
        self._saved_attrs = None

    def __enter__(self):
        if os.name != "nt" and termios is not None and self.stream.isatty():
            self._fd = self.stream.fileno()
            self._saved_attrs = termios.tcgetattr(self._fd)
            tty.setcbreak(self._fd)
            logger.debug("Terminal switched to cbreak mode")
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._saved_attrs is not None:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved_attrs)
            self._saved_attrs = None
            logger.debug("Terminal mode restored")

    def read_key(self) -> Optional[str]:
        if os.name == "nt":
            return self._read_key_windows()
        return self._read_key_posix()

    def _read_key_windows(self) -> Optional[str]:
        if msvcrt is None or not msvcrt.kbhit():
            return None
        ch = msvcrt.getwch()
        if ch in ("\x00", "\xe0"):
            # Arrow / function keys arrive as a two-part code; not bound.
            return ch + msvcrt.getwch()
        return ch

    def _read_key_posix(self) -> Optional[str]:
        if select is None:
            return None
        if not self._ready():
            return None
        data = self._read_byte()
        if not data:
            # Readable but empty: the other end is closed.
            return END_OF_INPUT
        ch = data.decode(errors="ignore")
        if ch != "\x1b":
            return ch or None
        # Swallow the rest of an escape sequence so it is not read as letters.
        seq = ch
        while len(seq) < 3 and self._ready():
            data = self._read_byte()
            if not data:
                break
            seq += data.decode(errors="ignore")
        return seq

    def _read_byte(self) -> bytes:
        # select() only sees bytes not yet pulled into Python buffers
        return os.read(self.stream.fileno(), 1)

    def _ready(self) -> bool:
        readable, _, _ = select.select([self.stream.fileno()], [], [], 0)
        return bool(readable)
