"""
Base input source interface for the game engine.
"""

from typing import Optional

from domain.constants import KEY_BINDINGS, QUIT

# Returned by read_key() once the input stream is closed
END_OF_INPUT = ""


def interpret_key(key: Optional[str]) -> Optional[str]:
    """
    Map a raw key to an intent.

    Returns UP/DOWN/LEFT/RIGHT, QUIT or PAUSE, or None when no key was
    pressed or the key has no binding. Matching is case-insensitive.
    Closed input means QUIT.
    """
    if key == END_OF_INPUT:
        return QUIT
    if key is None or len(key) != 1:
        return None
    return KEY_BINDINGS.get(key.lower())


class Player:
    """
    Base class/interface for input sources.

    A player is polled once per tick and must never block: read_key()
    returns the next pending raw key or None when nothing is waiting.
    """

    def read_key(self) -> Optional[str]:
        """
        Return the next pending key without blocking.

        Returns:
            A single-character string, a multi-character escape sequence,
            END_OF_INPUT once the input is closed, or None if no key is
            available.
        """
        raise NotImplementedError

    def poll(self) -> Optional[str]:
        """Return the intent of the next pending key (see interpret_key)."""
        return interpret_key(self.read_key())
