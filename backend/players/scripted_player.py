"""
Scripted player - replays a fixed sequence of keys, one per poll.
"""

from typing import Iterable, List, Optional

from .base import Player


class ScriptedPlayer(Player):
    """
    Input source fed from a list of keys.

    Each read_key() call consumes one entry; None entries stand for polls
    where nothing was pressed. Once the script runs out the player keeps
    returning `exhausted_key` (None by default, or e.g. "q" to end the game).
    """

    def __init__(self, keys: Iterable[Optional[str]], exhausted_key: Optional[str] = None):
        self.keys: List[Optional[str]] = list(keys)
        self.exhausted_key = exhausted_key
        self.reads = 0

    def read_key(self) -> Optional[str]:
        self.reads += 1
        if self.keys:
            return self.keys.pop(0)
        return self.exhausted_key
