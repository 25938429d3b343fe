"""
Tick outcomes returned by the game engine.
"""

from dataclasses import dataclass
from typing import Optional

from .constants import CAUSE_BOARD_FULL

CONTINUING = "continuing"
GAME_OVER = "game_over"


class InvalidStateError(RuntimeError):
    """Raised when the engine is driven after the session has ended."""


@dataclass(frozen=True)
class TickResult:
    """
    Outcome of a single tick.

    status is CONTINUING or GAME_OVER; cause is one of 'wall', 'self' or
    'board_full' when the game is over and None otherwise.
    """
    status: str
    cause: Optional[str] = None

    @classmethod
    def continuing(cls) -> "TickResult":
        return cls(CONTINUING)

    @classmethod
    def game_over(cls, cause: str) -> "TickResult":
        return cls(GAME_OVER, cause)

    @property
    def is_game_over(self) -> bool:
        return self.status == GAME_OVER

    @property
    def won(self) -> bool:
        return self.cause == CAUSE_BOARD_FULL
