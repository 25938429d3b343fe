"""
Snake entity for the game engine.
"""

from collections import deque
from typing import List, Tuple

from .constants import DIRECTION_DELTAS


class Snake:
    """
    Represents the player's snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        direction: current heading, one of UP/DOWN/LEFT/RIGHT
    """

    def __init__(self, positions: List[Tuple[int, int]], direction: str):
        if not positions:
            raise ValueError("A snake needs at least one segment.")
        self.positions = deque(positions)
        self.direction = direction

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Tuple[int, int]:
        return self.positions[-1]

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, cell) -> bool:
        return cell in self.positions

    def next_head(self) -> Tuple[int, int]:
        """Cell the head moves into on the next step in the current direction."""
        dx, dy = DIRECTION_DELTAS[self.direction]
        hx, hy = self.head
        return (hx + dx, hy + dy)

    def advance(self, new_head: Tuple[int, int], grow: bool = False):
        """Prepend new_head and drop the tail unless the snake is growing."""
        self.positions.appendleft(new_head)
        if not grow:
            self.positions.pop()
