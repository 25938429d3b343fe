"""
Frame entity - a read-only snapshot of the board for display sinks.
"""

from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple


class Cell(Enum):
    """Tag of a single board cell; the value is the glyph used for text output."""
    EMPTY = " "
    HEAD = "O"
    BODY = "o"
    FRUIT = "F"
    WALL = "#"


class Frame:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        width, height: board dimensions (interior, without the border)
        snake: tuple of (x, y), head first
        fruit: (x, y) of the fruit, or None
        score, length, level, delay_ms: session stats

    Iterating a frame yields one list of Cell values per row, border included,
    so a full frame is (height + 2) rows of (width + 2) cells. Rows are built
    on demand and the frame can be iterated any number of times.
    """

    def __init__(
        self,
        width: int,
        height: int,
        snake: Sequence[Tuple[int, int]],
        fruit: Optional[Tuple[int, int]],
        score: int,
        level: int,
        delay_ms: int
    ):
        self.width = width
        self.height = height
        self.snake = tuple(snake)
        self.fruit = fruit
        self.score = score
        self.level = level
        self.delay_ms = delay_ms
        self._body = frozenset(self.snake[1:])

    @property
    def length(self) -> int:
        return len(self.snake)

    @property
    def head(self) -> Optional[Tuple[int, int]]:
        return self.snake[0] if self.snake else None

    def cell_at(self, x: int, y: int) -> Cell:
        """Cell tag for an interior coordinate; anything outside the board is wall."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return Cell.WALL
        p = (x, y)
        # Head wins over fruit, fruit over body
        if p == self.head:
            return Cell.HEAD
        if p == self.fruit:
            return Cell.FRUIT
        if p in self._body:
            return Cell.BODY
        return Cell.EMPTY

    def rows(self) -> Iterator[List[Cell]]:
        border = [Cell.WALL] * (self.width + 2)
        yield list(border)
        for y in range(self.height):
            yield [Cell.WALL] + [self.cell_at(x, y) for x in range(self.width)] + [Cell.WALL]
        yield list(border)

    def __iter__(self) -> Iterator[List[Cell]]:
        return self.rows()

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        # = wall border
        O = snake head
        o = snake body
        F = fruit
        """
        return "\n".join("".join(cell.value for cell in row) for row in self.rows())

    def status_line(self) -> str:
        return (
            f"Score: {self.score}   Length: {self.length}   "
            f"Level: {self.level}   Delay: {self.delay_ms} ms"
        )

    def __repr__(self):
        return (
            f"<Frame {self.width}x{self.height}, head={self.head}, fruit={self.fruit}, "
            f"score={self.score}, level={self.level}>"
        )
