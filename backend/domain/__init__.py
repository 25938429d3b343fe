"""
Domain entities for the terminal snake game.

This module contains the core game entities that are independent of
terminal concerns (raw mode, key reading, screen output).
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, QUIT, PAUSE
from .snake import Snake
from .frame import Cell, Frame
from .results import TickResult, InvalidStateError, CONTINUING, GAME_OVER

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'QUIT', 'PAUSE',
    'Snake',
    'Cell', 'Frame',
    'TickResult', 'InvalidStateError', 'CONTINUING', 'GAME_OVER',
]
