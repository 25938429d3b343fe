"""
Input sources for the terminal snake game.

A player turns key presses into intents (a direction, quit or pause) that
the driver loop feeds to the engine.
"""

from .base import END_OF_INPUT, Player, interpret_key
from .keyboard_player import KeyboardPlayer
from .scripted_player import ScriptedPlayer

__all__ = [
    'END_OF_INPUT',
    'Player',
    'interpret_key',
    'KeyboardPlayer',
    'ScriptedPlayer',
]
