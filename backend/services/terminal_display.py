"""
Terminal display for the snake game.

Renders a Frame as fixed-width text:

    ##############
    #            #
    #  oooO   F  #
    #            #
    ##############
    Score: 0   Length: 4   Level: 1   Delay: 200 ms
    Controls: W/A/S/D to move | p = pause | q = quit
"""

import os
import sys
from typing import List

from domain.frame import Frame


CLEAR_SCREEN = "\x1b[2J\x1b[H"
HELP_LINE = "Controls: W/A/S/D to move | p = pause | q = quit"


def format_frame(frame: Frame) -> List[str]:
    """Return the lines of text for a frame: board, status line and help line."""
    lines = frame.print_board().split("\n")
    lines.append(frame.status_line())
    lines.append(HELP_LINE)
    return lines


class TerminalDisplay:
    """
    Display sink writing frames and messages to a text stream.

    Args:
        stream: where to write (stdout by default)
        clear: emit the ANSI clear-screen sequence before every frame
    """

    def __init__(self, stream=None, clear: bool = True):
        self.stream = stream or sys.stdout
        self.clear = clear
        self.frames_drawn = 0
        if clear and os.name == "nt":
            # Enables ANSI escape handling on newer Windows consoles.
            os.system("")

    def show(self, frame: Frame):
        text = "\n".join(format_frame(frame)) + "\n"
        if self.clear:
            text = CLEAR_SCREEN + text
        self.stream.write(text)
        self.stream.flush()
        self.frames_drawn += 1

    def message(self, text: str):
        self.stream.write(text + "\n")
        self.stream.flush()

    def clear_screen(self):
        if self.clear:
            self.stream.write(CLEAR_SCREEN)
            self.stream.flush()
