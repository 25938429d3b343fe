"""
Game constants for the terminal snake game.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# (dx, dy) per direction; y grows downwards, row 0 is drawn first
DIRECTION_DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITE = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Control signals coming from an input source
QUIT = "QUIT"
PAUSE = "PAUSE"

KEY_BINDINGS = {
    "w": UP,
    "a": LEFT,
    "s": DOWN,
    "d": RIGHT,
    "q": QUIT,
    "p": PAUSE,
}

# Board settings
DEFAULT_WIDTH = 30
DEFAULT_HEIGHT = 20
MIN_WIDTH = 10
MIN_HEIGHT = 5
MAX_CELLS = 10000  # configuration limit on width * height

# Game settings
STARTING_LENGTH = 4
FRUIT_SCORE = 10
FRUITS_PER_LEVEL = 3
INITIAL_DELAY_MS = 200
DELAY_STEP_MS = 10
MIN_DELAY_MS = 50
MAX_PLACEMENT_TRIES = 10000
PAUSE_POLL_MS = 50

# Death / end causes
CAUSE_WALL = "wall"
CAUSE_SELF = "self"
CAUSE_BOARD_FULL = "board_full"
