import argparse
import logging
import random
import sys
import time
import uuid
from typing import Callable, Dict, Any, List, Optional, Tuple

from dotenv import load_dotenv

from config import is_valid_board_size, load_log_settings, load_settings, configure_logging
from domain.constants import (
    RIGHT, VALID_MOVES, OPPOSITE, QUIT, PAUSE,
    DEFAULT_WIDTH, DEFAULT_HEIGHT, MIN_WIDTH, MIN_HEIGHT, MAX_CELLS,
    STARTING_LENGTH, FRUIT_SCORE, FRUITS_PER_LEVEL,
    INITIAL_DELAY_MS, DELAY_STEP_MS, MIN_DELAY_MS,
    MAX_PLACEMENT_TRIES, PAUSE_POLL_MS,
    CAUSE_WALL, CAUSE_SELF, CAUSE_BOARD_FULL,
)
from domain.frame import Frame
from domain.results import TickResult, InvalidStateError
from domain.snake import Snake
from players import KeyboardPlayer, Player
from services.terminal_display import TerminalDisplay

logger = logging.getLogger(__name__)

QUIT_REASON = "quit"
START_PROMPT = "Press any key to start... (W/A/S/D to control)."
PAUSE_PROMPT = "Paused. Press 'p' again to resume."


class SnakeGame:
    """
    Manages one single-player session:
      - Board (width, height)
      - The snake and its direction
      - The fruit
      - Score, level and tick delay
      - Game-over state

    A session is never reset; start a new game by building a new SnakeGame.
    """
    def __init__(
        self,
        width: int,
        height: int,
        rng: Optional[random.Random] = None,
        game_id: Optional[str] = None
    ):
        if not is_valid_board_size(width, height):
            raise ValueError(
                f"Invalid board size {width}x{height}: need width >= {MIN_WIDTH}, "
                f"height >= {MIN_HEIGHT} and at most {MAX_CELLS} cells."
            )
        self.width = width
        self.height = height
        self.rng = rng or random.Random()
        self.game_id = game_id or str(uuid.uuid4())

        self.score = 0
        self.level = 1
        self.delay_ms = INITIAL_DELAY_MS
        self.fruits_eaten = 0
        self.moves = 0
        self.game_over = False
        self.end_cause: Optional[str] = None

        # Snake starts in the middle, head pointing right, body trailing left
        cx = width // 2
        cy = height // 2
        self.snake = Snake([(cx - i, cy) for i in range(STARTING_LENGTH)], RIGHT)

        self.fruit: Tuple[int, int] = self._random_free_cell()

        logger.debug(
            f"Game {self.game_id} started on {width}x{height}, "
            f"snake at {self.snake.head}, fruit at {self.fruit}"
        )

    @property
    def direction(self) -> str:
        return self.snake.direction

    @property
    def length(self) -> int:
        return len(self.snake)

    @property
    def capacity(self) -> int:
        return self.width * self.height

    def in_bounds(self, cell: Tuple[int, int]) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def set_direction(self, direction: str) -> bool:
        """
        Request a new heading for the next tick.

        A request for the exact reverse of the current direction is ignored.
        Returns True when the direction was applied.
        """
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction {direction!r}.")
        if direction == OPPOSITE[self.snake.direction]:
            return False
        self.snake.direction = direction
        return True

    def set_fruit(self, cell: Tuple[int, int]):
        """Place the fruit at a specific free cell."""
        cell = tuple(cell)
        if not self.in_bounds(cell):
            raise ValueError(f"Fruit out of bounds at {cell}.")
        if cell in self.snake:
            raise ValueError(f"Fruit cannot be placed on the snake at {cell}.")
        self.fruit = cell

    def _random_free_cell(self) -> Tuple[int, int]:
        """
        Return a random cell (x, y) not occupied by the snake.

        Samples uniformly up to MAX_PLACEMENT_TRIES times. If every sample
        hits the snake, picks among the remaining free cells directly; the
        last sample is kept only when the board has no free cell at all.
        """
        occupied = set(self.snake.positions)
        cell = None
        for _ in range(MAX_PLACEMENT_TRIES):
            cell = (self.rng.randrange(self.width), self.rng.randrange(self.height))
            if cell not in occupied:
                return cell

        free = [
            (x, y)
            for y in range(self.height)
            for x in range(self.width)
            if (x, y) not in occupied
        ]
        logger.warning(
            f"Fruit placement gave up after {MAX_PLACEMENT_TRIES} samples; "
            f"{len(free)} free cells left"
        )
        if free:
            return self.rng.choice(free)
        # Only reachable on a full board; play ends at capacity - 1.
        return cell

    def tick(self) -> TickResult:
        """
        Advance the game by one step:
          1) Wall collision ends the game
          2) Running into any segment (the tail included) ends the game
          3) Otherwise move; eating the fruit grows the snake, scores, and
             may raise the level. Filling the board ends the game as a win.
        """
        if self.game_over:
            raise InvalidStateError(f"Game {self.game_id} is already over ({self.end_cause}).")

        new_head = self.snake.next_head()

        if not self.in_bounds(new_head):
            return self._end_game(CAUSE_WALL)

        if new_head in self.snake:
            return self._end_game(CAUSE_SELF)

        ate = new_head == self.fruit
        self.snake.advance(new_head, grow=ate)
        self.moves += 1

        if ate:
            self._eat_fruit()
            if self.length >= self.capacity - 1:
                return self._end_game(CAUSE_BOARD_FULL)

        return TickResult.continuing()

    def _eat_fruit(self):
        self.score += FRUIT_SCORE
        self.fruits_eaten += 1
        self.fruit = self._random_free_cell()
        logger.debug(f"Fruit eaten: score={self.score}, length={self.length}, next fruit at {self.fruit}")

        # speed up every few fruits until the delay floor is reached
        if self.fruits_eaten % FRUITS_PER_LEVEL == 0 and self.delay_ms > MIN_DELAY_MS:
            self.delay_ms = max(MIN_DELAY_MS, self.delay_ms - DELAY_STEP_MS)
            self.level += 1
            logger.debug(f"Level {self.level} reached, delay now {self.delay_ms} ms")

    def _end_game(self, cause: str) -> TickResult:
        self.game_over = True
        self.end_cause = cause
        logger.info(
            f"Game {self.game_id} over ({cause}) after {self.moves} moves: "
            f"score={self.score}, length={self.length}, level={self.level}"
        )
        return TickResult.game_over(cause)

    def render(self) -> Frame:
        """
        Return a snapshot of the current board as a Frame.
        """
        return Frame(
            width=self.width,
            height=self.height,
            snake=list(self.snake.positions),
            fruit=self.fruit,
            score=self.score,
            level=self.level,
            delay_ms=self.delay_ms
        )

    def summary(self) -> Dict[str, Any]:
        return {
            "game_id": self.game_id,
            "score": self.score,
            "length": self.length,
            "level": self.level,
            "moves": self.moves,
            "end_cause": self.end_cause,
        }


# -------------------------------
# Driver Loop
# -------------------------------

def _wait_for_any_key(player: Player, sleep: Callable[[float], None]):
    """Return once anything is readable, closed input included."""
    while player.read_key() is None:
        sleep(0.01)


def _wait_while_paused(player: Player, sleep: Callable[[float], None]) -> bool:
    """
    Block until pause is toggled again. Returns False if the player quit.
    Direction keys pressed while paused are dropped.
    """
    while True:
        intent = player.poll()
        if intent == PAUSE:
            return True
        if intent == QUIT:
            return False
        sleep(PAUSE_POLL_MS / 1000)


def run_session(
    game: SnakeGame,
    player: Player,
    display,
    sleep: Callable[[float], None] = time.sleep,
    wait_for_start: bool = True
) -> str:
    """
    Drive a game until it ends.

    Args:
        game: a fresh SnakeGame
        player: input source polled once per tick
        display: sink with show(frame) and message(text)
        sleep: pacing function taking seconds
        wait_for_start: show the start prompt and wait for a key first

    Returns:
        'quit' if the player quit, otherwise the game-over cause
        ('wall', 'self' or 'board_full').
    """
    display.show(game.render())
    if wait_for_start:
        display.message(START_PROMPT)
        _wait_for_any_key(player, sleep)

    while True:
        intent = player.poll()
        if intent == QUIT:
            logger.info(f"Game {game.game_id}: player quit")
            return QUIT_REASON
        if intent == PAUSE:
            display.message(PAUSE_PROMPT)
            if not _wait_while_paused(player, sleep):
                logger.info(f"Game {game.game_id}: player quit while paused")
                return QUIT_REASON
        elif intent in VALID_MOVES:
            game.set_direction(intent)

        result = game.tick()
        if result.is_game_over:
            return result.cause

        display.show(game.render())
        sleep(game.delay_ms / 1000)


def final_report(game: SnakeGame) -> List[str]:
    lines = ["Game Over!"]
    if game.end_cause == CAUSE_BOARD_FULL:
        lines.append("Board full - you win!")
    lines.append(f"Final score: {game.score}")
    lines.append(f"Final length: {game.length}")
    lines.append(f"Level reached: {game.level}")
    return lines


# -------------------------------
# Main Entry Point
# -------------------------------
def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Play snake in the terminal. Steer with W/A/S/D, p pauses, q quits."
    )
    parser.add_argument("width", nargs='?', default=None,
                        help=f"Board width (>= {MIN_WIDTH}, default {DEFAULT_WIDTH}); give height too")
    parser.add_argument("height", nargs='?', default=None,
                        help=f"Board height (>= {MIN_HEIGHT}, default {DEFAULT_HEIGHT}); give width too")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for fruit placement (reproducible games)")
    parser.add_argument("--no-wait", action="store_true",
                        help="Start immediately instead of waiting for a key")

    args = parser.parse_args(argv)

    configure_logging(load_log_settings())
    settings = load_settings(args.width, args.height, args.seed)

    game = SnakeGame(settings.width, settings.height, rng=random.Random(settings.seed))
    display = TerminalDisplay()

    try:
        with KeyboardPlayer() as player:
            reason = run_session(game, player, display, wait_for_start=not args.no_wait)
    except KeyboardInterrupt:
        reason = QUIT_REASON
    logger.info(f"Session finished: {reason}, summary {game.summary()}")

    display.clear_screen()
    for line in final_report(game):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
