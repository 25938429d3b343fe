"""
Runtime settings for the terminal snake game.

Board size and seed come from the command line first, then from the
environment (a .env file is honoured through python-dotenv), then from
the built-in defaults:

    SNAKE_WIDTH / SNAKE_HEIGHT   board size (both needed, default 30x20)
    SNAKE_SEED                   integer seed for fruit placement
    SNAKE_LOG_LEVEL              logging level name (default WARNING)
    SNAKE_LOG_FILE               write logs to this file instead of stderr
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional, Tuple

from domain.constants import (
    DEFAULT_WIDTH, DEFAULT_HEIGHT, MIN_WIDTH, MIN_HEIGHT, MAX_CELLS
)

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    seed: Optional[int] = None
    log_level: str = "WARNING"
    log_file: Optional[str] = None


def _parse_int(value) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def is_valid_board_size(width: int, height: int) -> bool:
    return width >= MIN_WIDTH and height >= MIN_HEIGHT and width * height <= MAX_CELLS


def resolve_board_size(width=None, height=None) -> Tuple[int, int]:
    """
    Return a usable (width, height) pair.

    Both values must parse as integers and pass the board limits, otherwise
    the defaults are used. Invalid input is never reported to the player.
    """
    w = _parse_int(width)
    h = _parse_int(height)
    if w is not None and h is not None and is_valid_board_size(w, h):
        return w, h
    if width is not None or height is not None:
        logger.debug(f"Ignoring board size {width!r}x{height!r}; using defaults")
    return DEFAULT_WIDTH, DEFAULT_HEIGHT


def load_log_settings() -> Settings:
    """Settings carrying only the logging fields, read from the environment."""
    return Settings(
        log_level=os.getenv('SNAKE_LOG_LEVEL', 'WARNING').upper(),
        log_file=os.getenv('SNAKE_LOG_FILE') or None,
    )


def load_settings(width=None, height=None, seed=None) -> Settings:
    """
    Build Settings from explicit arguments falling back to the environment.

    Width and height only count as a pair: if either is missing the board
    size comes from SNAKE_WIDTH / SNAKE_HEIGHT instead. Call load_dotenv()
    beforehand if a .env file should be taken into account.
    """
    if width is None or height is None:
        if width is not None or height is not None:
            logger.debug(f"Board size needs both width and height; ignoring {width!r}x{height!r}")
        width = os.getenv('SNAKE_WIDTH')
        height = os.getenv('SNAKE_HEIGHT')
    board_width, board_height = resolve_board_size(width, height)

    if seed is None:
        seed = _parse_int(os.getenv('SNAKE_SEED'))

    log_settings = load_log_settings()
    return Settings(
        width=board_width,
        height=board_height,
        seed=seed,
        log_level=log_settings.log_level,
        log_file=log_settings.log_file,
    )


def configure_logging(settings: Settings):
    """Configure root logging; only the CLI entry point should call this."""
    kwargs = {}
    if settings.log_file:
        kwargs['filename'] = settings.log_file
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True,
        **kwargs
    )
