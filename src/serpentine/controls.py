"""Keyboard input handling."""

from __future__ import annotations

from typing import Callable
import logging

from .settings import ControlScheme
from .state import GameState
from .utils import DIRECTION_NAMES, DOWN, LEFT, RIGHT, UP, Direction, Position

logger = logging.getLogger(__name__)


def key_bindings(scheme: ControlScheme) -> dict[int, Direction]:
    """Map key codes from a control scheme to directions."""
    return {
        scheme.up: UP,
        scheme.down: DOWN,
        scheme.left: LEFT,
        scheme.right: RIGHT,
    }


def handle_key(
    state: GameState,
    key: int,
    bindings: dict[int, Direction],
    spawn_food: Callable[[], Position],
) -> bool:
    """Apply a key press; return whether it restarted a finished round.

    Unbound keys keep the current heading and reversals are ignored. After a
    game over every key restarts, bound or not.
    """
    current = state.snake.direction
    requested = bindings.get(key, current)
    if requested != current and state.snake.turn(requested):
        logger.debug("Heading %s", DIRECTION_NAMES[requested])

    if not state.game_over:
        return False
    state.reset(spawn_food())
    logger.info("New round started, high score %d", state.high_score)
    return True
