"""Simulation step, collision rules and tick pacing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
import logging
import random

from .settings import GameSettings
from .snake import Snake
from .state import GameState, Phase
from .utils import in_bounds, random_cell

logger = logging.getLogger(__name__)


class StepOutcome(Enum):
    """What a single simulation step did."""

    IDLE = auto()
    MOVED = auto()
    ATE = auto()
    CRASHED = auto()


def speed_for_score(score: int, settings: GameSettings) -> int:
    """Tick interval for a score, shrinking by a fixed step down to the floor."""
    return max(settings.min_speed_ms, settings.base_speed_ms - score * settings.speed_step_ms)


def detect_collision(snake: Snake, width: int, height: int) -> bool:
    """Return whether the head left the field or overlaps the body."""
    return not in_bounds(snake.head, width, height) or snake.hits_itself()


def simulate_step(state: GameState, settings: GameSettings, rng: random.Random) -> StepOutcome:
    """Advance the snake by exactly one cell."""
    if state.phase is not Phase.RUNNING:
        return StepOutcome.IDLE

    snake = state.snake
    head = snake.next_head(settings.cell_size)
    outcome = StepOutcome.MOVED
    if head == state.food:
        snake.grow(head)
        state.score += 1
        snake.speed_ms = speed_for_score(state.score, settings)
        state.food = random_cell(rng, settings.field_width, settings.field_height, settings.cell_size)
        logger.debug("Food eaten, score %d, next food at %s", state.score, state.food)
        outcome = StepOutcome.ATE
    else:
        snake.advance(head)

    if detect_collision(snake, settings.field_width, settings.field_height):
        state.phase = Phase.GAME_OVER
        return StepOutcome.CRASHED
    return outcome


def finalize_score(state: GameState) -> bool:
    """Raise the high score after a lost round; return whether it changed."""
    if not state.game_over or state.score <= state.high_score:
        return False
    state.high_score = state.score
    return True


@dataclass(slots=True)
class StepTimer:
    """Throttle frame callbacks down to the snake's tick interval."""

    last_ms: int = 0

    def ready(self, now_ms: int, interval_ms: int) -> bool:
        """Return True and restart the interval once enough time elapsed."""
        if now_ms - self.last_ms < interval_ms:
            return False
        self.last_ms = now_ms
        return True
