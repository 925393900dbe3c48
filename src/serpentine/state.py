"""Game state owned by the controller."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from .settings import GameSettings
from .snake import Snake
from .utils import Position


class Phase(Enum):
    """Finite states for a round."""

    RUNNING = auto()
    GAME_OVER = auto()


@dataclass(slots=True)
class GameState:
    """Mutable round state plus the session high score."""

    snake: Snake
    food: Position
    score: int = 0
    high_score: int = 0
    phase: Phase = Phase.RUNNING

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    def reset(self, food: Position) -> None:
        """Start a fresh round; the high score is kept."""
        self.snake.reset()
        self.food = food
        self.score = 0
        self.phase = Phase.RUNNING


def new_game_state(settings: GameSettings, food: Position, high_score: int = 0) -> GameState:
    """Build the initial running state."""
    return GameState(
        snake=Snake(base_speed_ms=settings.base_speed_ms),
        food=food,
        high_score=high_score,
    )
