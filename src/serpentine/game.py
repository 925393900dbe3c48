"""Core game loop and orchestration."""

from __future__ import annotations

import logging
import random
import pygame

from .controls import handle_key, key_bindings
from .render import Renderer
from .settings import GameSettings, SettingsManager
from .simulation import StepOutcome, StepTimer, finalize_score, simulate_step
from .state import GameState, new_game_state
from .storage import HighScoreStore, JsonFileStore, KeyValueStore
from .utils import Position, random_cell

logger = logging.getLogger(__name__)


class SnakeGame:
    """Owns the game state and drives input, simulation and rendering."""

    def __init__(
        self,
        store: KeyValueStore | None = None,
        settings_manager: SettingsManager | None = None,
        seed: int | None = None,
    ) -> None:
        pygame.init()
        pygame.font.init()

        self.settings_manager = settings_manager or SettingsManager()
        self.settings: GameSettings = self.settings_manager.settings

        width = self.settings.field_width
        height = self.settings.field_height
        self.screen = pygame.display.set_mode((width, height + self.settings.panel_height))
        pygame.display.set_caption("Serpentine")
        self.clock = pygame.time.Clock()
        self.field = pygame.Surface((width, height))
        self.panel = pygame.Surface((width, self.settings.panel_height))
        self.renderer = Renderer(self.settings)

        self.rng = random.Random(seed)
        self.bindings = key_bindings(self.settings.controls)
        self.high_scores = HighScoreStore(store if store is not None else JsonFileStore())
        high_score = self.high_scores.load()
        logger.info("Loaded high score %d", high_score)

        self.state: GameState = new_game_state(self.settings, self.spawn_food(), high_score)
        self.timer = StepTimer()

    def spawn_food(self) -> Position:
        return random_cell(self.rng, self.settings.field_width, self.settings.field_height, self.settings.cell_size)

    def run(self) -> None:
        """Main event/update/render loop; ends only when the window closes."""
        running = True
        while running:
            self.clock.tick(self.settings.fps)
            running = self._handle_events()
            if not running:
                break
            self.update(pygame.time.get_ticks())
            self._render()

        pygame.quit()

    def _handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                self.handle_key(event.key)
        return True

    def handle_key(self, key: int) -> None:
        handle_key(self.state, key, self.bindings, self.spawn_food)

    def update(self, now_ms: int) -> None:
        """Run a simulation step when the snake's tick interval has elapsed."""
        if self.timer.ready(now_ms, self.state.snake.speed_ms):
            self.step()

    def step(self) -> StepOutcome:
        outcome = simulate_step(self.state, self.settings, self.rng)
        if outcome is StepOutcome.CRASHED:
            self._finish_game()
        return outcome

    def _finish_game(self) -> None:
        logger.info("Game over with score %d", self.state.score)
        if finalize_score(self.state):
            self.high_scores.save(self.state.high_score)
            logger.info("New high score %d", self.state.high_score)

    def _render(self) -> None:
        self.renderer.draw(self.state, self.field, self.panel)
        self.screen.blit(self.field, (0, 0))
        self.screen.blit(self.panel, (0, self.settings.field_height))
        pygame.display.flip()
