from __future__ import annotations

from collections import deque
from pathlib import Path

import pygame

from serpentine.game import SnakeGame
from serpentine.settings import SettingsManager
from serpentine.simulation import StepOutcome
from serpentine.state import Phase
from serpentine.storage import MemoryStore
from serpentine.utils import LEFT, RIGHT


def _game(tmp_path: Path, store: MemoryStore) -> SnakeGame:
    game = SnakeGame(store=store, settings_manager=SettingsManager(tmp_path / "settings.json"), seed=1)
    game.state.food = (300, 300)
    return game


def test_game_loads_high_score_from_store(tmp_path: Path) -> None:
    game = _game(tmp_path, MemoryStore({"hiscore": "4"}))
    assert game.state.high_score == 4
    assert game.state.phase is Phase.RUNNING
    assert list(game.state.snake.cells) == [(0, 0)]


def test_update_steps_only_after_interval(tmp_path: Path) -> None:
    game = _game(tmp_path, MemoryStore())
    game.update(150)
    assert game.state.snake.head == (0, 0)
    game.update(200)
    assert game.state.snake.head == (25, 0)
    game.update(300)
    assert game.state.snake.head == (25, 0)


def test_crash_persists_new_high_score_and_key_restarts(tmp_path: Path) -> None:
    store = MemoryStore({"hiscore": "4"})
    game = _game(tmp_path, store)
    game.state.score = 7
    game.state.snake.direction = LEFT

    assert game.step() is StepOutcome.CRASHED
    assert game.state.high_score == 7
    assert store.get("hiscore") == "7"
    assert game.step() is StepOutcome.IDLE

    game.handle_key(pygame.K_a)
    assert game.state.phase is Phase.RUNNING
    assert game.state.score == 0
    assert game.state.snake.direction == RIGHT
    assert game.state.high_score == 7


def test_crash_below_high_score_leaves_store_alone(tmp_path: Path) -> None:
    store = MemoryStore({"hiscore": "10"})
    game = _game(tmp_path, store)
    game.state.score = 3
    game.state.snake.cells = deque([(0, 100)])
    game.state.snake.direction = LEFT

    game.step()
    assert game.state.game_over
    assert game.state.high_score == 10
    assert store.get("hiscore") == "10"


def test_render_frame_runs_headless(tmp_path: Path) -> None:
    game = _game(tmp_path, MemoryStore())
    game._render()
    assert game.screen.get_size() == (600, 460)
