"""Shared constants and utility helpers for Serpentine."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Tuple
import json
import random

CELL_SIZE = 25
FIELD_WIDTH = 600
FIELD_HEIGHT = 400
PANEL_HEIGHT = 60
FPS = 60

BASE_SPEED_MS = 200
MIN_SPEED_MS = 50
SPEED_STEP_MS = 10

HIGH_SCORE_KEY = "hiscore"

BG_COLOR = (18, 22, 30)
PANEL_COLOR = (236, 239, 241)
HEAD_COLOR = (76, 175, 80)
FOOD_COLOR = (255, 0, 0)
EYE_COLOR = (255, 255, 255)
TEXT_COLOR = (255, 255, 255)
PANEL_TEXT_COLOR = (0, 0, 0)

Direction = Tuple[int, int]
Position = Tuple[int, int]

UP: Direction = (0, -1)
DOWN: Direction = (0, 1)
LEFT: Direction = (-1, 0)
RIGHT: Direction = (1, 0)
DIRECTION_NAMES: dict[Direction, str] = {UP: "up", DOWN: "down", LEFT: "left", RIGHT: "right"}

DATA_DIR = Path(".serpentine")
SETTINGS_FILE = DATA_DIR / "settings.json"
STORAGE_FILE = DATA_DIR / "storage.json"


def is_opposite(a: Direction, b: Direction) -> bool:
    """Return whether two directions are opposite vectors."""
    return a[0] == -b[0] and a[1] == -b[1]


def add_direction(position: Position, direction: Direction, step: int = CELL_SIZE) -> Position:
    """Move a grid-aligned position by direction * step."""
    return (position[0] + direction[0] * step, position[1] + direction[1] * step)


def in_bounds(position: Position, width: int = FIELD_WIDTH, height: int = FIELD_HEIGHT) -> bool:
    """Check if a cell lies inside the playfield."""
    x, y = position
    return 0 <= x < width and 0 <= y < height


def random_cell(
    rng: random.Random,
    width: int = FIELD_WIDTH,
    height: int = FIELD_HEIGHT,
    cell_size: int = CELL_SIZE,
) -> Position:
    """Return a random grid cell in pixel units.

    The last column and row are never picked, and cells under the snake are
    not excluded.
    """
    max_x = max(1, (width - cell_size) // cell_size)
    max_y = max(1, (height - cell_size) // cell_size)
    return (rng.randrange(max_x) * cell_size, rng.randrange(max_y) * cell_size)


def load_json(path: Path, default: Any) -> Any:
    """Load JSON data, returning default when missing or malformed."""
    if not path.exists():
        return default
    try:
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
    except (ValueError, OSError):
        return default


def save_json(path: Path, payload: Any) -> None:
    """Save JSON data with deterministic formatting."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2, sort_keys=True)
