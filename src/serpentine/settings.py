"""Settings persistence and runtime configuration."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any
import logging
import pygame

from .utils import (
    BASE_SPEED_MS,
    CELL_SIZE,
    FIELD_HEIGHT,
    FIELD_WIDTH,
    FPS,
    MIN_SPEED_MS,
    PANEL_HEIGHT,
    SETTINGS_FILE,
    SPEED_STEP_MS,
    load_json,
    save_json,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ControlScheme:
    """Key bindings for steering the snake."""

    up: int
    down: int
    left: int
    right: int


@dataclass(slots=True)
class GameSettings:
    """Persistent settings for the game."""

    cell_size: int = CELL_SIZE
    field_width: int = FIELD_WIDTH
    field_height: int = FIELD_HEIGHT
    panel_height: int = PANEL_HEIGHT
    fps: int = FPS
    base_speed_ms: int = BASE_SPEED_MS
    min_speed_ms: int = MIN_SPEED_MS
    speed_step_ms: int = SPEED_STEP_MS
    controls: ControlScheme = field(
        default_factory=lambda: ControlScheme(
            up=pygame.K_UP,
            down=pygame.K_DOWN,
            left=pygame.K_LEFT,
            right=pygame.K_RIGHT,
        )
    )


class SettingsManager:
    """Load and save game settings."""

    def __init__(self, path: Path = SETTINGS_FILE) -> None:
        self.path = path
        self.settings = self.load()

    def load(self) -> GameSettings:
        """Load game settings from disk with safe defaults."""
        raw = load_json(self.path, {})
        settings = GameSettings()
        if not isinstance(raw, dict):
            logger.warning("Ignoring malformed settings file %s", self.path)
            return settings

        for name in (
            "cell_size",
            "field_width",
            "field_height",
            "panel_height",
            "fps",
            "base_speed_ms",
            "min_speed_ms",
            "speed_step_ms",
        ):
            value = self._positive_int(raw.get(name))
            if value is not None:
                setattr(settings, name, value)
            elif name in raw:
                logger.warning("Ignoring invalid value for %s: %r", name, raw[name])

        if settings.field_width % settings.cell_size or settings.field_height % settings.cell_size:
            logger.warning(
                "Field %dx%d is not a multiple of cell size %d, using defaults",
                settings.field_width,
                settings.field_height,
                settings.cell_size,
            )
            settings.cell_size = CELL_SIZE
            settings.field_width = FIELD_WIDTH
            settings.field_height = FIELD_HEIGHT

        settings.min_speed_ms = min(settings.min_speed_ms, settings.base_speed_ms)
        settings.controls = self._load_controls(raw.get("controls", {}), settings.controls)
        return settings

    @staticmethod
    def _positive_int(value: Any) -> int | None:
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        return value if value > 0 else None

    @staticmethod
    def _load_controls(payload: Any, defaults: ControlScheme) -> ControlScheme:
        if not isinstance(payload, dict):
            return defaults
        try:
            return ControlScheme(
                up=int(payload.get("up", defaults.up)),
                down=int(payload.get("down", defaults.down)),
                left=int(payload.get("left", defaults.left)),
                right=int(payload.get("right", defaults.right)),
            )
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid control bindings: %r", payload)
            return defaults

    def save(self) -> None:
        """Persist settings to disk."""
        save_json(self.path, asdict(self.settings))
