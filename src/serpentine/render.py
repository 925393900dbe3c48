"""Drawing of the playfield and the score panel."""

from __future__ import annotations

import pygame

from .settings import GameSettings
from .state import GameState
from .utils import (
    BG_COLOR,
    CELL_SIZE,
    EYE_COLOR,
    FOOD_COLOR,
    HEAD_COLOR,
    LEFT,
    PANEL_COLOR,
    PANEL_TEXT_COLOR,
    RIGHT,
    TEXT_COLOR,
    Direction,
    Position,
)

CORNER_RADIUS = 10
EYE_RADIUS = 5
HUE_STEP = 30

OVERLAY_X = 200
OVERLAY_BASELINES = (180, 230, 280)
PANEL_X = 10
PANEL_BASELINES = (25, 45)


def segment_color(index: int, is_head: bool = False) -> tuple[int, int, int]:
    """Return the fill for a snake segment; body hue rotates by index."""
    if is_head:
        return HEAD_COLOR
    color = pygame.Color(0, 0, 0)
    color.hsla = ((index * HUE_STEP) % 360, 70, 50, 100)
    return color.r, color.g, color.b


def scaled(value: int, size: int) -> int:
    """Scale a length laid out for the default cell size to another size."""
    return round(value * size / CELL_SIZE)


def eye_positions(cell: Position, direction: Direction, size: int = CELL_SIZE) -> tuple[Position, Position]:
    """Eye centers for the head, stacked vertically when facing sideways."""
    x, y = cell
    near, mid, far = scaled(8, size), scaled(10, size), scaled(17, size)
    if direction in (LEFT, RIGHT):
        return (x + mid, y + near), (x + mid, y + far)
    return (x + near, y + mid), (x + far, y + mid)


class Renderer:
    """Paint a game state onto the field and panel surfaces."""

    def __init__(self, settings: GameSettings) -> None:
        self.settings = settings
        self.overlay_font = pygame.font.SysFont("arial", 30)
        self.panel_font = pygame.font.SysFont("arial", 18)

    def draw(self, state: GameState, field: pygame.Surface, panel: pygame.Surface) -> None:
        self.draw_field(field, state)
        self.draw_panel(panel, state)

    def draw_field(self, surface: pygame.Surface, state: GameState) -> None:
        """Draw snake, food and the game over overlay."""
        surface.fill(BG_COLOR)
        size = self.settings.cell_size

        cells = list(state.snake.cells)
        last = len(cells) - 1
        for index, cell in enumerate(cells):
            is_head = index == last
            self._draw_cell(surface, cell, segment_color(index, is_head))
            if is_head:
                for eye in eye_positions(cell, state.snake.direction, size):
                    pygame.draw.circle(surface, EYE_COLOR, eye, scaled(EYE_RADIUS, size))

        self._draw_cell(surface, state.food, FOOD_COLOR)

        if state.game_over:
            lines = ("Game Over", f"Final Score: {state.score}", "Press any key to restart")
            for line, baseline in zip(lines, OVERLAY_BASELINES):
                self._blit_text(surface, self.overlay_font, line, TEXT_COLOR, OVERLAY_X, baseline)

    def draw_panel(self, surface: pygame.Surface, state: GameState) -> None:
        """Draw the current and high score."""
        surface.fill(PANEL_COLOR)
        lines = (f"Score: {state.score}", f"High Score: {state.high_score}")
        for line, baseline in zip(lines, PANEL_BASELINES):
            self._blit_text(surface, self.panel_font, line, PANEL_TEXT_COLOR, PANEL_X, baseline)

    def _draw_cell(self, surface: pygame.Surface, cell: Position, color: tuple[int, int, int]) -> None:
        size = self.settings.cell_size
        rect = pygame.Rect(cell[0], cell[1], size, size)
        pygame.draw.rect(surface, color, rect, border_radius=scaled(CORNER_RADIUS, size))

    @staticmethod
    def _blit_text(
        surface: pygame.Surface,
        font: pygame.font.Font,
        text: str,
        color: tuple[int, int, int],
        x: int,
        baseline: int,
    ) -> None:
        rendered = font.render(text, True, color)
        surface.blit(rendered, (x, baseline - font.get_ascent()))
