from __future__ import annotations

from collections import deque

import pygame

from serpentine.render import Renderer, eye_positions, segment_color
from serpentine.settings import GameSettings
from serpentine.state import Phase, new_game_state
from serpentine.utils import BG_COLOR, DOWN, EYE_COLOR, FOOD_COLOR, HEAD_COLOR, LEFT, PANEL_COLOR, UP


def _rgb(surface: pygame.Surface, point: tuple[int, int]) -> tuple[int, int, int]:
    return tuple(surface.get_at(point))[:3]


def test_segment_colors_cycle_every_twelve_segments() -> None:
    pygame.init()
    assert segment_color(3, is_head=True) == HEAD_COLOR
    assert segment_color(0) == segment_color(12)
    assert segment_color(1) != segment_color(2)


def test_eye_positions_rotate_with_direction() -> None:
    assert eye_positions((50, 75), LEFT) == ((60, 83), (60, 92))
    assert eye_positions((50, 75), UP) == ((58, 85), (67, 85))
    assert eye_positions((50, 75), DOWN) == eye_positions((50, 75), UP)


def test_draw_field_paints_head_eyes_and_food() -> None:
    pygame.init()
    settings = GameSettings()
    renderer = Renderer(settings)
    state = new_game_state(settings, food=(100, 100))
    state.snake.cells = deque([(200, 200), (225, 200)])
    field = pygame.Surface((settings.field_width, settings.field_height))

    renderer.draw_field(field, state)

    assert _rgb(field, (112, 112)) == FOOD_COLOR
    assert _rgb(field, (235, 200 + 8)) == EYE_COLOR
    assert _rgb(field, (245, 212)) == HEAD_COLOR
    assert _rgb(field, (212, 212)) == segment_color(0)
    assert _rgb(field, (400, 50)) == BG_COLOR


def test_game_over_overlay_and_panel_are_drawn() -> None:
    pygame.init()
    settings = GameSettings()
    renderer = Renderer(settings)
    state = new_game_state(settings, food=(500, 350), high_score=4)
    state.phase = Phase.GAME_OVER
    field = pygame.Surface((settings.field_width, settings.field_height))
    panel = pygame.Surface((settings.field_width, settings.panel_height))

    renderer.draw(state, field, panel)

    overlay_pixels = {_rgb(field, (x, y)) for x in range(200, 320) for y in range(150, 290)}
    assert overlay_pixels - {BG_COLOR}
    panel_pixels = {_rgb(panel, (x, y)) for x in range(10, 120) for y in range(5, 50)}
    assert panel_pixels - {PANEL_COLOR}


def test_eyes_scale_with_cell_size() -> None:
    pygame.init()
    assert eye_positions((100, 100), LEFT, size=50) == ((120, 116), (120, 134))
    assert eye_positions((100, 100), UP, size=50) == ((116, 120), (134, 120))

    settings = GameSettings(cell_size=50)
    renderer = Renderer(settings)
    state = new_game_state(settings, food=(400, 300))
    state.snake.cells = deque([(100, 100)])
    field = pygame.Surface((settings.field_width, settings.field_height))

    renderer.draw_field(field, state)

    assert _rgb(field, (120, 116)) == EYE_COLOR
    assert _rgb(field, (110, 108)) == HEAD_COLOR
    assert _rgb(field, (140, 125)) == HEAD_COLOR
