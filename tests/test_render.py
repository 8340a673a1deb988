"""Smoke tests for the Renderer, drawing onto an off-screen surface."""

import pygame
import pytest

from snake_game.config import HEAD, HUD_H, TILE_SIZE, WINDOW_H, WINDOW_W
from snake_game.render import Renderer, grid_to_px


@pytest.fixture
def renderer():
    pygame.font.init()
    return Renderer(pygame.Surface((WINDOW_W, WINDOW_H)))


class TestGridToPx:
    """Tests for grid_to_px."""

    def test_cell_below_hud(self):
        """Cells are laid out under the HUD bar."""
        rect = grid_to_px((2, 3))
        assert rect.topleft == (2 * TILE_SIZE, HUD_H + 3 * TILE_SIZE)
        assert rect.size == (TILE_SIZE, TILE_SIZE)


class TestRenderer:
    """Tests for the Renderer class."""

    def test_draw_playing(self, renderer, make_state):
        """The head cell is painted in the head colour."""
        state = make_state([(10, 10), (10, 11), (10, 12)], food=(3, 3))
        renderer.draw(state)
        center = grid_to_px((10, 10)).center
        assert tuple(renderer.surface.get_at(center))[:3] == HEAD

    @pytest.mark.parametrize("flags", [{"is_paused": True}, {"is_game_over": True}])
    def test_draw_overlays(self, renderer, make_state, flags):
        """Paused and game-over frames draw without touching the state."""
        state = make_state([(10, 10), (10, 11), (10, 12)], food=(3, 3), **flags)
        renderer.draw(state)
        assert state.snake == ((10, 10), (10, 11), (10, 12))
