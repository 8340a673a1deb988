"""Drawing. Reads a GameState snapshot, never changes it."""
import pygame

from .config import (
    BEST, BG, BOARD, BOARD_PX, CRASH, FOOD, FOOTER_H, GRID, GRID_SIZE, HEAD, HUD_H,
    SNAKE, TEXT, TEXT_DIM, TILE_SIZE, TITLE, UI_DIM, WINDOW_W,
)
from .grid import Coordinate
from .state import GameState

LEGEND = "Arrows/WASD move · Space pause · R restart · Esc quit"


def grid_to_px(cell: Coordinate) -> pygame.Rect:
    """Convert a (x, y) grid coordinate to a pygame.Rect in pixels (below the HUD)."""
    x, y = cell
    return pygame.Rect(x * TILE_SIZE, HUD_H + y * TILE_SIZE, TILE_SIZE, TILE_SIZE)


class Renderer:
    def __init__(self, surface: pygame.Surface):
        pygame.font.init()
        self.surface = surface
        self.big = pygame.font.SysFont(None, 56)
        self.font = pygame.font.SysFont(None, 30)
        self.small = pygame.font.SysFont(None, 20)

    def text(self, msg, font, color, center):
        render = font.render(msg, True, color)
        self.surface.blit(render, render.get_rect(center=center))

    def draw(self, state: GameState):
        self.surface.fill(BG)
        self.draw_board()
        self.draw_food(state.food)
        self.draw_snake(state.snake)
        self.draw_hud(state)
        if state.is_game_over:
            self.draw_game_over(state)
        elif state.is_paused:
            self.draw_paused()

    def draw_board(self):
        pygame.draw.rect(self.surface, BOARD, (0, HUD_H, BOARD_PX, BOARD_PX))
        for i in range(GRID_SIZE + 1):
            p = i * TILE_SIZE
            pygame.draw.line(self.surface, GRID, (p, HUD_H), (p, HUD_H + BOARD_PX))
            pygame.draw.line(self.surface, GRID, (0, HUD_H + p), (BOARD_PX, HUD_H + p))

    def draw_food(self, food: Coordinate):
        r = grid_to_px(food).inflate(-TILE_SIZE * 0.3, -TILE_SIZE * 0.3)
        pygame.draw.ellipse(self.surface, FOOD, r)

    def draw_snake(self, snake):
        # tail first so the head is drawn on top
        for i in range(len(snake) - 1, -1, -1):
            rect = grid_to_px(snake[i]).inflate(-2, -2)
            pygame.draw.rect(self.surface, HEAD if i == 0 else SNAKE, rect, border_radius=3)

    def draw_hud(self, state: GameState):
        title = self.font.render("SNAKE.PRO", True, TITLE)
        self.surface.blit(title, (10, 6))
        best = self.small.render(f"Best: {state.high_score}", True, BEST)
        self.surface.blit(best, (10, 32))
        score = self.font.render(f"Score {state.score}", True, TEXT)
        self.surface.blit(score, (WINDOW_W - score.get_width() - 10, 6))
        self.text(LEGEND, self.small, TEXT_DIM, (WINDOW_W // 2, HUD_H + BOARD_PX + FOOTER_H // 2))

    def _overlay(self):
        overlay = pygame.Surface((BOARD_PX, BOARD_PX), pygame.SRCALPHA)
        overlay.fill(UI_DIM)
        self.surface.blit(overlay, (0, HUD_H))

    def draw_game_over(self, state: GameState):
        self._overlay()
        cx, cy = BOARD_PX // 2, HUD_H + BOARD_PX // 2
        self.text("CRASHED!", self.big, CRASH, (cx, cy - 36))
        self.text(f"Final Score: {state.score}", self.font, TEXT, (cx, cy + 6))
        self.text("Press R to try again", self.small, TEXT_DIM, (cx, cy + 36))

    def draw_paused(self):
        self._overlay()
        cx, cy = BOARD_PX // 2, HUD_H + BOARD_PX // 2
        self.text("PAUSED", self.big, BEST, (cx, cy - 16))
        self.text("Press Space to resume", self.small, TEXT_DIM, (cx, cy + 22))
