"""
Keyboard handling.

Controls
- Arrow keys / WASD: move
- Space / P: pause / resume
- R / Enter: restart
- Esc: quit
"""
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

import pygame

from .grid import Direction
from .state import GameState

KEY_TO_DIR = {
    pygame.K_UP:    Direction.UP,
    pygame.K_w:     Direction.UP,
    pygame.K_DOWN:  Direction.DOWN,
    pygame.K_s:     Direction.DOWN,
    pygame.K_LEFT:  Direction.LEFT,
    pygame.K_a:     Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d:     Direction.RIGHT,
}
PAUSE_KEYS = (pygame.K_SPACE, pygame.K_p)
RESET_KEYS = (pygame.K_r, pygame.K_RETURN)
QUIT_KEYS = (pygame.K_ESCAPE,)


class EffectKind(Enum):
    NONE = "none"
    DIRECTION = "direction"
    PAUSE = "pause"
    RESET = "reset"
    QUIT = "quit"


@dataclass(frozen=True)
class ControllerEffect:
    kind: EffectKind
    direction: Optional[Direction] = None
    state: Optional[GameState] = None


NO_EFFECT = ControllerEffect(EffectKind.NONE)


class InputController:
    """Buffers the next direction and turns key presses into effects."""

    def __init__(self):
        self.pending_direction: Optional[Direction] = None

    def clear(self):
        self.pending_direction = None

    def take(self) -> Optional[Direction]:
        """Hand the buffered direction to the tick and empty the buffer."""
        pending, self.pending_direction = self.pending_direction, None
        return pending

    def request_direction(self, direction: Direction, state: GameState) -> ControllerEffect:
        """Queue a direction change if it isn't an immediate reverse."""
        if state.is_game_over or direction is state.direction.opposite:
            return NO_EFFECT
        self.pending_direction = direction  # last writer wins
        return ControllerEffect(EffectKind.DIRECTION, direction=direction)

    @staticmethod
    def toggle_pause(state: GameState) -> ControllerEffect:
        if state.is_game_over:
            return NO_EFFECT
        return ControllerEffect(EffectKind.PAUSE, state=replace(state, is_paused=not state.is_paused))

    def on_key(self, key: int, state: GameState) -> ControllerEffect:
        if key in KEY_TO_DIR:
            return self.request_direction(KEY_TO_DIR[key], state)
        if key in PAUSE_KEYS:
            return self.toggle_pause(state)
        if key in RESET_KEYS:
            return ControllerEffect(EffectKind.RESET)
        if key in QUIT_KEYS:
            return ControllerEffect(EffectKind.QUIT)
        return NO_EFFECT
