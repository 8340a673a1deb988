"""
Snake — grid snake game for pygame.

The game rules live in plain modules that need no display; only
``render`` and ``main`` draw to the screen.
"""
from .grid import GRID_SIZE, Direction, in_bounds, step
from .state import GameState, new_game
from .engine import advance
from .food import FoodSpawner

__all__ = [
    'GRID_SIZE', 'Direction', 'in_bounds', 'step',
    'GameState', 'new_game',
    'advance',
    'FoodSpawner',
]
