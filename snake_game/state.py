"""
GameState — an immutable snapshot of one game at one tick.

Snapshots are never mutated in place; the engine, the input controller and
the session derive new ones with ``dataclasses.replace``.
"""
from dataclasses import dataclass
from typing import Tuple

from .config import INITIAL_SNAKE
from .food import FoodSpawner
from .grid import Coordinate, Direction

INITIAL_DIRECTION = Direction.UP


@dataclass(frozen=True)
class GameState:
    snake: Tuple[Coordinate, ...]       # head first
    food: Coordinate
    direction: Direction = INITIAL_DIRECTION
    score: int = 0
    high_score: int = 0
    is_game_over: bool = False
    is_paused: bool = False

    @property
    def head(self) -> Coordinate:
        return self.snake[0]

    @property
    def tail(self) -> Coordinate:
        return self.snake[-1]

    def __repr__(self):
        return (
            f"<GameState head={self.head} len={len(self.snake)} food={self.food} "
            f"dir={self.direction.name} score={self.score} best={self.high_score} "
            f"over={self.is_game_over} paused={self.is_paused}>"
        )


def new_game(spawner: FoodSpawner, high_score: int = 0) -> GameState:
    """Initialize a fresh game state."""
    snake = tuple(INITIAL_SNAKE)
    return GameState(
        snake=snake,
        food=spawner.spawn(snake),
        direction=INITIAL_DIRECTION,
        high_score=high_score,
    )
