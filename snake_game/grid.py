"""Board coordinates and directions."""
from enum import Enum
from typing import Tuple

from .config import GRID_SIZE

Coordinate = Tuple[int, int]


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))


def in_bounds(cell: Coordinate) -> bool:
    x, y = cell
    return 0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE


def step(cell: Coordinate, direction: Direction) -> Coordinate:
    """Return the neighbouring cell one unit away in ``direction``."""
    dx, dy = direction.value
    return (cell[0] + dx, cell[1] + dy)
