import random
from typing import Collection, Optional

from .config import GRID_SIZE
from .grid import Coordinate


class FoodSpawner:
    """Picks a random free cell for the next piece of food."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    @staticmethod
    def free_cells(occupied: Collection[Coordinate]) -> int:
        return GRID_SIZE * GRID_SIZE - len(set(occupied))

    def spawn(self, occupied: Collection[Coordinate]) -> Coordinate:
        """
        Return a random cell not in 'occupied'.
        Raises ValueError if the board is full.
        """
        occupied = set(occupied)
        if self.free_cells(occupied) <= 0:
            raise ValueError("no free cell left for food")
        # Rejection sampling is simple and fast for typical snake sizes.
        while True:
            pos = (self.rng.randrange(GRID_SIZE), self.rng.randrange(GRID_SIZE))
            if pos not in occupied:
                return pos
