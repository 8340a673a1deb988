"""Tests for FoodSpawner."""

import random

import pytest

from snake_game.food import FoodSpawner
from snake_game.grid import GRID_SIZE, in_bounds


class TestFoodSpawner:
    """Tests for the FoodSpawner class."""

    def test_spawn_avoids_occupied(self, spawner):
        """Spawned food never lands on an occupied cell."""
        occupied = {(x, y) for x in range(GRID_SIZE) for y in range(GRID_SIZE) if x < 18}
        for _ in range(50):
            cell = spawner.spawn(occupied)
            assert cell not in occupied
            assert in_bounds(cell)

    def test_single_free_cell_is_found(self, spawner):
        """With one free cell left, spawn returns exactly that cell."""
        occupied = {(x, y) for x in range(GRID_SIZE) for y in range(GRID_SIZE)}
        occupied.discard((7, 13))
        assert spawner.spawn(occupied) == (7, 13)

    def test_full_board_raises(self, spawner):
        """A full board raises ValueError instead of looping forever."""
        occupied = [(x, y) for x in range(GRID_SIZE) for y in range(GRID_SIZE)]
        with pytest.raises(ValueError):
            spawner.spawn(occupied)

    def test_free_cells(self):
        """free_cells counts distinct empty cells."""
        assert FoodSpawner.free_cells([]) == GRID_SIZE * GRID_SIZE
        assert FoodSpawner.free_cells([(1, 1), (1, 1), (2, 2)]) == GRID_SIZE * GRID_SIZE - 2

    def test_seeded_spawner_is_deterministic(self):
        """Two spawners with the same seed produce the same cells."""
        a = FoodSpawner(random.Random(7))
        b = FoodSpawner(random.Random(7))
        assert [a.spawn(set()) for _ in range(5)] == [b.spawn(set()) for _ in range(5)]
