"""
The tick function: one discrete simulation step.

``advance`` is pure apart from the food RNG owned by the spawner. It never
touches storage or timers; the session compares snapshots to decide whether
to persist the high score or reschedule the timer.
"""
from dataclasses import replace
from typing import Optional

from .config import SCORE_PER_FOOD
from .food import FoodSpawner
from .grid import Direction, in_bounds, step
from .state import GameState


def resolve_direction(current: Direction, pending: Optional[Direction]) -> Direction:
    """Adopt 'pending' unless it is missing or an immediate reverse."""
    if pending is None or pending is current.opposite:
        return current
    return pending


def advance(state: GameState, pending: Optional[Direction], spawner: FoodSpawner) -> GameState:
    if state.is_game_over or state.is_paused:
        return state

    direction = resolve_direction(state.direction, pending)
    new_head = step(state.head, direction)

    # Freeze on the crash frame: walls, then any body cell (tail included,
    # it has not been popped yet).
    if not in_bounds(new_head) or new_head in state.snake:
        return replace(state, direction=direction, is_game_over=True)

    snake = (new_head,) + state.snake

    if new_head != state.food:
        return replace(state, snake=snake[:-1], direction=direction)

    score = state.score + SCORE_PER_FOOD
    high_score = max(state.high_score, score)
    if FoodSpawner.free_cells(snake) == 0:
        # Board full: nothing left to spawn on.
        return replace(state, snake=snake, direction=direction, score=score,
                       high_score=high_score, is_game_over=True)
    return replace(
        state,
        snake=snake,
        food=spawner.spawn(snake),
        direction=direction,
        score=score,
        high_score=high_score,
    )
