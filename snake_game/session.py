"""
GameSession — the single owner of a running game.

Lifecycle
- start():    load the high score, build the first snapshot, arm the timer
- reset():    stop the timer, fresh snapshot (high score kept), re-arm
- teardown(): stop the timer for good; later ticks are ignored
"""
import logging
from typing import Optional

from .controls import ControllerEffect, EffectKind, InputController
from .engine import advance
from .food import FoodSpawner
from .persistence import HighScoreStore
from .scheduler import Scheduler
from .state import GameState, new_game

logger = logging.getLogger(__name__)


class GameSession:
    def __init__(self, store: HighScoreStore, scheduler: Scheduler,
                 spawner: Optional[FoodSpawner] = None,
                 controller: Optional[InputController] = None):
        self.store = store
        self.scheduler = scheduler
        self.spawner = spawner or FoodSpawner()
        self.controller = controller or InputController()
        self._state: Optional[GameState] = None
        self.closed = False

    @property
    def state(self) -> GameState:
        if self._state is None:
            raise RuntimeError("session not started")
        return self._state

    def start(self) -> GameState:
        high_score = self.store.load()
        self._state = new_game(self.spawner, high_score)
        self.closed = False
        self.scheduler.start(self._state.score)
        logger.info("New game (best %d)", high_score)
        return self._state

    def reset(self) -> GameState:
        self.scheduler.stop()
        self.controller.clear()
        self._state = new_game(self.spawner, self.state.high_score)
        self.scheduler.start(self._state.score)
        logger.info("Game reset")
        return self._state

    def teardown(self):
        self.scheduler.stop()
        self.closed = True

    def handle_key(self, key: int) -> ControllerEffect:
        effect = self.controller.on_key(key, self.state)
        if effect.kind is EffectKind.PAUSE:
            self._state = effect.state
            logger.info("Paused" if self._state.is_paused else "Resumed")
        elif effect.kind is EffectKind.RESET:
            self.reset()
        return effect

    def tick(self) -> GameState:
        before = self.state
        if self.closed or before.is_paused or before.is_game_over:
            # Keep any buffered turn for when play resumes.
            return before
        after = advance(before, self.controller.take(), self.spawner)
        self._state = after

        if after.high_score > before.high_score:
            logger.info("New high score: %d", after.high_score)
            self.store.store(after.high_score)
        if after.score != before.score:
            self.scheduler.reschedule(after.score)
        if after.is_game_over and not before.is_game_over:
            logger.info("Game over: score %d, length %d", after.score, len(after.snake))
        return after
