"""
Tick timer.

The period shortens by SPEED_STEP_MS every SPEEDUP_EVERY points and never
drops below MIN_SPEED_MS. The timer posts TICK_EVENT to the pygame event
queue; a late tick is just late, never doubled up.
"""
import logging
from typing import Callable, Optional

import pygame

from .config import BASE_SPEED_MS, MIN_SPEED_MS, SPEED_STEP_MS, SPEEDUP_EVERY

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1


def period_for(score: int) -> int:
    """Tick period in milliseconds for a given score."""
    return max(MIN_SPEED_MS, BASE_SPEED_MS - (score // SPEEDUP_EVERY) * SPEED_STEP_MS)


class Scheduler:
    def __init__(self, event_type: int = TICK_EVENT,
                 set_timer: Optional[Callable[[int, int], None]] = None):
        self.event_type = event_type
        self._set_timer = set_timer or pygame.time.set_timer
        self.period: Optional[int] = None
        self._score: Optional[int] = None

    @property
    def running(self) -> bool:
        return self.period is not None

    def start(self, score: int = 0) -> int:
        """(Re)arm the timer for 'score' and return the period used."""
        self.period = period_for(score)
        self._score = score
        self._set_timer(self.event_type, self.period)
        logger.debug("tick timer armed at %d ms (score %d)", self.period, score)
        return self.period

    def reschedule(self, score: int) -> bool:
        """Restart the timer if the score changed since it was armed."""
        if not self.running or score == self._score:
            return False
        self.start(score)
        return True

    def stop(self):
        if not self.running:
            return
        self._set_timer(self.event_type, 0)
        self.period = None
        self._score = None
        logger.debug("tick timer stopped")
