"""Tests for the tick Scheduler."""

from unittest.mock import Mock, call

import pytest

from snake_game.scheduler import TICK_EVENT, Scheduler, period_for


class TestPeriod:
    """Tests for period_for."""

    @pytest.mark.parametrize("score,expected", [
        (0, 150), (40, 150), (50, 140), (90, 140), (100, 130),
        (350, 80), (400, 70), (450, 70), (5000, 70),
    ])
    def test_steps_and_floor(self, score, expected):
        """Faster by 10 ms every 50 points, never below 70 ms."""
        assert period_for(score) == expected


class TestScheduler:
    """Tests for the Scheduler class."""

    def test_start_arms_timer(self):
        """start sets the pygame timer to the score's period."""
        set_timer = Mock()
        scheduler = Scheduler(set_timer=set_timer)
        assert scheduler.start(0) == 150
        set_timer.assert_called_once_with(TICK_EVENT, 150)
        assert scheduler.running

    def test_reschedule_only_on_score_change(self):
        """reschedule restarts the timer only when the score moved."""
        set_timer = Mock()
        scheduler = Scheduler(set_timer=set_timer)
        scheduler.start(40)
        assert scheduler.reschedule(40) is False
        assert scheduler.reschedule(50) is True
        assert set_timer.call_args_list == [call(TICK_EVENT, 150), call(TICK_EVENT, 140)]
        assert scheduler.period == 140

    def test_reschedule_when_stopped_does_nothing(self):
        """A stopped scheduler is not re-armed by a score change."""
        set_timer = Mock()
        scheduler = Scheduler(set_timer=set_timer)
        assert scheduler.reschedule(10) is False
        set_timer.assert_not_called()

    def test_stop_cancels_timer(self):
        """stop sets the timer to 0 and is idempotent."""
        set_timer = Mock()
        scheduler = Scheduler(set_timer=set_timer)
        scheduler.start(0)
        scheduler.stop()
        scheduler.stop()
        assert set_timer.call_args_list == [call(TICK_EVENT, 150), call(TICK_EVENT, 0)]
        assert not scheduler.running
        assert scheduler.period is None
