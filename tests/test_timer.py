"""
Tests for the Timer tick accumulator.
"""

import os
import sys

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.timer import Timer


class TestTimer:
    """Tests for the Timer class."""

    def test_new_timer_starts_at_zero(self):
        timer = Timer(0.5)
        assert timer.counter == 0.0
        assert timer.duration == 0.5

    def test_does_not_fire_before_duration(self):
        timer = Timer(0.5)
        assert timer.update(0.2) is False
        assert timer.update(0.2) is False

    def test_fires_once_duration_reached(self):
        timer = Timer(0.5)
        timer.update(0.25)
        assert timer.update(0.25) is True

    def test_zero_duration_always_fires(self):
        timer = Timer(0.0)
        assert timer.update(0.0) is True
        assert timer.update(0.001) is True

    def test_keeps_firing_until_reset(self):
        """The timer does not auto-reset after firing."""
        timer = Timer(0.1)
        assert timer.update(0.2) is True
        assert timer.update(0.0) is True
        timer.reset()
        assert timer.update(0.05) is False

    def test_reset_drops_overshoot(self):
        """Remainder past the interval is not carried into the next tick."""
        timer = Timer(0.1)
        timer.update(0.19)
        timer.reset()
        assert timer.counter == 0.0
        assert timer.update(0.09) is False

    def test_set_replaces_interval_and_zeroes_counter(self):
        timer = Timer(1.0)
        timer.update(0.7)
        timer.set(0.2)
        assert timer.duration == 0.2
        assert timer.counter == 0.0
        assert timer.update(0.1) is False
        assert timer.update(0.1) is True

    def test_reset_keeps_interval(self):
        timer = Timer(0.3)
        timer.update(0.4)
        timer.reset()
        assert timer.duration == 0.3
