"""
Tests for the Get Ready grid fade-in.
"""

import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import GRID_ALPHA, GRID_FADE_SPEED, GRID_FRAME_INTERVAL
from domain.grid_fade import GridFade


class TestGridFade:
    """Tests for GridFade."""

    def test_lines_start_staggered(self):
        fade = GridFade(4, 3)
        assert len(fade.line_alphas) == 7
        assert fade.row_alphas == pytest.approx([0.0, -0.05, -0.10])
        assert fade.column_alphas == pytest.approx([0.0, -0.05, -0.10, -0.15])

    def test_step_raises_every_line(self):
        fade = GridFade(4, 3)
        assert fade.update(GRID_FRAME_INTERVAL) is True
        assert fade.row_alphas[0] == pytest.approx(GRID_FADE_SPEED)
        assert fade.column_alphas[3] == pytest.approx(-0.15 + GRID_FADE_SPEED)

    def test_no_step_before_frame_interval(self):
        fade = GridFade(4, 3)
        fade.update(GRID_FRAME_INTERVAL / 4)
        assert fade.row_alphas[0] == 0.0

    def test_finishes_at_full_alpha(self):
        fade = GridFade(4, 3)
        steps = 0
        while fade.update(GRID_FRAME_INTERVAL):
            steps += 1
            assert steps < 1000

        assert fade.finished is True
        assert all(alpha == GRID_ALPHA for alpha in fade.line_alphas)

    def test_reset_restarts_animation(self):
        fade = GridFade(4, 3)
        for _ in range(10):
            fade.update(GRID_FRAME_INTERVAL)
        fade.reset()
        assert fade.row_alphas[0] == 0.0
        assert fade.finished is False
