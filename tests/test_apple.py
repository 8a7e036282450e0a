"""
Tests for apples and random free-cell placement.
"""

import os
import random
import sys

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.apple import Apple, spawn_random
from domain.bounds import Bounds
from domain.constants import APPLE_START_ALPHA, APPLE_FADE_STEP


class TestApple:
    """Tests for the Apple fade-in."""

    def test_apple_starts_faint(self):
        apple = Apple((3, 3))
        assert apple.pos == (3, 3)
        assert apple.alpha == APPLE_START_ALPHA

    def test_update_raises_alpha(self):
        apple = Apple((3, 3))
        apple.update()
        assert apple.alpha == APPLE_START_ALPHA + APPLE_FADE_STEP

    def test_alpha_is_clamped_at_one(self):
        apple = Apple((3, 3), alpha=0.995)
        apple.update()
        assert apple.alpha == 1.0
        apple.update()
        assert apple.alpha == 1.0


class TestSpawnRandom:
    """Tests for spawn_random()."""

    def test_cell_is_inside_bounds(self):
        bounds = Bounds(1, 1, 8, 8)
        rng = random.Random(1)
        for _ in range(50):
            assert bounds.contains(spawn_random(bounds, lambda cell: False, rng))

    def test_cell_is_never_occupied(self):
        bounds = Bounds(1, 1, 5, 5)
        taken = {(x, y) for x in range(1, 6) for y in range(1, 5)}
        rng = random.Random(2)
        for _ in range(20):
            cell = spawn_random(bounds, lambda c: c in taken, rng)
            assert cell not in taken
            assert cell[1] == 5

    def test_falls_back_to_enumerating_free_cells(self):
        """A single free cell is still found after the sampling budget runs out."""
        bounds = Bounds(1, 1, 10, 10)
        free = (7, 3)
        cell = spawn_random(bounds, lambda c: c != free, random.Random(3), max_attempts=0)
        assert cell == free

    def test_full_board_returns_none(self):
        bounds = Bounds(1, 1, 3, 3)
        assert spawn_random(bounds, lambda c: True, random.Random(4)) is None

    def test_occupancy_predicate_sees_candidates(self):
        seen = []

        def is_occupied(cell):
            seen.append(cell)
            return len(seen) < 3

        cell = spawn_random(Bounds(1, 1, 9, 9), is_occupied, random.Random(5))
        assert cell == seen[-1]
        assert len(seen) == 3
