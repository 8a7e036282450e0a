"""
Tests for the inclusive Bounds rectangle.
"""

import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.bounds import Bounds


class TestBounds:
    """Tests for Bounds."""

    def test_inside_walls(self):
        bounds = Bounds.inside_walls(25, 16)
        assert bounds == Bounds(1, 1, 23, 14)
        assert bounds.width == 23
        assert bounds.height == 14

    def test_contains_is_inclusive(self):
        bounds = Bounds(1, 1, 5, 5)
        assert bounds.contains((1, 1))
        assert bounds.contains((5, 5))
        assert not bounds.contains((0, 3))
        assert not bounds.contains((6, 3))
        assert not bounds.contains((3, 6))

    def test_cells_enumerates_every_cell(self):
        cells = list(Bounds(2, 3, 4, 4).cells())
        assert cells == [(2, 3), (3, 3), (4, 3), (2, 4), (3, 4), (4, 4)]

    def test_empty_bounds_raise(self):
        with pytest.raises(ValueError):
            Bounds(5, 5, 4, 5)
