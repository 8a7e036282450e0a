"""
Apple entity and random placement on free cells.
"""

import logging
import random
from typing import Callable, Optional, Tuple

from .bounds import Bounds
from .constants import APPLE_START_ALPHA, APPLE_FADE_STEP, MAX_SPAWN_ATTEMPTS

logger = logging.getLogger(__name__)


class Apple:
    """
    A single apple on the board.

    Attributes:
        pos: (x, y) cell
        alpha: fade-in opacity in [0, 1], cosmetic only
    """

    def __init__(self, pos: Tuple[int, int], alpha: float = APPLE_START_ALPHA):
        self.pos = tuple(pos)
        self.alpha = alpha

    def update(self) -> None:
        self.alpha = min(self.alpha + APPLE_FADE_STEP, 1.0)

    def __repr__(self):
        return f"<Apple pos={self.pos} alpha={self.alpha:.2f}>"


def spawn_random(
    bounds: Bounds,
    is_occupied: Callable[[Tuple[int, int]], bool],
    rng: random.Random = None,
    max_attempts: int = MAX_SPAWN_ATTEMPTS
) -> Optional[Tuple[int, int]]:
    """
    Pick a random cell inside `bounds` for which `is_occupied` is False.

    Samples uniformly for up to `max_attempts` tries, then falls back to
    choosing among the enumerated free cells so a crowded board cannot
    hang the loop. Returns None when every cell is taken.
    """
    rng = rng or random

    for _ in range(max_attempts):
        cell = (
            rng.randint(bounds.left, bounds.right),
            rng.randint(bounds.top, bounds.bottom)
        )
        if not is_occupied(cell):
            return cell

    free_cells = [cell for cell in bounds.cells() if not is_occupied(cell)]
    if not free_cells:
        logger.debug("No free cell left for an apple")
        return None

    return rng.choice(free_cells)
