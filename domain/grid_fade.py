"""
Grid fade-in played while the level is getting ready.
"""

from typing import List

from .constants import GRID_FRAME_INTERVAL, GRID_FADE_SPEED, GRID_ALPHA, GRID_ALPHA_STAGGER
from .timer import Timer


class GridFade:
    """
    Staggered fade-in of the board's grid lines.

    Every row line and then every column line starts a little more
    transparent than the previous one (alphas may start below zero), so
    the grid sweeps in from the top-left corner. All lines rise at the
    same rate on a fixed 60 Hz step until they reach `GRID_ALPHA`.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.timer = Timer(GRID_FRAME_INTERVAL)
        self.line_alphas: List[float] = []
        self.reset()

    def reset(self) -> None:
        rows = [-GRID_ALPHA_STAGGER * y for y in range(self.height)]
        cols = [-GRID_ALPHA_STAGGER * x for x in range(self.width)]
        self.line_alphas = rows + cols
        self.timer.reset()

    @property
    def row_alphas(self) -> List[float]:
        return self.line_alphas[:self.height]

    @property
    def column_alphas(self) -> List[float]:
        return self.line_alphas[self.height:]

    @property
    def finished(self) -> bool:
        return all(alpha >= GRID_ALPHA for alpha in self.line_alphas)

    def update(self, delta_time: float) -> bool:
        """Advance the animation; True while it is still running."""
        if self.timer.update(delta_time):
            self.line_alphas = [
                min(alpha + GRID_FADE_SPEED, GRID_ALPHA) for alpha in self.line_alphas
            ]
            self.timer.reset()

        return not self.finished
