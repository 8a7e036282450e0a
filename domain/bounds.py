"""
Bounds entity - the inclusive rectangle of cells a snake may occupy.
"""

from typing import Iterator, Tuple


class Bounds:
    """
    Inclusive cell rectangle.

    Attributes:
        left, top: first playable column / row
        right, bottom: last playable column / row (inclusive)
    """

    def __init__(self, left: int, top: int, right: int, bottom: int):
        if right < left or bottom < top:
            raise ValueError(f"Empty bounds: ({left}, {top})-({right}, {bottom})")
        self.left = left
        self.top = top
        self.right = right
        self.bottom = bottom

    @classmethod
    def inside_walls(cls, width: int, height: int) -> "Bounds":
        """Play area of a `width` x `height` board ringed by a one-cell wall."""
        return cls(1, 1, width - 2, height - 2)

    @property
    def width(self) -> int:
        return self.right - self.left + 1

    @property
    def height(self) -> int:
        return self.bottom - self.top + 1

    def contains(self, cell: Tuple[int, int]) -> bool:
        x, y = cell
        return self.left <= x <= self.right and self.top <= y <= self.bottom

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Yield every cell row by row."""
        for y in range(self.top, self.bottom + 1):
            for x in range(self.left, self.right + 1):
                yield (x, y)

    def __eq__(self, other):
        if not isinstance(other, Bounds):
            return NotImplemented
        return (self.left, self.top, self.right, self.bottom) == (
            other.left, other.top, other.right, other.bottom
        )

    def __repr__(self):
        return f"<Bounds ({self.left}, {self.top})-({self.right}, {self.bottom})>"
