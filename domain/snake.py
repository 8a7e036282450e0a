"""
Snake entity for the game engine.
"""

import logging
from collections import deque
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple

from .bounds import Bounds
from .constants import (
    RIGHT, VALID_MOVES, DIRECTION_VECTORS, OPPOSITE_DIRECTIONS,
    INITIAL_LENGTH, INITIAL_SPEED, MAX_SPEED, SPEED_INCREMENT,
    DYING_DURATION_SHORT, DYING_DURATION_LONG, SHORT_BODY_THRESHOLD,
    DEATH_WALL, DEATH_SELF, DEATH_OPPONENT,
)
from .timer import Timer

logger = logging.getLogger(__name__)


class SnakePart(NamedTuple):
    """One body segment and the heading it was placed with."""
    pos: Tuple[int, int]
    direction: str


class Snake:
    """
    Represents a snake on the board.

    Attributes:
        parts: deque of SnakePart from head at index 0 to tail at the end
        new_direction: buffered heading applied on the next tick
        removed_part: tail popped by the last advance, restored when eating
        speed: ticks per second
        timer: move timer while alive, shrink timer while dying
        alive: whether this snake is still alive
        death_reason: e.g., 'wall', 'self', 'opponent', 'head_collision'
        bound: inclusive play area
    """

    def __init__(
        self,
        positions: Sequence[Tuple[int, int]],
        bound: Bounds,
        direction: str = RIGHT,
        initial_speed: float = INITIAL_SPEED,
        max_speed: float = MAX_SPEED,
        speed_increment: float = SPEED_INCREMENT
    ):
        self.bound = bound
        self.initial_speed = initial_speed
        self.max_speed = max_speed
        self.speed_increment = speed_increment
        self._restart(positions, direction)

    @classmethod
    def spawn(cls, x: int, y: int, bound: Bounds, **kwargs) -> "Snake":
        """Create a fresh snake with its head at (x, y), body trailing left."""
        return cls(cls._line_positions(x, y), bound, **kwargs)

    @staticmethod
    def _line_positions(x: int, y: int) -> List[Tuple[int, int]]:
        return [(x - i, y) for i in range(INITIAL_LENGTH)]

    def _restart(self, positions: Sequence[Tuple[int, int]], direction: str) -> None:
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction: {direction}")
        self.parts = deque(SnakePart(tuple(pos), direction) for pos in positions)
        self.new_direction = direction
        self.removed_part: Optional[SnakePart] = None
        self.speed = self.initial_speed
        self.timer = Timer(1.0 / self.speed)
        self.alive = True
        self.death_reason: Optional[str] = None

    def reset(self, x: int, y: int) -> None:
        """Put the snake back to its starting shape, heading right."""
        self._restart(self._line_positions(x, y), RIGHT)

    @property
    def head(self) -> Optional[Tuple[int, int]]:
        """Return the head position (first element), None once fully shrunk."""
        return self.parts[0].pos if self.parts else None

    @property
    def direction(self) -> str:
        """Heading of the head segment."""
        return self.parts[0].direction if self.parts else self.new_direction

    @property
    def positions(self) -> List[Tuple[int, int]]:
        return [part.pos for part in self.parts]

    @property
    def length(self) -> int:
        return len(self.parts)

    @property
    def dying(self) -> bool:
        return not self.alive and len(self.parts) > 0

    @property
    def dead(self) -> bool:
        return not self.alive and not self.parts

    def set_direction(self, direction: str) -> bool:
        """
        Buffer the heading for the next tick.

        Returns False and leaves the buffer alone when `direction` is the
        current heading or its opposite.
        """
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction: {direction}")

        current = self.direction
        if direction == current or direction == OPPOSITE_DIRECTIONS[current]:
            return False

        self.new_direction = direction
        return True

    def compute_next_head_position(self) -> Tuple[int, int]:
        hx, hy = self.head
        dx, dy = DIRECTION_VECTORS[self.new_direction]
        return (hx + dx, hy + dy)

    def is_position_overlapped(self, pos: Tuple[int, int]) -> bool:
        return any(part.pos == pos for part in self.parts)

    def collision_reason(
        self,
        bound: Optional[Bounds] = None,
        opponents: Iterable["Snake"] = ()
    ) -> Optional[str]:
        """
        Classify what the next head position would run into.

        The tail counts as occupied even though it would move away this
        tick. Returns None when the move is clear.
        """
        bound = bound or self.bound
        pos = self.compute_next_head_position()

        if not bound.contains(pos):
            return DEATH_WALL

        if self.is_position_overlapped(pos):
            return DEATH_SELF

        for other in opponents:
            if other is not self and other.is_position_overlapped(pos):
                return DEATH_OPPONENT

        return None

    def check_collision(
        self,
        bound: Optional[Bounds] = None,
        opponents: Iterable["Snake"] = ()
    ) -> bool:
        return self.collision_reason(bound, opponents) is not None

    def kill(self, reason: Optional[str] = None) -> None:
        """Stop moving and arm the shrink-out timer."""
        self.alive = False
        self.death_reason = reason

        length = len(self.parts)
        if length == 0:
            self.timer.set(0.0)
            return

        duration = DYING_DURATION_SHORT if length <= SHORT_BODY_THRESHOLD else DYING_DURATION_LONG
        self.timer.set(duration / length)

        logger.info(
            f"Snake died ({reason or 'killed'}) heading to "
            f"{self.compute_next_head_position()} with length {length}"
        )

    def is_due(self, delta_time: float) -> bool:
        """Consume a move tick if the timer fired during this frame."""
        if self.alive and self.timer.update(delta_time):
            self.timer.reset()
            return True
        return False

    def advance(self) -> None:
        new_head = SnakePart(self.compute_next_head_position(), self.new_direction)
        self.parts.appendleft(new_head)
        self.removed_part = self.parts.pop()

    def _restore_removed_part(self) -> None:
        if self.removed_part is not None:
            self.parts.append(self.removed_part)
            self.removed_part = None

    def eat_if_overlapping(self, apples: list) -> bool:
        """
        Eat the apple under the head, if any.

        The eaten apple is removed from `apples`, last tick's tail is put
        back so the body grows by one, and the move timer is re-armed at
        the new speed.
        """
        head = self.head
        for i, apple in enumerate(apples):
            if apple.pos != head:
                continue

            del apples[i]
            self._restore_removed_part()
            self.speed = min(self.speed + self.speed_increment, self.max_speed)
            self.timer.set(1.0 / self.speed)
            logger.debug(f"Ate apple at {head}, speed now {self.speed:.2f}")
            return True

        return False

    def tick_dying(self, delta_time: float) -> bool:
        """Shrink one segment per dying tick; False once nothing is left."""
        if self.timer.update(delta_time) and self.parts:
            self.parts.pop()
            self.timer.reset()

        return len(self.parts) != 0

    def __repr__(self):
        state = "alive" if self.alive else ("dying" if self.parts else "dead")
        return f"<Snake head={self.head} length={self.length} {state} speed={self.speed:.2f}>"
