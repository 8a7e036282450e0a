"""
Timer entity - turns accumulated frame time into discrete tick events.
"""


class Timer:
    """
    Fixed-interval countdown accumulator.

    The timer never resets itself: once `update` returns True it keeps
    returning True until the caller consumes the event with `reset()`.
    Overshoot is dropped on reset rather than carried into the next tick.

    Attributes:
        duration: seconds between ticks (0 fires on every update)
        counter: seconds accumulated since the last reset
    """

    def __init__(self, duration: float):
        self.duration = duration
        self.counter = 0.0

    def set(self, duration: float) -> None:
        """Replace the interval and start counting from zero."""
        self.duration = duration
        self.counter = 0.0

    def reset(self) -> None:
        self.counter = 0.0

    def update(self, delta_time: float) -> bool:
        """Accumulate `delta_time` and report whether the interval elapsed."""
        self.counter += delta_time
        return self.counter >= self.duration

    def __repr__(self):
        return f"<Timer {self.counter:.3f}/{self.duration:.3f}>"
