"""
Sound cue sink for the game engine.

The engine only names the event ("get_ready", "move", "eat", "dead");
whatever plays audio is plugged in as a callable. SoundCueLog is the
headless implementation: it logs each cue and keeps a tally.
"""

import logging
from collections import Counter
from typing import List

logger = logging.getLogger(__name__)


class SoundCueLog:
    """Callable cue sink that records every cue it receives."""

    def __init__(self):
        self.cues: List[str] = []

    def __call__(self, cue: str) -> None:
        self.cues.append(cue)
        logger.debug(f"Sound cue: {cue}")

    def counts(self) -> Counter:
        return Counter(self.cues)

    def clear(self) -> None:
        self.cues.clear()
