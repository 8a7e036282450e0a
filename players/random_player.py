"""
Random player implementation - picks random safe moves.
"""

import random
from typing import Optional

from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction avoiding walls and snake bodies.

    It keeps its heading while that is safe, turning with probability
    `turn_chance` per poll so the snake wanders instead of jittering.
    """

    def __init__(self, snake_id: str, turn_chance: float = 0.05, rng: Optional[random.Random] = None):
        super().__init__(snake_id, rng)
        self.turn_chance = turn_chance

    def get_direction(self, game_state: GameState) -> Optional[str]:
        valid_moves = self.safe_moves(game_state)

        # If no valid moves, keep going (we'll die anyway)
        if not valid_moves:
            return None

        heading = game_state.directions.get(self.snake_id)
        if heading in valid_moves and self.rng.random() >= self.turn_chance:
            return heading

        return self.rng.choice(sorted(valid_moves))
