"""
Base player interface for the game engine.
"""

import random
from typing import Dict, Optional, Tuple

from domain.bounds import Bounds
from domain.constants import DIRECTION_VECTORS, OPPOSITE_DIRECTIONS
from domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    Each player is polled every frame while the level is playing and may
    return a direction for its snake_id. Only the last request before the
    snake's next tick takes effect.
    """

    def __init__(self, snake_id: str, rng: Optional[random.Random] = None):
        self.snake_id = snake_id
        self.rng = rng or random.Random()

    def get_direction(self, game_state: GameState) -> Optional[str]:
        """
        Return a direction given the current game state, or None to keep going.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT", or None
        """
        raise NotImplementedError

    def candidate_moves(self, game_state: GameState) -> Dict[str, Tuple[int, int]]:
        """Map every direction except a U-turn to the cell it leads to."""
        positions = game_state.snake_positions.get(self.snake_id) or []
        if not positions:
            return {}

        head_x, head_y = positions[0]
        heading = game_state.directions.get(self.snake_id)
        return {
            move: (head_x + dx, head_y + dy)
            for move, (dx, dy) in DIRECTION_VECTORS.items()
            if heading is None or move != OPPOSITE_DIRECTIONS[heading]
        }

    def safe_moves(self, game_state: GameState) -> Dict[str, Tuple[int, int]]:
        """Candidate moves that stay inside the walls and off every body."""
        bound = Bounds.inside_walls(game_state.width, game_state.height)
        occupied = game_state.occupied_cells()
        return {
            move: cell
            for move, cell in self.candidate_moves(game_state).items()
            if bound.contains(cell) and cell not in occupied
        }
