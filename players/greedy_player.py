"""
Greedy player implementation - heads for the nearest apple.
"""

from typing import Optional, Tuple

from domain.game_state import GameState
from .base import Player


def manhattan(a: Tuple[int, int], b: Tuple[int, int]) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


class GreedyPlayer(Player):
    """
    Picks the safe move that brings the head closest to an apple.

    Ties go to the current heading so the snake does not zig-zag. With no
    apple on the board it just keeps moving safely.
    """

    def get_direction(self, game_state: GameState) -> Optional[str]:
        valid_moves = self.safe_moves(game_state)
        if not valid_moves:
            return None

        heading = game_state.directions.get(self.snake_id)

        if not game_state.apples:
            if heading in valid_moves:
                return heading
            return sorted(valid_moves)[0]

        def score(move: str):
            cell = valid_moves[move]
            distance = min(manhattan(cell, apple) for apple in game_state.apples)
            return (distance, move != heading, move)

        return min(valid_moves, key=score)
