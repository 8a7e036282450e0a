"""
Player implementations for the Snake arcade engine.

This module contains the player abstractions and autopilot implementations
that steer snakes by supplying direction commands.
"""

from .base import Player
from .random_player import RandomPlayer
from .greedy_player import GreedyPlayer
from .variant_registry import get_player_class, list_variants, AVAILABLE_VARIANTS

__all__ = [
    'Player',
    'RandomPlayer',
    'GreedyPlayer',
    'get_player_class',
    'list_variants',
    'AVAILABLE_VARIANTS',
]
