"""
Domain entities for the Snake arcade engine.

This module contains the simulation core: timers, snakes, apples and the
level state machine. Nothing here draws, plays audio or touches files.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    GET_READY, PLAYING, STUNNED, DYING, GAME_OVER,
)
from .timer import Timer
from .bounds import Bounds
from .snake import Snake, SnakePart
from .apple import Apple, spawn_random
from .grid_fade import GridFade
from .config import GameConfig
from .game_state import GameState
from .snake_game import SnakeGame

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'GET_READY', 'PLAYING', 'STUNNED', 'DYING', 'GAME_OVER',
    'Timer',
    'Bounds',
    'Snake', 'SnakePart',
    'Apple', 'spawn_random',
    'GridFade',
    'GameConfig',
    'GameState',
    'SnakeGame',
]
