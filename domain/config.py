"""
Game configuration passed to the engine at startup.
"""

import os
from dataclasses import dataclass

from .bounds import Bounds
from .constants import (
    INITIAL_LENGTH, INITIAL_SPEED, MAX_SPEED, SPEED_INCREMENT,
    SPAWN_INTERVAL, MAX_APPLES, STUN_INTERVAL,
)


@dataclass
class GameConfig:
    """Board dimensions and tuning for one game."""

    width: int = 25
    height: int = 16
    grid_size: int = 32
    player_count: int = 2
    initial_speed: float = INITIAL_SPEED
    max_speed: float = MAX_SPEED
    speed_increment: float = SPEED_INCREMENT
    spawn_interval: float = SPAWN_INTERVAL
    max_apples: int = MAX_APPLES
    stun_interval: float = STUN_INTERVAL

    @classmethod
    def from_env(cls) -> "GameConfig":
        """
        Build a config from SNAKE_* environment variables.

        Call `load_dotenv()` first to pick up a local .env file.
        """
        defaults = cls()
        return cls(
            width=int(os.getenv('SNAKE_WIDTH', defaults.width)),
            height=int(os.getenv('SNAKE_HEIGHT', defaults.height)),
            grid_size=int(os.getenv('SNAKE_GRID_SIZE', defaults.grid_size)),
            player_count=int(os.getenv('SNAKE_PLAYER_COUNT', defaults.player_count)),
            initial_speed=float(os.getenv('SNAKE_INITIAL_SPEED', defaults.initial_speed)),
            max_speed=float(os.getenv('SNAKE_MAX_SPEED', defaults.max_speed)),
            speed_increment=float(os.getenv('SNAKE_SPEED_INCREMENT', defaults.speed_increment)),
            spawn_interval=float(os.getenv('SNAKE_SPAWN_INTERVAL', defaults.spawn_interval)),
            max_apples=int(os.getenv('SNAKE_MAX_APPLES', defaults.max_apples)),
            stun_interval=float(os.getenv('SNAKE_STUN_INTERVAL', defaults.stun_interval)),
        )

    @property
    def play_area(self) -> Bounds:
        return Bounds.inside_walls(self.width, self.height)

    def validate(self) -> None:
        """Raise ValueError if the board cannot hold the configured snakes."""
        if self.player_count < 1:
            raise ValueError("At least one player is required.")
        # wall ring plus the starting body on each side of the centre column
        if self.width < 2 * INITIAL_LENGTH + 2:
            raise ValueError(f"Board width {self.width} is too small.")
        if self.height < self.player_count + 3:
            raise ValueError(
                f"Board height {self.height} is too small for {self.player_count} players."
            )
        if self.initial_speed <= 0 or self.max_speed < self.initial_speed:
            raise ValueError(
                f"Invalid speed range {self.initial_speed}..{self.max_speed}."
            )
        if self.max_apples < 0:
            raise ValueError("max_apples cannot be negative.")
