"""
SnakeGame - the level state machine that drives snakes, apples and timers.
"""

import logging
import random
import uuid
from dataclasses import replace
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .apple import Apple, spawn_random
from .config import GameConfig
from .constants import (
    GET_READY, PLAYING, STUNNED, DYING, GAME_OVER,
    CUE_GET_READY, CUE_MOVE, CUE_EAT, CUE_DEAD,
    DEATH_HEAD_COLLISION,
)
from .game_state import GameState
from .grid_fade import GridFade
from .snake import Snake
from .timer import Timer

logger = logging.getLogger(__name__)


class SnakeGame:
    """
    Manages:
      - Board (width, height) and its inclusive play area
      - Snakes and the players steering them
      - Apples and the spawn timer
      - Level substates: GET_READY -> PLAYING -> STUNNED -> DYING -> GAME_OVER

    Call `update(delta_time)` once per frame.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        players: Optional[Sequence] = None,
        play_sound: Optional[Callable[[str], None]] = None,
        rng: Optional[random.Random] = None,
        game_id: Optional[str] = None
    ):
        config = config or GameConfig()

        self.players: Dict[str, object] = {}
        for player in players or []:
            if player.snake_id in self.players:
                raise ValueError(f"Snake with id {player.snake_id} already exists.")
            self.players[player.snake_id] = player

        # One snake per player when players are given
        if self.players:
            config = replace(config, player_count=len(self.players))
        config.validate()
        self.config = config

        self.game_id = game_id or str(uuid.uuid4())
        self.width = self.config.width
        self.height = self.config.height
        self.bound = self.config.play_area
        self.rng = rng or random.Random()
        self.play_sound = play_sound or (lambda cue: None)

        snake_ids = list(self.players) or [str(i) for i in range(config.player_count)]

        self.snakes: Dict[str, Snake] = {}
        for index, snake_id in enumerate(snake_ids):
            x, y = self.start_position(index, len(snake_ids))
            self.snakes[snake_id] = Snake.spawn(
                x, y, self.bound,
                initial_speed=self.config.initial_speed,
                max_speed=self.config.max_speed,
                speed_increment=self.config.speed_increment
            )

        self.apples: List[Apple] = []
        self.spawn_timer = Timer(self.config.spawn_interval)
        self.delay_timer = Timer(self.config.stun_interval)
        self.grid = GridFade(self.width, self.height)
        self.substate = GET_READY
        self.frame_number = 0

    def start_position(self, index: int, count: int) -> Tuple[int, int]:
        """Head cell of snake `index`; snakes are stacked on separate rows."""
        return (self.width // 2, (index + 1) * self.height // (count + 1))

    @property
    def game_over(self) -> bool:
        return self.substate == GAME_OVER

    def start(self) -> None:
        self.play_sound(CUE_GET_READY)

    def reset(self) -> None:
        """Restart the level from GET_READY."""
        self.grid.reset()

        count = len(self.snakes)
        for index, snake in enumerate(self.snakes.values()):
            snake.reset(*self.start_position(index, count))

        self.apples.clear()
        self.spawn_timer.reset()
        self.delay_timer.reset()
        self.frame_number = 0
        self._set_substate(GET_READY)
        self.play_sound(CUE_GET_READY)

    def _set_substate(self, substate: str) -> None:
        if substate != self.substate:
            logger.info(f"Game {self.game_id}: {self.substate} -> {substate}")
        self.substate = substate

    def set_apples(self, apple_positions: List[Tuple[int, int]]) -> None:
        """Replace the apples on the board with apples at the given cells."""
        for pos in apple_positions:
            if not self.bound.contains(pos):
                raise ValueError(f"Apple out of bounds at {pos}.")
        self.apples = [Apple(pos) for pos in apple_positions]

    def _is_occupied(self, cell: Tuple[int, int]) -> bool:
        if any(snake.is_position_overlapped(cell) for snake in self.snakes.values()):
            return True
        return any(apple.pos == cell for apple in self.apples)

    def handle_input(self, commands: Dict[str, str]) -> bool:
        """
        Buffer a direction per snake id. Only honoured while PLAYING.

        Plays the move cue once if any request was accepted.
        """
        if self.substate != PLAYING:
            return False

        changed = False
        for snake_id, direction in commands.items():
            snake = self.snakes[snake_id]
            if snake.alive and snake.set_direction(direction):
                changed = True

        if changed:
            self.play_sound(CUE_MOVE)
        return changed

    def _poll_players(self) -> None:
        if not self.players:
            return

        state = self.get_current_state()
        commands = {}
        for snake_id, player in self.players.items():
            if not self.snakes[snake_id].alive:
                continue
            direction = player.get_direction(state)
            if direction is not None:
                commands[snake_id] = direction

        self.handle_input(commands)

    def update(self, delta_time: float) -> bool:
        """
        Advance the level by one frame.

        Returns True when the board changed (a snake moved or shrank, an
        apple appeared or was eaten, or the substate switched).
        """
        self.frame_number += 1
        substate = self.substate
        changed = False

        if substate == GET_READY:
            if not self.grid.update(delta_time):
                self._set_substate(PLAYING)
        elif substate == PLAYING:
            self._poll_players()
            changed = self.update_actors(delta_time)
        elif substate == STUNNED:
            if self.delay_timer.update(delta_time):
                self.delay_timer.reset()
                self._set_substate(DYING)
        elif substate == DYING:
            changed = self._update_dying(delta_time)

        return changed or substate != self.substate

    def update_actors(self, delta_time: float) -> bool:
        changed = False

        if self.spawn_timer.update(delta_time) and len(self.apples) < self.config.max_apples:
            cell = spawn_random(self.bound, self._is_occupied, self.rng)
            if cell is not None:
                self.apples.append(Apple(cell))
                logger.debug(f"Spawned apple at {cell}")
                changed = True
            self.spawn_timer.reset()

        for apple in self.apples:
            apple.update()

        due = [sid for sid, snake in self.snakes.items() if snake.is_due(delta_time)]
        if not due:
            return changed

        # Every snake due this frame is judged against the board before
        # anyone moves, so head-to-head crashes kill both.
        next_heads = {sid: self.snakes[sid].compute_next_head_position() for sid in due}
        reasons: Dict[str, Optional[str]] = {}
        for sid in due:
            opponents = [snake for other, snake in self.snakes.items() if other != sid]
            reason = self.snakes[sid].collision_reason(self.bound, opponents)
            if reason is None and any(
                other != sid and next_heads[other] == next_heads[sid] for other in due
            ):
                reason = DEATH_HEAD_COLLISION
            reasons[sid] = reason

        died = [sid for sid in due if reasons[sid] is not None]
        for sid in died:
            self.snakes[sid].kill(reasons[sid])

        for sid in due:
            if sid in died:
                continue
            snake = self.snakes[sid]
            snake.advance()
            if snake.eat_if_overlapping(self.apples):
                self.play_sound(CUE_EAT)

        if died:
            self.play_sound(CUE_DEAD)
            self._set_substate(STUNNED)

        return True

    def _update_dying(self, delta_time: float) -> bool:
        changed = False
        finished = False

        for snake in self.snakes.values():
            if snake.alive:
                continue
            before = snake.length
            if not snake.tick_dying(delta_time):
                finished = True
            changed = changed or snake.length != before

        if finished:
            self._set_substate(GAME_OVER)
            logger.info(f"Game {self.game_id} over. Lengths: {self.lengths}")

        return changed

    @property
    def lengths(self) -> Dict[str, int]:
        return {sid: snake.length for sid, snake in self.snakes.items()}

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            frame_number=self.frame_number,
            substate=self.substate,
            snake_positions={sid: snake.positions for sid, snake in self.snakes.items()},
            directions={sid: snake.direction for sid, snake in self.snakes.items()},
            alive={sid: snake.alive for sid, snake in self.snakes.items()},
            speeds={sid: snake.speed for sid, snake in self.snakes.items()},
            width=self.width,
            height=self.height,
            apples=[apple.pos for apple in self.apples],
            apple_alphas=[apple.alpha for apple in self.apples],
            grid_alphas=list(self.grid.line_alphas),
            death_reasons={
                sid: snake.death_reason
                for sid, snake in self.snakes.items()
                if not snake.alive
            }
        )

    def print_board(self):
        """
        Prints a visual representation of the current board state.
        """
        print("\n" + self.get_current_state().print_board() + "\n")
