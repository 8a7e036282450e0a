"""
Video Generation Service for Snake game replays

This service is the engine's draw surface. It:
1. Renders GameState snapshots to frames using PIL (Pillow)
2. Encodes frames to video using MoviePy/FFmpeg
3. Saves the video next to the replays in completed_games

The rendering follows the arcade look:
- Brown board with a wall ring and a grid that fades in during Get Ready
- Apples fading in as red dots
- Snakes with a darker head per player
- "Length: N" status line per player below the board
"""

import os
import logging
import tempfile
from typing import Any, Dict, List, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont
from moviepy import ImageSequenceClip
import numpy as np

from domain.constants import GET_READY, GAME_OVER
from domain.game_state import GameState
from services.replay import DEFAULT_REPLAY_DIR, replay_states

logger = logging.getLogger(__name__)

# Video settings
DEFAULT_FPS = 30
CELL_SIZE = 32
STATUS_HEIGHT = 88


class ColorScheme:
    """Color configuration for the arcade board"""

    BACKGROUND = "#532211"
    GRID_LINE = "#A95F43"
    WALL = "#0079F1"
    APPLE = "#E62937"
    TEXT = "#FFFFFF"

    # One entry per player, cycled if there are more snakes
    SNAKES = ["#00E430", "#FF6DC2", "#FDF900", "#66BFFF"]


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def darken_color(hex_color: str, amount: float = 0.3) -> Tuple[int, int, int]:
    """Darken a hex color by a given amount"""
    r, g, b = hex_to_rgb(hex_color)
    r = max(0, int(r * (1 - amount)))
    g = max(0, int(g * (1 - amount)))
    b = max(0, int(b * (1 - amount)))
    return (r, g, b)


def blend(base_hex: str, top_hex: str, alpha: float) -> Tuple[int, int, int]:
    """Mix `top_hex` over `base_hex` with opacity `alpha` (clamped to [0, 1])"""
    alpha = max(0.0, min(alpha, 1.0))
    base = hex_to_rgb(base_hex)
    top = hex_to_rgb(top_hex)
    return tuple(int(round(b * (1 - alpha) + t * alpha)) for b, t in zip(base, top))


class SnakeVideoGenerator:
    """Render GameState snapshots and encode them to MP4"""

    def __init__(self, cell_size: int = CELL_SIZE, fps: int = DEFAULT_FPS):
        self.cell_size = cell_size
        self.fps = fps
        self.font = ImageFont.load_default()

    def frame_size(self, state: GameState) -> Tuple[int, int]:
        return (state.width * self.cell_size, state.height * self.cell_size + STATUS_HEIGHT)

    def render_frame(self, state: GameState) -> Image.Image:
        """Render a single frame of the game"""
        img = Image.new('RGB', self.frame_size(state), hex_to_rgb(ColorScheme.BACKGROUND))
        draw = ImageDraw.Draw(img)

        self._draw_grid(draw, state)
        self._draw_walls(draw, state)

        for (x, y), alpha in zip(state.apples, state.apple_alphas):
            self._draw_apple(draw, x, y, blend(ColorScheme.BACKGROUND, ColorScheme.APPLE, alpha))

        for idx, positions in enumerate(state.snake_positions.values()):
            color_hex = ColorScheme.SNAKES[idx % len(ColorScheme.SNAKES)]
            for i, (x, y) in enumerate(positions):
                color = darken_color(color_hex, 0.3) if i == 0 else hex_to_rgb(color_hex)
                self._draw_cell(draw, x, y, color, padding=0 if i == 0 else 1)

        self._draw_status(draw, state)

        if state.substate == GET_READY:
            self._draw_caption(draw, state, "Get Ready")
        elif state.substate == GAME_OVER:
            self._draw_caption(draw, state, "Gameover")

        return img

    def _draw_grid(self, draw: ImageDraw.ImageDraw, state: GameState):
        """Draw grid lines at their current fade-in alpha"""
        cs = self.cell_size
        rows = state.grid_alphas[:state.height]
        cols = state.grid_alphas[state.height:]

        for y, alpha in enumerate(rows):
            if alpha <= 0:
                continue
            draw.line(
                [0, y * cs, (state.width - 1) * cs, y * cs],
                fill=blend(ColorScheme.BACKGROUND, ColorScheme.GRID_LINE, alpha),
                width=1
            )

        for x, alpha in enumerate(cols):
            if alpha <= 0:
                continue
            draw.line(
                [x * cs, 0, x * cs, (state.height - 1) * cs],
                fill=blend(ColorScheme.BACKGROUND, ColorScheme.GRID_LINE, alpha),
                width=1
            )

    def _draw_walls(self, draw: ImageDraw.ImageDraw, state: GameState):
        color = hex_to_rgb(ColorScheme.WALL)
        for x in range(state.width):
            self._draw_cell(draw, x, 0, color, padding=0)
            self._draw_cell(draw, x, state.height - 1, color, padding=0)
        for y in range(state.height):
            self._draw_cell(draw, 0, y, color, padding=0)
            self._draw_cell(draw, state.width - 1, y, color, padding=0)

    def _draw_cell(
        self,
        draw: ImageDraw.ImageDraw,
        x: int,
        y: int,
        color: Tuple[int, int, int],
        padding: int = 1
    ):
        """Fill a single grid cell"""
        cs = self.cell_size
        draw.rectangle(
            [x * cs + padding, y * cs + padding, (x + 1) * cs - 1 - padding, (y + 1) * cs - 1 - padding],
            fill=color
        )

    def _draw_apple(self, draw: ImageDraw.ImageDraw, x: int, y: int, color: Tuple[int, int, int]):
        cs = self.cell_size
        cx = x * cs + cs / 2
        cy = y * cs + cs / 2
        radius = cs / 4
        draw.ellipse([cx - radius, cy - radius, cx + radius, cy + radius], fill=color)

    def _draw_status(self, draw: ImageDraw.ImageDraw, state: GameState):
        """Player 0 is listed on the right, the others from the left"""
        img_width, img_height = self.frame_size(state)
        offset = 32
        text_y = img_height - STATUS_HEIGHT // 2

        left_x = offset
        for idx, (snake_id, length) in enumerate(state.lengths.items()):
            text = f"Length: {length}"
            color = hex_to_rgb(ColorScheme.SNAKES[idx % len(ColorScheme.SNAKES)])
            bbox = draw.textbbox((0, 0), text, font=self.font)
            text_width = bbox[2] - bbox[0]

            if idx == 0:
                draw.text((img_width - offset - text_width, text_y), text, fill=color, font=self.font)
            else:
                draw.text((left_x, text_y), text, fill=color, font=self.font)
                left_x += text_width + offset

    def _draw_caption(self, draw: ImageDraw.ImageDraw, state: GameState, text: str):
        board_width = state.width * self.cell_size
        board_height = state.height * self.cell_size
        bbox = draw.textbbox((0, 0), text, font=self.font)
        text_width = bbox[2] - bbox[0]
        text_height = bbox[3] - bbox[1]
        draw.text(
            (board_width // 2 - text_width // 2, board_height // 2 - text_height // 2),
            text,
            fill=hex_to_rgb(ColorScheme.TEXT),
            font=self.font
        )

    def generate_video(self, states: List[GameState], output_path: Optional[str] = None) -> str:
        """
        Encode snapshots into an MP4

        Args:
            states: snapshots in playback order
            output_path: Optional output path (if None, uses temp file)

        Returns:
            Path to the generated video file
        """
        if not states:
            raise ValueError("Cannot generate a video without frames")

        logger.info(f"Rendering {len(states)} frames")
        frames = []
        for i, state in enumerate(states):
            if i % 100 == 0:
                logger.info(f"Rendering frame {i + 1}/{len(states)}")
            frames.append(np.array(self.render_frame(state)))

        if output_path is None:
            output_path = os.path.join(tempfile.gettempdir(), "snake_replay.mp4")
        os.makedirs(os.path.dirname(os.path.abspath(output_path)), exist_ok=True)

        clip = ImageSequenceClip(frames, fps=self.fps)
        clip.write_videofile(
            output_path,
            codec='libx264',
            audio=False,
            logger=None
        )

        logger.info(f"Video created successfully at {output_path}")
        return output_path

    def generate_from_replay(self, replay_data: Dict[str, Any], output_path: Optional[str] = None) -> str:
        """Render a replay dict produced by services.replay"""
        return self.generate_video(replay_states(replay_data), output_path)


def get_video_local_path(game_id: str) -> str:
    """
    Get the local path for a game's video

    Args:
        game_id: The game ID

    Returns:
        Local path to the video file
    """
    return os.path.join(DEFAULT_REPLAY_DIR, f"{game_id}_replay.mp4")
