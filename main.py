import argparse
import json
import logging
import random
from dataclasses import replace
from typing import Dict, List, Optional

from dotenv import load_dotenv

from domain.config import GameConfig
from domain.game_state import GameState
from domain.snake_game import SnakeGame
from players.variant_registry import AVAILABLE_VARIANTS, DEFAULT_VARIANT, get_player_class
from services.replay import save_replay
from services.sound_cues import SoundCueLog

logger = logging.getLogger(__name__)

FRAME_TIME = 1.0 / 60.0
MAX_FRAMES = 60 * 60 * 5


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(
    config: GameConfig,
    variants: List[str],
    frame_time: float = FRAME_TIME,
    max_frames: int = MAX_FRAMES,
    seed: Optional[int] = None,
    record_every: int = 2,
    save: bool = True,
    replay_dir: Optional[str] = None,
    video_path: Optional[str] = None,
    show_board: bool = False
) -> Dict:
    """
    Runs a headless game with autopilot players at a fixed frame time.

    Args:
        config: Board and tuning settings; player_count is taken from variants.
        variants: One player variant key per snake (see players.variant_registry).
        frame_time: Seconds of game time simulated per frame.
        max_frames: Stop after this many frames even if nobody died.
        seed: Seed for apple placement and the players' choices.
        record_every: Keep one snapshot every N frames for the replay/video.
        save: Write the replay JSON to completed_games/.
        video_path: If set, also render the recorded frames to this MP4.
        show_board: Print the text board after every simulation tick.

    Returns:
        A dictionary summarizing the game (game_id, frames, final_lengths, death_info, ...).
    """
    config = replace(config, player_count=len(variants))
    rng = random.Random(seed)

    players = [
        get_player_class(variant)(str(i), rng=random.Random(rng.random()))
        for i, variant in enumerate(variants)
    ]

    cues = SoundCueLog()
    game = SnakeGame(config, players=players, play_sound=cues, rng=rng)
    game.start()
    logger.info(f"Game ID: {game.game_id} with players {variants}")

    history: List[GameState] = [game.get_current_state()]
    frames = 0

    while not game.game_over and frames < max_frames:
        changed = game.update(frame_time)
        frames += 1

        if changed and show_board:
            game.print_board()
        if frames % record_every == 0:
            history.append(game.get_current_state())

    final_state = game.get_current_state()
    if history[-1].frame_number != final_state.frame_number:
        history.append(final_state)

    end_reason = "Game over." if game.game_over else "Reached max frames."
    logger.info(f"{end_reason} Final lengths: {game.lengths}")

    metadata = {
        "players": dict(zip((p.snake_id for p in players), variants)),
        "seed": seed,
        "frame_time": frame_time,
        "end_reason": end_reason,
    }

    result = {
        "game_id": game.game_id,
        "frames": frames,
        "end_reason": end_reason,
        "final_lengths": game.lengths,
        "death_info": final_state.death_reasons,
        "sound_cues": dict(cues.counts()),
    }

    if save:
        result["replay_path"] = save_replay(game.game_id, history, metadata, replay_dir)

    if video_path:
        # Imported lazily so headless runs don't need the video stack loaded
        from services.video_generator import SnakeVideoGenerator

        generator = SnakeVideoGenerator(
            cell_size=config.grid_size,
            fps=max(1, round(1.0 / (frame_time * record_every)))
        )
        result["video_path"] = generator.generate_video(history, video_path)

    return result


# -------------------------------
# Example Usage (Main Entry Point)
# -------------------------------
def main():
    load_dotenv()
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    defaults = GameConfig.from_env()

    parser = argparse.ArgumentParser(
        description="Run a headless Snake arcade game with autopilot players."
    )
    parser.add_argument("--players", type=str, nargs='+', default=[DEFAULT_VARIANT] * defaults.player_count,
                        choices=AVAILABLE_VARIANTS,
                        help="One player variant per snake (e.g. 'greedy random')")
    parser.add_argument("--width", type=int, default=defaults.width,
                        help="Board width in cells, wall ring included")
    parser.add_argument("--height", type=int, default=defaults.height,
                        help="Board height in cells, wall ring included")
    parser.add_argument("--max_apples", type=int, default=defaults.max_apples,
                        help="Maximum number of apples on the board")
    parser.add_argument("--max_frames", type=int, default=MAX_FRAMES,
                        help="Stop after this many frames")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for a reproducible game")
    parser.add_argument("--video", type=str, default=None,
                        help="Also render the game to this MP4 path")
    parser.add_argument("--no_save", action="store_true",
                        help="Don't write the replay JSON")
    parser.add_argument("--show_board", action="store_true",
                        help="Print the text board after every tick")

    args = parser.parse_args()

    defaults.width = args.width
    defaults.height = args.height
    defaults.max_apples = args.max_apples

    result = run_simulation(
        defaults,
        args.players,
        max_frames=args.max_frames,
        seed=args.seed,
        save=not args.no_save,
        video_path=args.video,
        show_board=args.show_board
    )

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
