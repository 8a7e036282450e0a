"""
Tests for main.py - the headless simulation runner.
"""

import os
import random
import sys
from unittest.mock import MagicMock, patch

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.config import GameConfig
from domain.constants import PLAYING
from domain.snake_game import SnakeGame
from main import FRAME_TIME, run_simulation
from players import GreedyPlayer, RandomPlayer
from services.replay import load_replay


class TestRunSimulation:
    """Tests for run_simulation()."""

    def test_summary_without_saving(self):
        result = run_simulation(
            GameConfig(width=12, height=10),
            ["greedy", "random"],
            max_frames=600,
            seed=3,
            save=False
        )

        assert result["game_id"]
        assert 0 < result["frames"] <= 600
        assert result["end_reason"] in {"Game over.", "Reached max frames."}
        assert set(result["final_lengths"]) == {"0", "1"}
        assert result["sound_cues"]["get_ready"] == 1
        assert "replay_path" not in result

    def test_player_count_follows_variants(self):
        config = GameConfig(width=12, height=10, player_count=2)
        result = run_simulation(config, ["random"], max_frames=10, seed=1, save=False)
        assert list(result["final_lengths"]) == ["0"]
        # The caller's config is left untouched
        assert config.player_count == 2

    def test_replay_is_saved(self, tmp_path):
        result = run_simulation(
            GameConfig(width=12, height=10),
            ["greedy"],
            max_frames=120,
            seed=5,
            record_every=10,
            replay_dir=str(tmp_path)
        )

        replay = load_replay(result["replay_path"])
        assert replay["metadata"]["game_id"] == result["game_id"]
        assert replay["metadata"]["players"] == {"0": "greedy"}
        # Initial snapshot, one every 10 frames, and the final state
        assert len(replay["frames"]) >= 120 // 10 + 1

    def test_video_is_rendered_on_request(self):
        with patch("services.video_generator.SnakeVideoGenerator") as generator_cls:
            generator = MagicMock()
            generator.generate_video.return_value = "out.mp4"
            generator_cls.return_value = generator

            result = run_simulation(
                GameConfig(width=12, height=10),
                ["random"],
                max_frames=20,
                seed=2,
                save=False,
                video_path="out.mp4"
            )

        assert result["video_path"] == "out.mp4"
        states, path = generator.generate_video.call_args[0]
        assert path == "out.mp4"
        assert len(states) > 1
        assert generator_cls.call_args[1]["fps"] == 30


class TestWholeGameProperties:
    """Invariants that must hold over an entire autopilot game."""

    def test_lengths_grow_by_at_most_one_per_tick_while_alive(self):
        rng = random.Random(11)
        players = [GreedyPlayer("0", rng=random.Random(1)), RandomPlayer("1", rng=random.Random(2))]
        game = SnakeGame(GameConfig(width=14, height=12), players=players, rng=rng)

        previous = game.lengths
        for _ in range(5000):
            if game.game_over:
                break
            game.update(FRAME_TIME)
            for sid, snake in game.snakes.items():
                if snake.alive:
                    assert 0 <= snake.length - previous[sid] <= 1
                    assert len(set(snake.positions)) == snake.length
            previous = game.lengths

    def test_dying_sequence_reaches_game_over(self):
        game = SnakeGame(GameConfig(width=12, height=10, player_count=1))
        game.substate = PLAYING

        # Drive straight into the right wall
        for _ in range(60 * 10):
            if game.game_over:
                break
            game.update(FRAME_TIME)

        assert game.game_over
        assert game.snakes["0"].length == 0
        assert game.snakes["0"].death_reason == "wall"
