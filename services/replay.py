"""
Replay persistence for finished games.

Replays are plain JSON files under completed_games/, one per game:

    {
      "metadata": {...},
      "frames": [GameState.to_dict(), ...]
    }
"""

import json
import logging
import os
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from domain.game_state import GameState

logger = logging.getLogger(__name__)

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DEFAULT_REPLAY_DIR = os.path.join(project_root, "completed_games")


def serialize_history(history: List[GameState]) -> List[Dict[str, Any]]:
    """
    Convert the list of GameState objects to a JSON-serializable list of dicts.
    """
    return [state.to_dict() for state in history]


def build_replay(game_id: str, history: List[GameState], metadata: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Wrap recorded snapshots with game metadata."""
    meta = {
        "game_id": game_id,
        "saved_at": datetime.now(timezone.utc).isoformat(),
        "frame_count": len(history),
    }
    if history:
        meta["width"] = history[-1].width
        meta["height"] = history[-1].height
        meta["final_lengths"] = history[-1].lengths
        meta["death_info"] = history[-1].death_reasons
    meta.update(metadata or {})

    return {
        "metadata": meta,
        "frames": serialize_history(history),
    }


def get_replay_path(game_id: str, replay_dir: Optional[str] = None) -> str:
    return os.path.join(replay_dir or DEFAULT_REPLAY_DIR, f"snake_game_{game_id}.json")


def save_replay(
    game_id: str,
    history: List[GameState],
    metadata: Optional[Dict[str, Any]] = None,
    replay_dir: Optional[str] = None
) -> str:
    """
    Write the replay JSON and return its path.
    """
    path = get_replay_path(game_id, replay_dir)
    os.makedirs(os.path.dirname(path), exist_ok=True)

    data = build_replay(game_id, history, metadata)
    with open(path, "w") as f:
        json.dump(data, f, indent=2)

    logger.info(f"Saved replay with {len(history)} frames to {path}")
    return path


def load_replay(path: str) -> Dict[str, Any]:
    """Load a replay JSON file written by save_replay."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Replay file not found: {path}")

    with open(path, "r") as f:
        data = json.load(f)

    if "frames" not in data:
        raise ValueError(f"Replay {path} has no frames")

    logger.info(f"Loaded replay with {len(data['frames'])} frames")
    return data


def replay_states(replay_data: Dict[str, Any]) -> List[GameState]:
    return [GameState.from_dict(frame) for frame in replay_data.get("frames", [])]
