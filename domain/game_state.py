"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import Any, Dict, List, Optional, Tuple


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        frame_number: frames simulated since the last reset
        substate: GET_READY, PLAYING, STUNNED, DYING or GAME_OVER
        snake_positions: dict of snake_id -> list of (x, y), head first
        directions: dict of snake_id -> heading of the head segment
        alive: dict of snake_id -> bool
        speeds: dict of snake_id -> ticks per second
        width, height: board dimensions including the wall ring
        apples: list of (x, y) positions of all apples on the board
        apple_alphas: fade-in opacity of each apple, same order as apples;
            omitted alphas mean fully drawn apples (1.0), as for snapshots
            recorded without fade data
        grid_alphas: grid line opacities, rows first then columns
        death_reasons: dict of snake_id -> death reason for dead snakes
    """

    def __init__(
        self,
        frame_number: int,
        substate: str,
        snake_positions: Dict[str, List[Tuple[int, int]]],
        directions: Dict[str, str],
        alive: Dict[str, bool],
        speeds: Dict[str, float],
        width: int,
        height: int,
        apples: List[Tuple[int, int]],
        apple_alphas: Optional[List[float]] = None,
        grid_alphas: Optional[List[float]] = None,
        death_reasons: Optional[Dict[str, Optional[str]]] = None
    ):
        self.frame_number = frame_number
        self.substate = substate
        self.snake_positions = snake_positions
        self.directions = directions
        self.alive = alive
        self.speeds = speeds
        self.width = width
        self.height = height
        self.apples = apples
        self.apple_alphas = apple_alphas if apple_alphas is not None else [1.0] * len(apples)
        self.grid_alphas = grid_alphas or []
        self.death_reasons = death_reasons or {}

    @property
    def lengths(self) -> Dict[str, int]:
        return {sid: len(positions) for sid, positions in self.snake_positions.items()}

    def occupied_cells(self) -> set:
        """All cells covered by any snake body."""
        cells = set()
        for positions in self.snake_positions.values():
            cells.update(positions)
        return cells

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        # = wall
        . = empty space
        A = apple
        T = snake tail
        0,1,2... = snake head (showing player number)
        (0,0) is the top left corner, like on screen
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        # Wall ring
        for x in range(self.width):
            board[0][x] = '#'
            board[self.height - 1][x] = '#'
        for y in range(self.height):
            board[y][0] = '#'
            board[y][self.width - 1] = '#'

        for ax, ay in self.apples:
            board[ay][ax] = 'A'

        # Dying snakes are still drawn while they shrink
        for i, positions in enumerate(self.snake_positions.values()):
            for pos_idx, (x, y) in enumerate(positions):
                board[y][x] = str(i) if pos_idx == 0 else 'T'

        result = [f"{y:2d} {' '.join(row)}" for y, row in enumerate(board)]
        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation (tuples become lists)."""
        return {
            "frame_number": self.frame_number,
            "substate": self.substate,
            "snake_positions": {
                sid: [list(pos) for pos in positions]
                for sid, positions in self.snake_positions.items()
            },
            "directions": dict(self.directions),
            "alive": dict(self.alive),
            "speeds": dict(self.speeds),
            "width": self.width,
            "height": self.height,
            "apples": [list(pos) for pos in self.apples],
            "apple_alphas": list(self.apple_alphas),
            "grid_alphas": list(self.grid_alphas),
            "death_reasons": dict(self.death_reasons),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameState":
        return cls(
            frame_number=data["frame_number"],
            substate=data["substate"],
            snake_positions={
                sid: [tuple(pos) for pos in positions]
                for sid, positions in data["snake_positions"].items()
            },
            directions=data.get("directions", {}),
            alive=data["alive"],
            speeds=data.get("speeds", {}),
            width=data["width"],
            height=data["height"],
            apples=[tuple(pos) for pos in data.get("apples", [])],
            apple_alphas=data.get("apple_alphas"),
            grid_alphas=data.get("grid_alphas"),
            death_reasons=data.get("death_reasons"),
        )

    def __repr__(self):
        return (
            f"<GameState frame={self.frame_number}, substate={self.substate}, "
            f"apples={self.apples}, lengths={self.lengths}>"
        )
