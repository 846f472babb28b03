"""
GameState entity - an immutable snapshot of one game at one tick.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from .constants import GridSize
from .entities import ActiveBoost, Boost, Penalty, position_to_dict
from .geometry import Position


@dataclass(frozen=True)
class GameState:
    """
    A snapshot of a single-snake game.

    Every tick produces a new GameState; nothing here is mutated in place.

    Attributes:
        snake: tuple of (x, y) from head at index 0 to tail at the end
        direction: direction the snake moved on the last tick
        food: (x, y) of the single food cell
        score: non-negative running score
        game_over: terminal flag, never cleared by the engine
        mode: 'walls' or 'passthrough', fixed for the whole run
        grid_size: board dimensions
        boosts: boosts lying on the board
        penalties: penalties lying on the board
        active_boosts: collected boosts still counting down
    """
    snake: Tuple[Position, ...]
    direction: str
    food: Position
    score: int
    game_over: bool
    mode: str
    grid_size: GridSize
    boosts: Tuple[Boost, ...] = field(default_factory=tuple)
    penalties: Tuple[Penalty, ...] = field(default_factory=tuple)
    active_boosts: Tuple[ActiveBoost, ...] = field(default_factory=tuple)

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self.snake[0]

    def has_active_boost(self, kind: str) -> bool:
        return any(boost.kind == kind for boost in self.active_boosts)

    def to_dict(self) -> Dict[str, Any]:
        """Plain structural copy, ready for json.dumps."""
        return {
            "snake": [position_to_dict(p) for p in self.snake],
            "direction": self.direction,
            "food": position_to_dict(self.food),
            "score": self.score,
            "gameOver": self.game_over,
            "mode": self.mode,
            "gridSize": {"width": self.grid_size.width, "height": self.grid_size.height},
            "boosts": [b.to_dict() for b in self.boosts],
            "penalties": [p.to_dict() for p in self.penalties],
            "activeBoosts": [a.to_dict() for a in self.active_boosts],
        }

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        S / P = speed / points boost
        X = penalty
        o = snake body
        H = snake head
        Row 0 is printed first since y grows downward.
        """
        board = [['.' for _ in range(self.grid_size.width)] for _ in range(self.grid_size.height)]

        def put(position: Position, marker: str) -> None:
            x, y = position
            if 0 <= x < self.grid_size.width and 0 <= y < self.grid_size.height:
                board[y][x] = marker

        put(self.food, 'F')
        for boost in self.boosts:
            put(boost.position, 'S' if boost.kind == "speed" else 'P')
        for penalty in self.penalties:
            put(penalty.position, 'X')

        # Body first so the head wins if they ever share a cell
        for segment in self.snake[1:]:
            put(segment, 'o')
        put(self.head, 'H')

        result = [f"{y:2d} {' '.join(row)}" for y, row in enumerate(board)]
        result.append("   " + " ".join(str(x % 10) for x in range(self.grid_size.width)))
        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState head={self.head}, length={len(self.snake)}, food={self.food}, "
            f"score={self.score}, game_over={self.game_over}, mode={self.mode}>"
        )
