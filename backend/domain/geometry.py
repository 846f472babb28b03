"""
Grid arithmetic: moving a head one cell, wrapping and bounds checks.
"""

from typing import Tuple

from .constants import UP, DOWN, LEFT, RIGHT, GridSize

Position = Tuple[int, int]

_DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}


def next_head_position(head: Position, direction: str) -> Position:
    """Return head translated by one cell in direction (y grows downward)."""
    dx, dy = _DELTAS[direction]
    return (head[0] + dx, head[1] + dy)


def wrap(position: Position, grid_size: GridSize) -> Position:
    """
    Map a position back onto the board, torus style.

    x = -1 on a 25-wide grid becomes 24; x = 25 becomes 0.
    """
    x, y = position
    return (
        (x + grid_size.width) % grid_size.width,
        (y + grid_size.height) % grid_size.height,
    )


def is_out_of_bounds(position: Position, grid_size: GridSize) -> bool:
    x, y = position
    return x < 0 or x >= grid_size.width or y < 0 or y >= grid_size.height


def manhattan_distance(a: Position, b: Position) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])
