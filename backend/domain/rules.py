"""
Collision and direction rules shared by the engine and the players.
"""

from typing import Sequence

from .constants import OPPOSITE_DIRECTIONS
from .geometry import Position


def is_self_collision(head: Position, snake: Sequence[Position]) -> bool:
    """
    True if head lands on any segment of the pre-move body except the
    current head.

    The tail is still part of the body here, so stepping into the cell the
    tail is about to leave counts as a collision.
    """
    return head in snake[1:]


def is_opposite_direction(current: str, proposed: str) -> bool:
    return OPPOSITE_DIRECTIONS.get(current) == proposed
