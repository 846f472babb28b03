"""
Domain entities and rules for the snake engine.

This module contains the core game logic that is independent of
infrastructure concerns (storage, HTTP, timers, rendering).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_DIRECTIONS,
    WALLS, PASSTHROUGH, VALID_MODES,
    SPEED, POINTS, BOOST_KINDS,
    GRID_SIZE, GridSize,
)
from .entities import Boost, Penalty, ActiveBoost
from .game_state import GameState
from .geometry import next_head_position, wrap, is_out_of_bounds
from .placement import place_food, place_boost, place_penalty
from .rules import is_self_collision, is_opposite_direction
from .engine import create_initial_state, advance

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_DIRECTIONS',
    'WALLS', 'PASSTHROUGH', 'VALID_MODES',
    'SPEED', 'POINTS', 'BOOST_KINDS',
    'GRID_SIZE', 'GridSize',
    'Boost', 'Penalty', 'ActiveBoost',
    'GameState',
    'next_head_position', 'wrap', 'is_out_of_bounds',
    'place_food', 'place_boost', 'place_penalty',
    'is_self_collision', 'is_opposite_direction',
    'create_initial_state', 'advance',
]
