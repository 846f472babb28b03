"""
Player implementations for the snake engine.

This module contains the player abstractions and implementations
that propose snake movement directions.
"""

from .base import Player
from .autoplay import AutoplayPlayer, choose_direction
from .random_player import RandomPlayer
from .human_player import HumanPlayer, KEY_MAP
from .variant_registry import create_player, get_player_class, list_variants, AVAILABLE_VARIANTS

__all__ = [
    'Player',
    'AutoplayPlayer',
    'choose_direction',
    'RandomPlayer',
    'HumanPlayer',
    'KEY_MAP',
    'create_player',
    'get_player_class',
    'list_variants',
    'AVAILABLE_VARIANTS',
]
