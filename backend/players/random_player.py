"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List

from domain.constants import DIRECTION_ORDER, PASSTHROUGH
from domain.game_state import GameState
from domain.geometry import is_out_of_bounds, next_head_position, wrap
from domain.rules import is_opposite_direction, is_self_collision
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a valid direction that avoids walls and self-collisions.
    """

    def __init__(self, player_id: str = "0", rng=None):
        super().__init__(player_id)
        self.rng = rng if rng is not None else random

    def get_move(self, game_state: GameState) -> str:
        candidates = [
            d for d in DIRECTION_ORDER
            if not is_opposite_direction(game_state.direction, d)
        ]

        # Filter out moves that:
        # 1. Hit walls (walls mode only)
        # 2. Hit own body
        valid_moves: List[str] = []
        for move in candidates:
            new_head = next_head_position(game_state.head, move)
            if game_state.mode == PASSTHROUGH:
                new_head = wrap(new_head, game_state.grid_size)
            elif is_out_of_bounds(new_head, game_state.grid_size):
                continue

            if is_self_collision(new_head, game_state.snake):
                continue

            valid_moves.append(move)

        # If no valid moves, just return a random move (we'll die anyway)
        if not valid_moves:
            return self.rng.choice(candidates)

        return self.rng.choice(valid_moves)
