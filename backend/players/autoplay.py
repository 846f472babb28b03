"""
Greedy one-step autoplay used to drive computer-controlled snakes.
"""

from typing import List, Sequence, Tuple

from domain.constants import (
    DIRECTION_ORDER,
    PASSTHROUGH,
    SELF_COLLISION_SCORE,
    WALL_COLLISION_SCORE,
    WALLS,
    GridSize,
)
from domain.game_state import GameState
from domain.geometry import Position, is_out_of_bounds, manhattan_distance, next_head_position, wrap
from domain.rules import is_opposite_direction, is_self_collision
from .base import Player


def score_moves(
    snake: Sequence[Position],
    food: Position,
    current_direction: str,
    mode: str,
    grid_size: GridSize,
) -> List[Tuple[str, int]]:
    """
    Score each non-reversing direction, larger is better:
      -1000 for a wall (walls mode only), -500 for the snake's own body,
      otherwise minus the Manhattan distance from the new head to the food.
    """
    head = snake[0]
    scored = []
    for direction in DIRECTION_ORDER:
        if is_opposite_direction(current_direction, direction):
            continue

        next_pos = next_head_position(head, direction)
        if mode == PASSTHROUGH:
            next_pos = wrap(next_pos, grid_size)

        if mode == WALLS and is_out_of_bounds(next_pos, grid_size):
            score = WALL_COLLISION_SCORE
        elif is_self_collision(next_pos, snake):
            score = SELF_COLLISION_SCORE
        else:
            score = -manhattan_distance(next_pos, food)
        scored.append((direction, score))
    return scored


def choose_direction(
    snake: Sequence[Position],
    food: Position,
    current_direction: str,
    mode: str,
    grid_size: GridSize,
) -> str:
    """
    Pick the best-scoring direction; ties go to the earliest in
    up, down, left, right order. No lookahead, so it can walk into traps.
    """
    scored = score_moves(snake, food, current_direction, mode, grid_size)
    if not scored:
        return current_direction
    best_direction, _ = max(scored, key=lambda item: item[1])
    return best_direction


class AutoplayPlayer(Player):
    """Heads straight for the food, dodging walls and its own body one step ahead."""

    def get_move(self, game_state: GameState) -> str:
        return choose_direction(
            game_state.snake,
            game_state.food,
            game_state.direction,
            game_state.mode,
            game_state.grid_size,
        )
