"""
The per-tick state transition for a single snake.

`advance` is total over well-formed states: it never raises, and it returns
a brand new GameState built from the previous one.
"""

import logging
import random
from dataclasses import replace
from typing import Optional

from .constants import (
    BOOST_SPAWN_CHANCE,
    FOOD_POINTS,
    GRID_SIZE,
    INITIAL_DIRECTION,
    INITIAL_SNAKE,
    MAX_BOOSTS,
    MAX_PENALTIES,
    PASSTHROUGH,
    PENALTY_SPAWN_CHANCE,
    POINTS,
    POINTS_BOOST_MULTIPLIER,
    WALLS,
    GridSize,
)
from .entities import ActiveBoost
from .game_state import GameState
from .geometry import is_out_of_bounds, next_head_position, wrap
from .placement import place_boost, place_food, place_penalty
from .rules import is_opposite_direction, is_self_collision

logger = logging.getLogger(__name__)


def create_initial_state(
    mode: str = WALLS,
    grid_size: GridSize = GRID_SIZE,
    rng=None,
) -> GameState:
    """
    Build a fresh game: a 3-segment snake in the middle of the board facing
    right, zero score, no pickups besides one freshly placed food.
    """
    snake = tuple(INITIAL_SNAKE)
    return GameState(
        snake=snake,
        direction=INITIAL_DIRECTION,
        food=place_food(snake, grid_size, rng),
        score=0,
        game_over=False,
        mode=mode,
        grid_size=grid_size,
    )


def resolve_direction(current: str, proposed: Optional[str]) -> str:
    """Keep the current direction unless a non-reversing one is proposed."""
    if proposed and not is_opposite_direction(current, proposed):
        return proposed
    return current


def advance(state: GameState, proposed_direction: Optional[str] = None, rng=None) -> GameState:
    """
    Advance the game by one tick.

    Steps, in order:
      1) Resolve the direction (reversals are ignored)
      2) Compute the next head, wrapping in passthrough mode
      3) Walls mode: leaving the board ends the game, nothing else changes
      4) Hitting the body ends the game, nothing else changes
      5) Age active boosts, dropping the expired ones
      6) Eat food (grow, score 10 or 20 with a points boost, re-place food)
         or move (drop the tail)
      7) Collect a boost / hit a penalty on the head cell
      8) Maybe spawn a new boost and a new penalty

    A terminal state is returned unchanged.
    """
    if state.game_over:
        return state

    rng = rng if rng is not None else random

    direction = resolve_direction(state.direction, proposed_direction)
    next_head = next_head_position(state.head, direction)

    if state.mode == PASSTHROUGH:
        next_head = wrap(next_head, state.grid_size)
    elif is_out_of_bounds(next_head, state.grid_size):
        logger.debug("Snake hit the wall at %s with score %d", next_head, state.score)
        return replace(state, game_over=True)

    if is_self_collision(next_head, state.snake):
        logger.debug("Snake ran into itself at %s with score %d", next_head, state.score)
        return replace(state, game_over=True)

    active_boosts = [boost.tick() for boost in state.active_boosts]
    active_boosts = [boost for boost in active_boosts if boost.remaining > 0]
    multiplier = POINTS_BOOST_MULTIPLIER if any(b.kind == POINTS for b in active_boosts) else 1

    snake = (next_head,) + state.snake
    food = state.food
    score = state.score

    if next_head == state.food:
        score += FOOD_POINTS * multiplier
        pickups = [b.position for b in state.boosts] + [p.position for p in state.penalties]
        food = place_food(snake, state.grid_size, rng, avoid=pickups)
    else:
        snake = snake[:-1]

    boosts = list(state.boosts)
    for index, boost in enumerate(boosts):
        if boost.position == next_head:
            active_boosts.append(ActiveBoost(boost.kind, boost.duration))
            del boosts[index]
            break

    penalties = list(state.penalties)
    for index, penalty in enumerate(penalties):
        if penalty.position == next_head:
            score = max(0, score + penalty.points)
            del penalties[index]
            break

    if rng.random() < BOOST_SPAWN_CHANCE and len(boosts) < MAX_BOOSTS:
        boosts.append(place_boost(snake, food, state.grid_size, boosts, penalties, rng))

    if rng.random() < PENALTY_SPAWN_CHANCE and len(penalties) < MAX_PENALTIES:
        penalties.append(place_penalty(snake, food, state.grid_size, boosts, penalties, rng))

    return replace(
        state,
        snake=snake,
        direction=direction,
        food=food,
        score=score,
        boosts=tuple(boosts),
        penalties=tuple(penalties),
        active_boosts=tuple(active_boosts),
    )
