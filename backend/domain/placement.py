"""
Random, collision-free placement of food, boosts and penalties.

All placement is rejection sampling: draw a uniform cell, redraw while it is
occupied. The board must have at least one free cell; a full board would
loop forever and callers never build one.
"""

import random
from typing import Iterable, Optional, Sequence, Set

from .constants import (
    BOOST_DURATION,
    PENALTY_POINTS,
    POINTS,
    SPEED,
    GridSize,
)
from .entities import Boost, Penalty
from .geometry import Position


def _rng_or_default(rng):
    return rng if rng is not None else random


def _random_cell(grid_size: GridSize, rng) -> Position:
    return (rng.randrange(grid_size.width), rng.randrange(grid_size.height))


def _random_free_cell(grid_size: GridSize, occupied: Set[Position], rng) -> Position:
    while True:
        cell = _random_cell(grid_size, rng)
        if cell not in occupied:
            return cell


def occupied_cells(
    snake: Iterable[Position],
    food: Optional[Position] = None,
    boosts: Sequence[Boost] = (),
    penalties: Sequence[Penalty] = (),
) -> Set[Position]:
    """Every cell a new pickup must avoid."""
    cells = set(snake)
    if food is not None:
        cells.add(food)
    cells.update(b.position for b in boosts)
    cells.update(p.position for p in penalties)
    return cells


def place_food(
    snake: Sequence[Position],
    grid_size: GridSize,
    rng=None,
    avoid: Iterable[Position] = (),
) -> Position:
    """Return a random cell not covered by the snake or any cell in `avoid`."""
    rng = _rng_or_default(rng)
    return _random_free_cell(grid_size, set(snake) | set(avoid), rng)


def place_boost(
    snake: Sequence[Position],
    food: Position,
    grid_size: GridSize,
    existing_boosts: Sequence[Boost],
    existing_penalties: Sequence[Penalty],
    rng=None,
) -> Boost:
    """
    Return a new boost on a cell clear of the snake, the food and every
    other boost or penalty. The kind is a fair coin flip.
    """
    rng = _rng_or_default(rng)
    occupied = occupied_cells(snake, food, existing_boosts, existing_penalties)
    position = _random_free_cell(grid_size, occupied, rng)
    kind = SPEED if rng.random() < 0.5 else POINTS
    return Boost(position=position, kind=kind, duration=BOOST_DURATION)


def place_penalty(
    snake: Sequence[Position],
    food: Position,
    grid_size: GridSize,
    existing_boosts: Sequence[Boost],
    existing_penalties: Sequence[Penalty],
    rng=None,
) -> Penalty:
    rng = _rng_or_default(rng)
    occupied = occupied_cells(snake, food, existing_boosts, existing_penalties)
    position = _random_free_cell(grid_size, occupied, rng)
    return Penalty(position=position, points=PENALTY_POINTS)
