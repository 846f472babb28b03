"""
Game constants for the snake engine.
"""

from typing import Dict, List, NamedTuple, Tuple


class GridSize(NamedTuple):
    width: int
    height: int


# Movement directions
UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"
VALID_DIRECTIONS = {UP, DOWN, LEFT, RIGHT}

# Enumeration order used wherever directions are scanned in turn
DIRECTION_ORDER: List[str] = [UP, DOWN, LEFT, RIGHT]

OPPOSITE_DIRECTIONS: Dict[str, str] = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Boundary policies
WALLS = "walls"
PASSTHROUGH = "passthrough"
VALID_MODES = {WALLS, PASSTHROUGH}

# Boost kinds
SPEED = "speed"
POINTS = "points"
BOOST_KINDS = {SPEED, POINTS}

# Board and starting layout
GRID_SIZE = GridSize(25, 25)
INITIAL_SNAKE: Tuple[Tuple[int, int], ...] = ((12, 12), (11, 12), (10, 12))
INITIAL_DIRECTION = RIGHT

# Scoring
FOOD_POINTS = 10
POINTS_BOOST_MULTIPLIER = 2
PENALTY_POINTS = -20

# Boosts and penalties
BOOST_DURATION = 50  # ticks
BOOST_SPAWN_CHANCE = 0.05
PENALTY_SPAWN_CHANCE = 0.03
MAX_BOOSTS = 2
MAX_PENALTIES = 2

# Autoplay scoring
WALL_COLLISION_SCORE = -1000
SELF_COLLISION_SCORE = -500

# Driver cadence
BASE_TICK_MS = 150
SPEED_BOOST_MULTIPLIER = 0.5
SPECTATOR_TICK_MS = 200
