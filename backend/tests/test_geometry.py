"""
Tests for grid arithmetic and the collision / direction rules.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import UP, DOWN, LEFT, RIGHT, GridSize  # noqa: E402
from domain.geometry import is_out_of_bounds, manhattan_distance, next_head_position, wrap  # noqa: E402
from domain.rules import is_opposite_direction, is_self_collision  # noqa: E402

GRID = GridSize(25, 25)


class TestNextHeadPosition:
    """y grows downward: up is y - 1."""

    @pytest.mark.parametrize("direction, expected", [
        (UP, (5, 4)),
        (DOWN, (5, 6)),
        (LEFT, (4, 5)),
        (RIGHT, (6, 5)),
    ])
    def test_moves_one_cell(self, direction, expected):
        assert next_head_position((5, 5), direction) == expected

    def test_can_leave_the_board(self):
        """The raw move is not clamped; bounds are a separate concern."""
        assert next_head_position((0, 0), LEFT) == (-1, 0)
        assert next_head_position((0, 0), UP) == (0, -1)


class TestWrap:
    def test_negative_x_wraps_to_last_column(self):
        assert wrap((-1, 5), GRID) == (24, 5)

    def test_overflow_wraps_to_zero(self):
        assert wrap((25, 25), GRID) == (0, 0)

    def test_in_bounds_position_is_unchanged(self):
        assert wrap((3, 7), GRID) == (3, 7)

    def test_non_square_grid(self):
        grid = GridSize(10, 4)
        assert wrap((-1, -1), grid) == (9, 3)
        assert wrap((10, 4), grid) == (0, 0)


class TestIsOutOfBounds:
    @pytest.mark.parametrize("position", [(-1, 0), (0, -1), (25, 0), (0, 25)])
    def test_outside(self, position):
        assert is_out_of_bounds(position, GRID) is True

    @pytest.mark.parametrize("position", [(0, 0), (24, 24), (12, 0), (0, 12)])
    def test_inside(self, position):
        assert is_out_of_bounds(position, GRID) is False


class TestManhattanDistance:
    def test_distance(self):
        assert manhattan_distance((1, 2), (4, 0)) == 5
        assert manhattan_distance((3, 3), (3, 3)) == 0


class TestIsSelfCollision:
    def test_hits_body_segment(self):
        snake = [(5, 5), (5, 6), (4, 6), (4, 5)]
        assert is_self_collision((4, 5), snake) is True

    def test_free_cell(self):
        snake = [(5, 5), (4, 5), (3, 5)]
        assert is_self_collision((6, 5), snake) is False

    def test_tail_cell_counts_as_collision(self):
        """The tail has not moved yet when the check runs."""
        snake = [(5, 5), (5, 6), (4, 6), (4, 5)]
        assert is_self_collision((4, 5), snake) is True

    def test_current_head_is_ignored(self):
        snake = [(5, 5), (4, 5)]
        assert is_self_collision((5, 5), snake) is False


class TestIsOppositeDirection:
    @pytest.mark.parametrize("current, proposed", [
        (UP, DOWN), (DOWN, UP), (LEFT, RIGHT), (RIGHT, LEFT),
    ])
    def test_reversals(self, current, proposed):
        assert is_opposite_direction(current, proposed) is True

    @pytest.mark.parametrize("current, proposed", [
        (UP, UP), (UP, LEFT), (UP, RIGHT), (LEFT, DOWN), (RIGHT, RIGHT),
    ])
    def test_same_or_perpendicular(self, current, proposed):
        assert is_opposite_direction(current, proposed) is False
