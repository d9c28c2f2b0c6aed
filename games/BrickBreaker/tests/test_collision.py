"""Tests for rectangle overlap and wall checks."""

import pytest

from games.BrickBreaker.game.physics import (
    check_collision,
    hits_side_wall,
    hits_top_wall,
    is_below_arena,
)


RECT_PAIRS = [
    ((0, 0, 10, 10), (5, 5, 10, 10)),       # partial overlap
    ((0, 0, 10, 10), (10, 0, 10, 10)),      # shared vertical edge
    ((0, 0, 10, 10), (0, 10, 10, 10)),      # shared horizontal edge
    ((0, 0, 10, 10), (10, 10, 5, 5)),       # shared corner
    ((0, 0, 100, 100), (40, 40, 10, 10)),   # containment
    ((0, 0, 10, 10), (50, 50, 10, 10)),     # far apart
    ((592, 692, 16, 16), (450, 720, 300, 5)),
    ((442, 708, 16, 16), (450, 720, 300, 5)),
]


class TestCheckCollision:
    """Test axis-aligned rectangle overlap."""

    def test_partial_overlap(self):
        assert check_collision((0, 0, 10, 10), (5, 5, 10, 10)) is True

    def test_containment_counts_as_overlap(self):
        assert check_collision((0, 0, 100, 100), (40, 40, 10, 10)) is True

    def test_touching_edges_do_not_collide(self):
        """Edges that meet without shared area are not a collision."""
        assert check_collision((0, 0, 10, 10), (10, 0, 10, 10)) is False
        assert check_collision((0, 0, 10, 10), (0, 10, 10, 10)) is False

    def test_touching_corners_do_not_collide(self):
        assert check_collision((0, 0, 10, 10), (10, 10, 5, 5)) is False

    def test_separated_rectangles(self):
        assert check_collision((0, 0, 10, 10), (50, 50, 10, 10)) is False

    def test_overlap_on_one_axis_only(self):
        """Overlapping x ranges alone are not enough."""
        assert check_collision((0, 0, 10, 10), (5, 20, 10, 10)) is False

    @pytest.mark.parametrize("rect_a, rect_b", RECT_PAIRS)
    def test_symmetric(self, rect_a, rect_b):
        """overlaps(A, B) == overlaps(B, A)."""
        assert check_collision(rect_a, rect_b) == check_collision(rect_b, rect_a)


class TestWallChecks:
    """Test wall and bottom boundary predicates."""

    def test_left_wall_at_radius(self):
        assert hits_side_wall(8.0, 8.0, 1200) is True

    def test_right_wall_at_width_minus_radius(self):
        assert hits_side_wall(1192.0, 8.0, 1200) is True

    def test_side_wall_clear(self):
        assert hits_side_wall(600.0, 8.0, 1200) is False

    def test_top_wall(self):
        assert hits_top_wall(8.0, 8.0) is True
        assert hits_top_wall(8.5, 8.0) is False

    def test_below_arena_inclusive(self):
        assert is_below_arena(750.0, 750) is True
        assert is_below_arena(749.9, 750) is False
