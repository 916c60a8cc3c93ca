"""Tests for orientation arithmetic."""

import pytest

from maze_solver.core.directions import (
    Orientation,
    Position,
    forward,
    neighbor,
    reverse,
    rotate_counter_clockwise,
    rotate_left,
    rotate_right,
)


ALL = list(Orientation)


class TestRotations:
    """Turn tables."""

    def test_rotate_right(self):
        assert rotate_right(Orientation.UP) == Orientation.RIGHT
        assert rotate_right(Orientation.RIGHT) == Orientation.DOWN
        assert rotate_right(Orientation.DOWN) == Orientation.LEFT
        assert rotate_right(Orientation.LEFT) == Orientation.UP

    def test_rotate_left(self):
        assert rotate_left(Orientation.UP) == Orientation.LEFT
        assert rotate_left(Orientation.LEFT) == Orientation.DOWN
        assert rotate_left(Orientation.DOWN) == Orientation.RIGHT
        assert rotate_left(Orientation.RIGHT) == Orientation.UP

    def test_reverse(self):
        assert reverse(Orientation.UP) == Orientation.DOWN
        assert reverse(Orientation.DOWN) == Orientation.UP
        assert reverse(Orientation.LEFT) == Orientation.RIGHT
        assert reverse(Orientation.RIGHT) == Orientation.LEFT

    @pytest.mark.parametrize("orientation", ALL)
    def test_inverse_laws(self, orientation):
        assert reverse(reverse(orientation)) == orientation
        assert rotate_left(rotate_right(orientation)) == orientation
        assert rotate_right(rotate_left(orientation)) == orientation
        assert forward(orientation) is orientation

    @pytest.mark.parametrize("orientation", ALL)
    def test_rotate_right_has_period_four(self, orientation):
        seen = [orientation]
        current = orientation
        for _ in range(4):
            current = rotate_right(current)
            seen.append(current)

        assert seen[-1] == orientation
        assert set(seen[:4]) == set(ALL)

    @pytest.mark.parametrize("orientation", ALL)
    def test_two_right_turns_reverse(self, orientation):
        assert rotate_right(rotate_right(orientation)) == reverse(orientation)

    @pytest.mark.parametrize("orientation", ALL)
    def test_counter_clockwise_matches_left(self, orientation):
        assert rotate_counter_clockwise(orientation) == rotate_left(orientation)


class TestNeighbor:
    """Unit steps on the grid."""

    def test_neighbor_offsets(self):
        origin = Position(3, 3)

        assert neighbor(origin, Orientation.UP) == Position(3, 2)
        assert neighbor(origin, Orientation.DOWN) == Position(3, 4)
        assert neighbor(origin, Orientation.LEFT) == Position(2, 3)
        assert neighbor(origin, Orientation.RIGHT) == Position(4, 3)

    def test_neighbor_outside_grid(self):
        """No bounds checks: negative coordinates are fine."""
        assert neighbor(Position(0, 0), Orientation.UP) == Position(0, -1)

    @pytest.mark.parametrize("orientation", ALL)
    def test_step_and_back(self, orientation):
        start = Position(5, 7)
        assert neighbor(neighbor(start, orientation), reverse(orientation)) == start


class TestPosition:
    """Position value semantics."""

    def test_equality_and_hash(self):
        assert Position(1, 2) == Position(1, 2)
        assert Position(1, 2) != Position(2, 1)
        assert len({Position(1, 2), Position(1, 2)}) == 1

    def test_immutable(self):
        with pytest.raises(AttributeError):
            Position(1, 2).x = 5

    def test_to_dict(self):
        assert Position(4, 9).to_dict() == {"x": 4, "y": 9}


class TestOrientationLookup:
    """Orientation.from_name."""

    def test_from_name(self):
        assert Orientation.from_name("down") == Orientation.DOWN
        assert Orientation.from_name(" Left ") == Orientation.LEFT

    def test_from_name_invalid(self):
        with pytest.raises(ValueError, match="Invalid orientation"):
            Orientation.from_name("north")
