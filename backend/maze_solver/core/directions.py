"""
Orientation arithmetic for grid traversal.

Grid convention: x is the column (grows to the right), y is the row
(grows downward), so UP decrements y and DOWN increments it.
"""

from dataclasses import dataclass
from enum import Enum


class Orientation(Enum):
    """Direction the traversal agent is facing."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        """Get (dx, dy) for this orientation."""
        return _DELTAS[self]

    @classmethod
    def from_name(cls, name: str) -> "Orientation":
        """Look up an orientation by its value, case-insensitively."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            valid = ", ".join(o.value for o in cls)
            raise ValueError(
                f"Invalid orientation '{name}'. Must be one of: {valid}"
            ) from None


_DELTAS = {
    Orientation.UP: (0, -1),
    Orientation.DOWN: (0, 1),
    Orientation.LEFT: (-1, 0),
    Orientation.RIGHT: (1, 0),
}

_RIGHT_OF = {
    Orientation.UP: Orientation.RIGHT,
    Orientation.RIGHT: Orientation.DOWN,
    Orientation.DOWN: Orientation.LEFT,
    Orientation.LEFT: Orientation.UP,
}

_LEFT_OF = {turned: original for original, turned in _RIGHT_OF.items()}

_OPPOSITE = {
    Orientation.UP: Orientation.DOWN,
    Orientation.DOWN: Orientation.UP,
    Orientation.LEFT: Orientation.RIGHT,
    Orientation.RIGHT: Orientation.LEFT,
}


@dataclass(frozen=True)
class Position:
    """Cell coordinates in the maze: x is the column, y is the row."""
    x: int
    y: int

    def move(self, orientation: Orientation) -> "Position":
        """Return the adjacent position one unit away in orientation."""
        dx, dy = orientation.delta
        return Position(self.x + dx, self.y + dy)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"x": self.x, "y": self.y}


def rotate_right(orientation: Orientation) -> Orientation:
    """Quarter turn clockwise."""
    return _RIGHT_OF[orientation]


def rotate_left(orientation: Orientation) -> Orientation:
    """Quarter turn counter-clockwise."""
    return _LEFT_OF[orientation]


def rotate_counter_clockwise(orientation: Orientation) -> Orientation:
    """Same turn as rotate_left, named for dead-end handling call sites."""
    return _LEFT_OF[orientation]


def reverse(orientation: Orientation) -> Orientation:
    """Half turn."""
    return _OPPOSITE[orientation]


def forward(orientation: Orientation) -> Orientation:
    """No turn."""
    return orientation


def neighbor(position: Position, orientation: Orientation) -> Position:
    """Position reached by a single step from position in orientation.

    No bounds or wall checks are made here.
    """
    return position.move(orientation)
