"""
Maze model consumed by the wall follower.

Holds the grid, answers wall/open queries and stores per-cell
annotation markers written by a traversal. Markers never influence
whether a cell can be entered.

Maze Format:
    S = Start position
    E = Exit (finish)
    X = Wall (impassable)
    . = Open path (can also be space)
"""

from enum import Enum, IntEnum
from typing import Optional, Protocol

from .directions import Position
from .maze_parser import ParsedMaze, parse_maze_text


class CellType(Enum):
    """Types of cells in the maze."""
    OPEN = "."
    WALL = "X"
    START = "S"
    EXIT = "E"

    @classmethod
    def from_char(cls, char: str) -> "CellType":
        """Convert character to CellType."""
        mapping = {
            ".": cls.OPEN,
            " ": cls.OPEN,
            "X": cls.WALL,
            "S": cls.START,
            "E": cls.EXIT,
        }
        return mapping.get(char, cls.WALL)


class CellMarker(IntEnum):
    """Presentation markers; the numbers are shared with renderers."""
    UNMARKED = 0
    START = 1
    VISITED = 2
    FINISH = 3


MARKER_CHARS = {
    CellMarker.START: "S",
    CellMarker.VISITED: "o",
    CellMarker.FINISH: "E",
}


class MazeModel(Protocol):
    """Capabilities the wall follower needs from a maze."""

    def get_start(self) -> Position:
        ...

    def reached_finish(self, position: Position) -> bool:
        ...

    def can_move_to(self, x: int, y: int) -> bool:
        ...

    def set_square_value(self, x: int, y: int, marker: int) -> None:
        ...


class Maze:
    """
    Grid maze with start/exit cells and an annotation layer.

    Example usage:
        maze = Maze(maze_text)
        maze.can_move_to(1, 2)
        maze.set_square_value(1, 2, CellMarker.VISITED)
        print(maze.render())
    """

    def __init__(self, maze_text: str, name: str = "Unnamed"):
        """
        Initialize maze from text.

        Raises:
            MazeParseError: If the text is empty.
            MazeValidationError: If the text is not a valid maze.
        """
        self._load(parse_maze_text(maze_text, name=name))

    @classmethod
    def from_parsed(cls, parsed: ParsedMaze) -> "Maze":
        """Build a fresh maze from already parsed data."""
        maze = cls.__new__(cls)
        maze._load(parsed)
        return maze

    def _load(self, parsed: ParsedMaze) -> None:
        self.name = parsed.name
        self.grid: list[list[CellType]] = [
            [CellType.from_char(char) for char in line]
            for line in parsed.grid_data.split("\n")
        ]
        self.height = parsed.height
        self.width = parsed.width
        self.start_pos = Position(parsed.start_x, parsed.start_y)
        self.exit_pos = Position(parsed.exit_x, parsed.exit_y)
        self._markers: dict[Position, CellMarker] = {}

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= y < self.height and 0 <= x < len(self.grid[y])

    def get_cell(self, x: int, y: int) -> CellType:
        """Get cell type at position."""
        if not self.in_bounds(x, y):
            return CellType.WALL  # Out of bounds = wall
        return self.grid[y][x]

    def get_start(self) -> Position:
        return self.start_pos

    def reached_finish(self, position: Position) -> bool:
        return position == self.exit_pos

    def can_move_to(self, x: int, y: int) -> bool:
        """True if the cell is inside the grid and not a wall."""
        return self.get_cell(x, y) != CellType.WALL

    def set_square_value(self, x: int, y: int, marker: int) -> None:
        """
        Annotate a cell with a presentation marker.

        Raises:
            ValueError: If the cell is out of bounds or the marker is unknown.
        """
        if not self.in_bounds(x, y):
            raise ValueError(f"Cannot mark ({x}, {y}): outside the maze")
        marker = CellMarker(marker)
        if marker == CellMarker.UNMARKED:
            self._markers.pop(Position(x, y), None)
        else:
            self._markers[Position(x, y)] = marker

    def square_value(self, x: int, y: int) -> CellMarker:
        """Get the marker stored for a cell."""
        return self._markers.get(Position(x, y), CellMarker.UNMARKED)

    def marked_positions(self, marker: CellMarker) -> set[Position]:
        return {pos for pos, value in self._markers.items() if value == marker}

    def clear_markers(self) -> None:
        self._markers.clear()

    def get_maze_info(self) -> dict:
        """Get maze metadata."""
        return {
            "name": self.name,
            "width": self.width,
            "height": self.height,
            "start_position": self.start_pos.to_dict(),
            "exit_position": self.exit_pos.to_dict(),
        }

    def render(self, player: Optional[Position] = None) -> str:
        """
        Generate ASCII visualization of the maze.

        Markers take precedence over the underlying cell; visited cells
        are drawn as 'o'. If player is given it is drawn as '@'.
        """
        lines = []
        for y, row in enumerate(self.grid):
            line = ""
            for x, cell in enumerate(row):
                marker = self._markers.get(Position(x, y))
                if player is not None and player == Position(x, y):
                    line += "@"
                elif marker is not None:
                    line += MARKER_CHARS[marker]
                else:
                    line += cell.value
            lines.append(line)

        return "\n".join(lines)
