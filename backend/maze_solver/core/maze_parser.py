"""
Maze Parser for the wall-follower solver.

Loads and validates maze files from the filesystem.

Maze Format:
    S = Start position
    E = Exit (finish)
    X = Wall (impassable)
    . = Open path (can also be space)
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class MazeParseError(Exception):
    """Exception raised when maze parsing fails."""

    pass


class MazeValidationError(Exception):
    """Exception raised when maze validation fails."""

    pass


@dataclass
class ParsedMaze:
    """Parsed maze data ready for building a Maze."""

    name: str
    grid_data: str
    width: int
    height: int
    start_x: int
    start_y: int
    exit_x: int
    exit_y: int

    @property
    def slug(self) -> str:
        """URL-friendly identifier derived from the name."""
        return "-".join(self.name.lower().split())

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "grid_data": self.grid_data,
            "width": self.width,
            "height": self.height,
            "start_x": self.start_x,
            "start_y": self.start_y,
            "exit_x": self.exit_x,
            "exit_y": self.exit_y,
        }


VALID_CHARS = {"S", "E", "X", ".", " "}


def parse_maze_text(maze_text: str, name: str = "Unnamed") -> ParsedMaze:
    """
    Parse maze text and extract metadata.

    Args:
        maze_text: Multi-line string representing the maze grid.
        name: Name of the maze.

    Returns:
        ParsedMaze with grid data and metadata.

    Raises:
        MazeParseError: If the maze cannot be parsed.
        MazeValidationError: If the maze is invalid.
    """
    if not maze_text or not maze_text.strip():
        raise MazeParseError("Maze text is empty")

    # Only blank lines are stripped; a leading space is an open cell
    lines = maze_text.replace("\r\n", "\n").split("\n")
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    lines = [line.rstrip("\r") for line in lines]
    grid_data = "\n".join(lines)

    height = len(lines)
    width = max(len(line) for line in lines)

    start_pos: Optional[tuple[int, int]] = None
    exit_pos: Optional[tuple[int, int]] = None

    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            if char not in VALID_CHARS:
                raise MazeValidationError(
                    f"Invalid character '{char}' at position ({x}, {y}). "
                    f"Valid characters: {', '.join(sorted(VALID_CHARS))}"
                )

            if char == "S":
                if start_pos is not None:
                    raise MazeValidationError(
                        f"Multiple start positions found: "
                        f"first at {start_pos}, second at ({x}, {y})"
                    )
                start_pos = (x, y)
            elif char == "E":
                if exit_pos is not None:
                    raise MazeValidationError(
                        f"Multiple exit positions found: "
                        f"first at {exit_pos}, second at ({x}, {y})"
                    )
                exit_pos = (x, y)

    if start_pos is None:
        raise MazeValidationError("Maze must have a start position (S)")

    if exit_pos is None:
        raise MazeValidationError("Maze must have an exit position (E)")

    return ParsedMaze(
        name=name,
        grid_data=grid_data,
        width=width,
        height=height,
        start_x=start_pos[0],
        start_y=start_pos[1],
        exit_x=exit_pos[0],
        exit_y=exit_pos[1],
    )


def load_maze_file(file_path: Path | str, name: Optional[str] = None) -> ParsedMaze:
    """
    Load and parse a maze file from the filesystem.

    Args:
        file_path: Path to the maze file.
        name: Optional name override. If not provided, uses filename.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        MazeParseError: If the maze cannot be parsed.
        MazeValidationError: If the maze is invalid.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Maze file not found: {file_path}")

    if not file_path.is_file():
        raise MazeParseError(f"Path is not a file: {file_path}")

    try:
        maze_text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MazeParseError(f"Failed to read maze file: {e}") from e

    if name is None:
        name = file_path.stem.replace("_", " ").replace("-", " ").title()

    return parse_maze_text(maze_text, name=name)


def load_all_mazes(mazes_dir: Path | str) -> list[ParsedMaze]:
    """
    Load all maze files (*.txt) from a directory.

    Files that fail to parse are skipped with a warning.

    Raises:
        FileNotFoundError: If the directory doesn't exist.
    """
    mazes_dir = Path(mazes_dir)

    if not mazes_dir.exists():
        raise FileNotFoundError(f"Mazes directory not found: {mazes_dir}")

    if not mazes_dir.is_dir():
        raise MazeParseError(f"Path is not a directory: {mazes_dir}")

    mazes = []
    for maze_file in sorted(mazes_dir.glob("*.txt")):
        try:
            mazes.append(load_maze_file(maze_file))
        except (MazeParseError, MazeValidationError) as e:
            logger.warning(f"Failed to load {maze_file}: {e}")

    return mazes


def validate_maze_text(maze_text: str) -> tuple[bool, Optional[str]]:
    """
    Validate maze text without raising exceptions.

    Returns:
        Tuple of (is_valid, error_message).
        error_message is None if valid.
    """
    try:
        parse_maze_text(maze_text)
        return True, None
    except (MazeParseError, MazeValidationError) as e:
        return False, str(e)
