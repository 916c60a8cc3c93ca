# Core module
from .directions import (
    Orientation,
    Position,
    forward,
    neighbor,
    reverse,
    rotate_counter_clockwise,
    rotate_left,
    rotate_right,
)
from .maze import CellMarker, CellType, Maze, MazeModel
from .maze_parser import (
    MazeParseError,
    MazeValidationError,
    ParsedMaze,
    parse_maze_text,
    load_maze_file,
    load_all_mazes,
    validate_maze_text,
)
from .wall_follower import (
    MazeAnnotator,
    MazeUnsolvableError,
    NullObserver,
    Step,
    TraversalObserver,
    WallFollower,
)

__all__ = [
    "Orientation",
    "Position",
    "forward",
    "neighbor",
    "reverse",
    "rotate_counter_clockwise",
    "rotate_left",
    "rotate_right",
    "CellMarker",
    "CellType",
    "Maze",
    "MazeModel",
    "MazeParseError",
    "MazeValidationError",
    "ParsedMaze",
    "parse_maze_text",
    "load_maze_file",
    "load_all_mazes",
    "validate_maze_text",
    "MazeAnnotator",
    "MazeUnsolvableError",
    "NullObserver",
    "Step",
    "TraversalObserver",
    "WallFollower",
]
