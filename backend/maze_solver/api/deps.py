"""API dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends

from maze_solver.config import Settings, get_settings
from maze_solver.core.library import MazeLibrary, get_maze_library

# Type aliases for cleaner route signatures
AppSettings = Annotated[Settings, Depends(get_settings)]
Library = Annotated[MazeLibrary, Depends(get_maze_library)]
