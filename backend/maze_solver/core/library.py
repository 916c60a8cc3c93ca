"""Bundled maze collection, loaded once from the configured directory."""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from maze_solver.config import get_settings

from .maze_parser import ParsedMaze, load_all_mazes

logger = logging.getLogger(__name__)


class MazeLibrary:
    """Read-only lookup of parsed mazes by slug."""

    def __init__(self, mazes: list[ParsedMaze]):
        self._mazes = {maze.slug: maze for maze in mazes}

    @classmethod
    def from_directory(cls, mazes_dir: Path | str) -> "MazeLibrary":
        mazes_dir = Path(mazes_dir)
        if not mazes_dir.is_dir():
            logger.warning(f"Mazes directory not found: {mazes_dir}")
            return cls([])
        mazes = load_all_mazes(mazes_dir)
        logger.info(f"Loaded {len(mazes)} mazes from {mazes_dir}")
        return cls(mazes)

    def __len__(self) -> int:
        return len(self._mazes)

    def list_mazes(self) -> list[ParsedMaze]:
        return [self._mazes[slug] for slug in sorted(self._mazes)]

    def get(self, slug: str) -> Optional[ParsedMaze]:
        return self._mazes.get(slug)


@lru_cache
def get_maze_library() -> MazeLibrary:
    """Get cached library built from settings.mazes_dir."""
    return MazeLibrary.from_directory(get_settings().mazes_dir)
