"""Runs the wall follower against a maze and shapes the result."""

import logging
from typing import Optional

from maze_solver.config import Settings
from maze_solver.core.directions import Orientation
from maze_solver.core.maze import Maze
from maze_solver.core.wall_follower import WallFollower
from maze_solver.schemas.maze import MazePosition
from maze_solver.schemas.solve import SolveOptions, SolveResponse

logger = logging.getLogger(__name__)


def build_solver(
    maze: Maze,
    settings: Settings,
    options: Optional[SolveOptions] = None,
) -> WallFollower:
    """Create a WallFollower using request overrides over settings."""
    options = options or SolveOptions()

    if options.initial_orientation:
        orientation = Orientation.from_name(options.initial_orientation)
    else:
        orientation = settings.initial_orientation

    max_steps = options.max_steps or settings.solver_max_steps

    return WallFollower(
        maze,
        initial_orientation=orientation,
        max_steps=max_steps,
        detect_loops=settings.solver_detect_loops,
    )


def solve_maze(
    maze: Maze,
    settings: Settings,
    options: Optional[SolveOptions] = None,
) -> SolveResponse:
    """
    Solve a maze and return the API response.

    Raises:
        MazeUnsolvableError: If the wall follower cannot reach the exit.
    """
    options = options or SolveOptions()
    solver = build_solver(maze, settings, options)

    logger.info(f"Solving maze '{maze.name}' ({maze.width}x{maze.height})")
    path = solver.solve()

    return SolveResponse(
        maze=maze.name,
        path=[MazePosition(x=pos.x, y=pos.y) for pos in path],
        path_length=len(path),
        steps_taken=solver.steps_taken,
        reached_finish=solver.finish_position is not None,
        rendered=maze.render() if options.render else None,
    )
