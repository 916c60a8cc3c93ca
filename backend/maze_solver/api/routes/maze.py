"""Maze routes for listing, retrieving and solving bundled mazes."""

from fastapi import APIRouter, HTTPException, Request, status
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.concurrency import run_in_threadpool

from maze_solver.api.deps import AppSettings, Library
from maze_solver.api.routes.solve import unsolvable_error
from maze_solver.config import get_settings
from maze_solver.core.library import MazeLibrary
from maze_solver.core.maze import Maze
from maze_solver.core.maze_parser import ParsedMaze
from maze_solver.core.wall_follower import MazeUnsolvableError
from maze_solver.schemas.maze import (
    MazeDetail,
    MazeListItem,
    MazeListResponse,
    MazePosition,
)
from maze_solver.schemas.solve import SolveOptions, SolveResponse
from maze_solver.services.solver_service import solve_maze

settings = get_settings()
limiter = Limiter(key_func=get_remote_address)

router = APIRouter(prefix="/maze", tags=["Mazes"])


def _get_or_404(library: MazeLibrary, slug: str) -> ParsedMaze:
    parsed = library.get(slug)
    if parsed is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Maze not found: {slug}",
        )
    return parsed


@router.get(
    "",
    response_model=MazeListResponse,
)
async def list_mazes(library: Library) -> MazeListResponse:
    """List all bundled mazes.

    Grid data is not included - use GET /v1/maze/{slug} for full details.
    """
    maze_items = [
        MazeListItem(
            slug=maze.slug,
            name=maze.name,
            width=maze.width,
            height=maze.height,
        )
        for maze in library.list_mazes()
    ]

    return MazeListResponse(
        mazes=maze_items,
        total=len(maze_items),
    )


@router.get(
    "/{slug}",
    response_model=MazeDetail,
)
async def get_maze(slug: str, library: Library) -> MazeDetail:
    """Get detailed information about a bundled maze, including grid data."""
    maze = _get_or_404(library, slug)

    return MazeDetail(
        slug=maze.slug,
        name=maze.name,
        width=maze.width,
        height=maze.height,
        grid_data=maze.grid_data,
        start=MazePosition(x=maze.start_x, y=maze.start_y),
        exit=MazePosition(x=maze.exit_x, y=maze.exit_y),
    )


@router.post(
    "/{slug}/solve",
    response_model=SolveResponse,
)
@limiter.limit(f"{settings.rate_limit_requests}/minute")
async def solve_bundled_maze(
    request: Request,
    slug: str,
    library: Library,
    app_settings: AppSettings,
    options: SolveOptions | None = None,
) -> SolveResponse:
    """Solve a bundled maze with the right-hand rule."""
    maze = Maze.from_parsed(_get_or_404(library, slug))

    try:
        return await run_in_threadpool(solve_maze, maze, app_settings, options)
    except MazeUnsolvableError as e:
        raise unsolvable_error(e) from e
