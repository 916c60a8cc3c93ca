"""Solve routes for mazes submitted as text."""

import logging

from fastapi import APIRouter, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.concurrency import run_in_threadpool

from maze_solver.api.deps import AppSettings
from maze_solver.config import get_settings
from maze_solver.core.maze import Maze
from maze_solver.core.maze_parser import (
    MazeParseError,
    MazeValidationError,
    validate_maze_text,
)
from maze_solver.core.wall_follower import MazeUnsolvableError
from maze_solver.schemas.solve import (
    SolveRequest,
    SolveResponse,
    ValidateRequest,
    ValidateResponse,
)
from maze_solver.services.solver_service import solve_maze

logger = logging.getLogger(__name__)

settings = get_settings()
limiter = Limiter(key_func=get_remote_address)

router = APIRouter(prefix="/solve", tags=["Solve"])


def unsolvable_error(e: MazeUnsolvableError) -> HTTPException:
    """Translate a failed walk into a 422 response."""
    return HTTPException(
        status_code=422,
        detail={
            "message": str(e),
            "steps_taken": e.steps_taken,
            "position": e.position.to_dict(),
        },
    )


@router.post(
    "",
    response_model=SolveResponse,
)
@limiter.limit(f"{settings.rate_limit_requests}/minute")
async def solve(
    request: Request,
    solve_request: SolveRequest,
    app_settings: AppSettings,
) -> SolveResponse:
    """Solve a maze given as text.

    The maze uses S for the start, E for the exit, X for walls and
    '.' or space for open cells.
    """
    try:
        maze = Maze(solve_request.grid_data, name="Submitted")
    except (MazeParseError, MazeValidationError) as e:
        raise HTTPException(
            status_code=422,
            detail=str(e),
        ) from e

    try:
        return await run_in_threadpool(solve_maze, maze, app_settings, solve_request)
    except MazeUnsolvableError as e:
        logger.info(f"Submitted maze could not be solved: {e}")
        raise unsolvable_error(e) from e


@router.post(
    "/validate",
    response_model=ValidateResponse,
)
async def validate(validate_request: ValidateRequest) -> ValidateResponse:
    """Check maze text without solving it."""
    valid, error = validate_maze_text(validate_request.grid_data)
    return ValidateResponse(valid=valid, error=error)
