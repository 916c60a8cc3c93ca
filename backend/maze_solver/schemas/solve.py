"""Solve schemas for request/response validation."""

from typing import Optional

from pydantic import BaseModel, Field

from maze_solver.schemas.maze import MazePosition

ORIENTATION_PATTERN = "^(up|down|left|right)$"


class SolveOptions(BaseModel):
    """Solver overrides; unset fields fall back to settings."""

    initial_orientation: Optional[str] = Field(None, pattern=ORIENTATION_PATTERN)
    max_steps: Optional[int] = Field(None, gt=0)
    render: bool = True


class SolveRequest(SolveOptions):
    """Schema for solving a maze given as text."""

    grid_data: str = Field(..., min_length=3, max_length=250_000)


class SolveResponse(BaseModel):
    """Schema for a solved maze."""

    maze: str
    path: list[MazePosition]
    path_length: int
    steps_taken: int
    reached_finish: bool
    rendered: Optional[str] = None


class ValidateRequest(BaseModel):
    """Schema for validating maze text."""

    grid_data: str


class ValidateResponse(BaseModel):
    """Schema for validation result."""

    valid: bool
    error: Optional[str] = None
