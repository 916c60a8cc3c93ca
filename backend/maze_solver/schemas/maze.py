"""Maze schemas for request/response validation."""

from pydantic import BaseModel, Field


class MazePosition(BaseModel):
    """Schema for a position in the maze."""

    x: int
    y: int


class MazeBase(BaseModel):
    """Base maze schema with common fields."""

    slug: str
    name: str
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)


class MazeListItem(MazeBase):
    """Schema for maze list item (without grid data)."""


class MazeDetail(MazeBase):
    """Schema for detailed maze response with grid data."""

    grid_data: str
    start: MazePosition
    exit: MazePosition


class MazeListResponse(BaseModel):
    """Schema for maze list response."""

    mazes: list[MazeListItem]
    total: int
