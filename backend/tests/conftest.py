"""Pytest configuration and fixtures."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from maze_solver.core.directions import Position
from maze_solver.core.maze import Maze
from maze_solver.main import app


# Loop of open cells around a single wall; exit reachable
SIMPLE_MAZE = """XXXXX
XS..X
X.X.X
X..EX
XXXXX"""

# Dead end straight below the start
DEAD_END_MAZE = """XXXXX
XS.EX
X.XXX
X.XXX
XXXXX"""

# Exit walled off from a ring the walker can only circle
UNREACHABLE_MAZE = """XXXXXX
XS..XE
X.X.XX
X...XX
XXXXXX"""


class GridStub:
    """Minimal maze model backed by a set of open cells."""

    def __init__(
        self,
        open_cells: set[tuple[int, int]],
        start: tuple[int, int],
        finish: tuple[int, int],
    ):
        self.open_cells = set(open_cells) | {start, finish}
        self.start = Position(*start)
        self.finish = Position(*finish)
        self.markers: list[tuple[int, int, int]] = []

    def get_start(self) -> Position:
        return self.start

    def reached_finish(self, position: Position) -> bool:
        return position == self.finish

    def can_move_to(self, x: int, y: int) -> bool:
        return (x, y) in self.open_cells

    def set_square_value(self, x: int, y: int, marker: int) -> None:
        self.markers.append((x, y, marker))


class RecordingObserver:
    """Collects traversal events in order."""

    def __init__(self):
        self.events: list[tuple[str, Position]] = []

    def on_start(self, position: Position) -> None:
        self.events.append(("start", position))

    def on_visit(self, position: Position) -> None:
        self.events.append(("visit", position))

    def on_finish(self, position: Position) -> None:
        self.events.append(("finish", position))


@pytest.fixture
def simple_maze() -> Maze:
    return Maze(SIMPLE_MAZE, name="Simple")


@pytest.fixture
def dead_end_maze() -> Maze:
    return Maze(DEAD_END_MAZE, name="Dead End")


@pytest.fixture
def unreachable_maze() -> Maze:
    return Maze(UNREACHABLE_MAZE, name="Unreachable")


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest_asyncio.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac


@pytest.fixture
def sample_solve_request() -> dict:
    """Sample solve request for testing."""
    return {"grid_data": SIMPLE_MAZE}
