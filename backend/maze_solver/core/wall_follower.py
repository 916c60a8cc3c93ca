"""
Right-Hand Rule (Wall Follower) maze solver.

Keep your right hand on the wall: at every cell try to turn right,
otherwise go straight, otherwise turn left, otherwise turn around.
Works for any simply-connected maze (no loops) and needs no map of
the maze, only the wall/open answer for the neighbouring cells.

Dead ends are handled by turning around and walking back out. Visited
cells stay enterable, so no backtracking stack is kept. Retraced steps
taken right after a dead end are not added to the returned path.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from .directions import (
    Orientation,
    Position,
    forward,
    neighbor,
    reverse,
    rotate_left,
    rotate_right,
)
from .maze import CellMarker, MazeModel

logger = logging.getLogger(__name__)

INITIAL_ORIENTATION = Orientation.DOWN


class MazeUnsolvableError(Exception):
    """Raised when the walk can be shown never to reach the finish."""

    def __init__(self, message: str, steps_taken: int, position: Position):
        super().__init__(message)
        self.steps_taken = steps_taken
        self.position = position


class TraversalObserver(Protocol):
    """Receives annotation events while the maze is walked."""

    def on_start(self, position: Position) -> None:
        ...

    def on_visit(self, position: Position) -> None:
        ...

    def on_finish(self, position: Position) -> None:
        ...


class MazeAnnotator:
    """Writes start/visited/finish markers back into the maze."""

    def __init__(self, maze: MazeModel):
        self.maze = maze

    def on_start(self, position: Position) -> None:
        self.maze.set_square_value(position.x, position.y, CellMarker.START)

    def on_visit(self, position: Position) -> None:
        self.maze.set_square_value(position.x, position.y, CellMarker.VISITED)

    def on_finish(self, position: Position) -> None:
        self.maze.set_square_value(position.x, position.y, CellMarker.FINISH)


class NullObserver:
    """Observer that ignores every event."""

    def on_start(self, position: Position) -> None:
        pass

    def on_visit(self, position: Position) -> None:
        pass

    def on_finish(self, position: Position) -> None:
        pass


@dataclass(frozen=True)
class Step:
    """Outcome of one decision: where to go and which way to face."""
    orientation: Orientation
    target: Position
    retraced: bool = False


class WallFollower:
    """
    Right-hand rule maze solver.

    Example usage:
        maze = Maze(maze_text)
        path = WallFollower(maze).solve()
        print(maze.render())
    """

    def __init__(
        self,
        maze: MazeModel,
        observer: Optional[TraversalObserver] = None,
        initial_orientation: Orientation = INITIAL_ORIENTATION,
        max_steps: Optional[int] = None,
        detect_loops: bool = True,
    ):
        """
        Args:
            maze: Maze to solve.
            observer: Annotation sink. Defaults to marking the maze itself.
            initial_orientation: Facing at the start cell.
            max_steps: Give up after this many steps (None = no limit).
            detect_loops: Give up as soon as the walk repeats itself.
        """
        if max_steps is not None and max_steps <= 0:
            raise ValueError("max_steps must be positive")

        self.maze = maze
        self.observer = observer if observer is not None else MazeAnnotator(maze)
        self.initial_orientation = initial_orientation
        self.max_steps = max_steps
        self.detect_loops = detect_loops
        self.steps_taken = 0
        self.finish_position: Optional[Position] = None

    def solve(self) -> list[Position]:
        """
        Walk from the start cell to the finish.

        Returns:
            Positions in the order they were entered, start excluded,
            finish included.

        Raises:
            MazeUnsolvableError: If the walk is caught in a loop, runs
                past max_steps, or starts with no open neighbour.
        """
        start = self.maze.get_start()
        path: list[Position] = []

        logger.debug(
            f"Solving from ({start.x}, {start.y}) facing "
            f"{self.initial_orientation.value}"
        )
        self.move(start, self.initial_orientation, path)
        self.observer.on_start(start)

        logger.info(
            f"Reached finish: path length {len(path)}, "
            f"{self.steps_taken} steps"
        )
        return path

    def move(
        self,
        position: Position,
        orientation: Orientation,
        path: list[Position],
    ) -> None:
        """
        Keep stepping from position until the finish is reached.

        Every entered cell is appended to path except the cell reached
        by turning around in a dead end.
        """
        start = self.maze.get_start()
        seen: set[tuple[Position, Orientation]] = set()
        self.steps_taken = 0
        self.finish_position = None

        while True:
            if self.maze.reached_finish(position):
                self.finish_position = position
                self.observer.on_finish(position)
                return

            if position != start:
                self.observer.on_visit(position)

            if self.detect_loops:
                state = (position, orientation)
                if state in seen:
                    logger.warning(
                        f"Walk repeats at ({position.x}, {position.y}) facing "
                        f"{orientation.value} after {self.steps_taken} steps"
                    )
                    raise MazeUnsolvableError(
                        "Wall follower is caught in a loop; "
                        "the finish cannot be reached",
                        steps_taken=self.steps_taken,
                        position=position,
                    )
                seen.add(state)

            if self.max_steps is not None and self.steps_taken >= self.max_steps:
                logger.warning(f"Step limit of {self.max_steps} reached")
                raise MazeUnsolvableError(
                    f"No path found within {self.max_steps} steps",
                    steps_taken=self.steps_taken,
                    position=position,
                )

            step = self.decide(position, orientation)
            if step.retraced and not self.maze.can_move_to(
                step.target.x, step.target.y
            ):
                logger.warning(
                    f"No open cell around ({position.x}, {position.y})"
                )
                raise MazeUnsolvableError(
                    "Start cell is enclosed by walls; "
                    "the finish cannot be reached",
                    steps_taken=self.steps_taken,
                    position=position,
                )
            if not step.retraced:
                path.append(step.target)

            position, orientation = step.target, step.orientation
            self.steps_taken += 1

    def decide(self, position: Position, orientation: Orientation) -> Step:
        """
        Pick the next move: right, then forward, then left, else back.

        Turning around is not checked here; the cell behind is the one
        just left, except at an enclosed start (see move).
        """
        for turn in (rotate_right, forward, rotate_left):
            candidate = turn(orientation)
            if self.can_move(position, candidate):
                return Step(candidate, neighbor(position, candidate))

        back = reverse(orientation)
        return Step(back, neighbor(position, back), retraced=True)

    def can_move(self, position: Position, orientation: Orientation) -> bool:
        """True if the cell one step away in orientation is open."""
        target = neighbor(position, orientation)
        return self.maze.can_move_to(target.x, target.y)
