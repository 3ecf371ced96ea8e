"""Interactive maze session.

``MazeSession`` is the state a front end needs between events: the generator
(and therefore the current maze), the player's position, and at most one
active auto-solve. It holds no rendering or input code; a host wires its
buttons and keys to the methods here and draws from the callbacks.

Lifecycle rules:

* Regenerating, resizing or resetting always stops the active solve first.
* Starting a solve stops the previous one. The solve starts from the player's
    current position and targets the fixed goal.
* Manual moves are refused while a solve is active.
* A finished solve is recorded in ``last_result`` (path, counts, elapsed
    time) and the session returns to idle.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from maze_search.actions import Action, apply_action
from maze_search.algorithms.common import SearchAlgorithm, StepResult
from maze_search.algorithms.factory import create_algorithm
from maze_search.config import SolverConfig
from maze_search.errors import MazeSearchError
from maze_search.generator import MazeGenerator
from maze_search.grid import MazeGrid
from maze_search.position import Position
from maze_search.scheduler import iter_steps
from maze_search.types import CompleteCallback, Path, StepCallback
from maze_search.utils.path import calculate_path_length

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolveResult:
    """Summary of a finished auto-solve.

    Attributes:
        algorithm: Strategy name.
        path: Path found, or ``None`` if the goal is unreachable.
        path_length: Moves along ``path`` (0 when no path).
        visited: Number of cells the strategy visited.
        steps: Number of ``step()`` calls made while the search was running,
            including Dijkstra/A* steps that only discard a stale queue entry.
        elapsed: Wall-clock seconds from start to completion.
    """

    algorithm: str
    path: Optional[Path]
    path_length: int
    visited: int
    steps: int
    elapsed: float

    @property
    def solved(self) -> bool:
        return self.path is not None


class MazeSession:
    def __init__(
        self,
        config: Optional[SolverConfig] = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.config = config if config is not None else SolverConfig()
        self.generator = MazeGenerator(self.config.size, seed=self.config.seed)
        self._clock = clock
        self._algorithm: Optional[SearchAlgorithm] = None
        self._started_at: Optional[float] = None
        self.last_result: Optional[SolveResult] = None
        self.last_error: Optional[MazeSearchError] = None
        self.won = False
        self.generator.generate()
        self.player = self.generator.start_position

    # -------- Maze --------

    @property
    def maze(self) -> MazeGrid:
        maze = self.generator.maze
        assert maze is not None
        return maze

    @property
    def goal(self) -> Position:
        return self.generator.goal_position

    def new_maze(self) -> MazeGrid:
        self.stop_solving()
        maze = self.generator.generate()
        self.reset_player()
        return maze

    def update_size(self, new_size: int) -> MazeGrid:
        self.stop_solving()
        maze = self.generator.update_size(new_size)
        self.reset_player()
        return maze

    def reset(self) -> None:
        self.stop_solving()
        self.reset_player()
        self.last_result = None

    def reset_player(self) -> None:
        self.player = self.generator.start_position
        self.won = False

    # -------- Manual play --------

    def move_player(self, action: Action) -> bool:
        """Move one cell; returns False if blocked or while solving."""
        if self.solving:
            return False
        target = apply_action(self.player, action)
        if self.generator.is_wall(target.x, target.y):
            return False
        self.player = target
        if self.player == self.goal:
            self.won = True
            logger.info("Player reached the goal")
        return True

    # -------- Auto-solve --------

    @property
    def solving(self) -> bool:
        return self._algorithm is not None

    @property
    def algorithm(self) -> Optional[SearchAlgorithm]:
        return self._algorithm

    def start_solving(
        self,
        kind: Optional[str] = None,
        on_step: Optional[StepCallback] = None,
        on_complete: Optional[CompleteCallback] = None,
    ) -> Optional[SearchAlgorithm]:
        """Begin an auto-solve from the player's position.

        Returns the started strategy, or ``None`` if it could not be created
        (the error is kept in ``last_error``).
        """
        self.stop_solving()
        kind = kind if kind is not None else self.config.algorithm
        self.last_error = None
        self.last_result = None
        try:
            algorithm = create_algorithm(kind, self.maze, self.player, self.goal)
        except MazeSearchError as e:
            logger.warning("Cannot start %r solve: %s", kind, e)
            self.last_error = e
            return None
        algorithm.start(on_step, on_complete)
        self._algorithm = algorithm
        self._started_at = self._clock()
        logger.info(
            "Solving %dx%d maze with %s", self.maze.width, self.maze.height, kind
        )
        return algorithm

    def tick(self, steps: int = 1) -> Optional[StepResult]:
        """Advance the active solve by up to ``steps`` steps.

        Returns the last step result, or ``None`` when idle.
        """
        algorithm = self._algorithm
        if algorithm is None:
            return None
        result: Optional[StepResult] = None
        for _ in range(steps):
            result = algorithm.step()
            if result.done:
                self._finish(algorithm, result)
                break
        return result

    def stop_solving(self) -> None:
        if self._algorithm is not None:
            self._algorithm.stop()
            logger.debug("Stopped %s solve", self._algorithm.name)
        self._algorithm = None
        self._started_at = None

    def solve(self, kind: Optional[str] = None) -> Optional[SolveResult]:
        """Run a whole solve synchronously and return its summary."""
        algorithm = self.start_solving(kind)
        if algorithm is None:
            return None
        for result in iter_steps(algorithm):
            if result.done:
                self._finish(algorithm, result)
        return self.last_result

    def _finish(self, algorithm: SearchAlgorithm, result: StepResult) -> None:
        started_at = self._started_at
        if self._algorithm is algorithm:
            self._algorithm = None
            self._started_at = None
        if result.stopped:
            logger.debug("%s solve ended by stop", algorithm.name)
            return
        elapsed = self._clock() - (started_at or 0.0)
        path = result.path
        self.last_result = SolveResult(
            algorithm=str(algorithm.name),
            path=path,
            path_length=calculate_path_length(path) if path else 0,
            visited=algorithm.context.visited_count,
            steps=algorithm.control.steps,
            elapsed=elapsed,
        )
        if path is None:
            logger.info("%s found no path", algorithm.name)
        else:
            logger.info(
                "%s solved the maze: path length %d, %d cells visited",
                algorithm.name,
                self.last_result.path_length,
                self.last_result.visited,
            )
