"""Shared search state and helpers.

Every strategy owns a :class:`SearchContext` (grid, endpoints, visited and
back-pointer matrices) and a :class:`RunControl` (callbacks and lifecycle
flags). The strategies themselves are independent classes; what they have
in common is expressed by the free functions in this module and the
:class:`SearchAlgorithm` protocol.

Step contract (``SearchAlgorithm.step``):

* ``start`` only seeds the frontier. Nothing is visited until the first step.
* Each step handles one frontier element and returns a :class:`StepResult`.
  ``done`` is the continuation signal; the host keeps stepping while it is
  ``False``.
* ``on_complete`` fires exactly once, with the path or ``None``. After
  ``stop`` no callback fires at all.
"""

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Protocol, Tuple

import numpy as np

from maze_search.errors import AlgorithmStateError
from maze_search.grid import MazeGrid
from maze_search.position import Position
from maze_search.types import CompleteCallback, Path, StepCallback
from maze_search.utils.grid import create_2d, neighbors


@dataclass(frozen=True)
class StepResult:
    """Outcome of one search step.

    Attributes:
        done: True once the search will make no further progress.
        path: Reconstructed path when the goal was reached, else ``None``.
        visited: Cell marked visited by this step (``None`` for skipped
            stale entries and terminal steps).
        stopped: True if the search was cancelled with ``stop()``.
    """

    done: bool = False
    path: Optional[Path] = None
    visited: Optional[Position] = None
    stopped: bool = False

    @property
    def found(self) -> bool:
        return self.path is not None


STOPPED = StepResult(done=True, stopped=True)


@dataclass
class SearchContext:
    """Per-run grid view plus visited / back-pointer matrices."""

    grid: MazeGrid
    start: Position
    goal: Position
    visited: np.ndarray = field(init=False)
    came_from: List[List[Optional[Position]]] = field(init=False)

    def __post_init__(self) -> None:
        self.visited = np.zeros((self.grid.height, self.grid.width), dtype=bool)
        self.came_from = create_2d(self.grid.height, self.grid.width, None)

    @property
    def visited_count(self) -> int:
        return int(self.visited.sum())


@dataclass
class RunControl:
    """Callbacks and lifecycle flags for one run."""

    on_step: Optional[StepCallback] = None
    on_complete: Optional[CompleteCallback] = None
    started: bool = False
    running: bool = False
    finished: bool = False
    result: Optional[StepResult] = None
    steps: int = 0


class MinPriorityQueue:
    """Binary heap of positions keyed by a numeric priority.

    Entries with equal priority come out in insertion order. Duplicate
    positions are allowed; consumers skip stale entries on pop.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[float, int, Position]] = []
        self._counter: Iterator[int] = itertools.count()

    def push(self, pos: Position, priority: float) -> None:
        heapq.heappush(self._heap, (priority, next(self._counter), pos))

    def pop(self) -> Tuple[Position, float]:
        priority, _, pos = heapq.heappop(self._heap)
        return pos, priority

    def __len__(self) -> int:
        return len(self._heap)


class SearchAlgorithm(Protocol):
    """Capability set shared by the four strategies."""

    name: str
    context: SearchContext
    control: RunControl

    def start(
        self,
        on_step: Optional[StepCallback] = None,
        on_complete: Optional[CompleteCallback] = None,
    ) -> None: ...

    def step(self) -> StepResult: ...

    def stop(self) -> None: ...

    @property
    def running(self) -> bool: ...

    @property
    def finished(self) -> bool: ...


def is_goal(ctx: SearchContext, pos: Position) -> bool:
    return pos == ctx.goal


def is_valid_move(ctx: SearchContext, pos: Position) -> bool:
    """In bounds, open, and not yet visited."""
    return ctx.grid.is_path(pos.x, pos.y) and not ctx.visited[pos.y, pos.x]


def valid_neighbors(ctx: SearchContext, pos: Position) -> List[Position]:
    return [n for n in neighbors(pos) if is_valid_move(ctx, n)]


def mark_visited(ctx: SearchContext, pos: Position) -> None:
    ctx.visited[pos.y, pos.x] = True


def is_visited(ctx: SearchContext, pos: Position) -> bool:
    return bool(ctx.visited[pos.y, pos.x])


def set_parent(ctx: SearchContext, pos: Position, parent: Position) -> None:
    ctx.came_from[pos.y][pos.x] = parent


def reconstruct_path(ctx: SearchContext) -> Path:
    """Follow back-pointers from the goal to the start and reverse."""
    path: Path = []
    current: Optional[Position] = ctx.goal
    while current is not None:
        path.append(current)
        current = ctx.came_from[current.y][current.x]
    path.reverse()
    return path


def begin(
    control: RunControl,
    on_step: Optional[StepCallback],
    on_complete: Optional[CompleteCallback],
) -> None:
    """Arm ``control`` for a run. A strategy instance runs at most once."""
    if control.started:
        raise AlgorithmStateError("Search already started; create a new instance")
    control.on_step = on_step
    control.on_complete = on_complete
    control.started = True
    control.running = True


def halt(control: RunControl) -> None:
    control.running = False


def pending_result(control: RunControl) -> Optional[StepResult]:
    """Result to return without doing work, or ``None`` if a step may run.

    Counts the step when work may proceed.
    """
    if control.finished:
        return control.result
    if not control.running:
        return STOPPED
    control.steps += 1
    return None


def visit(control: RunControl, pos: Position) -> None:
    if control.on_step is not None:
        control.on_step(pos.x, pos.y)


def finish(control: RunControl, path: Optional[Path]) -> StepResult:
    """Record the terminal result and fire ``on_complete`` once."""
    if not control.running:
        # stopped from inside on_step during this step
        return STOPPED
    result = StepResult(done=True, path=path, visited=path[-1] if path else None)
    control.finished = True
    control.running = False
    control.result = StepResult(done=True, path=path)
    if control.on_complete is not None:
        control.on_complete(path)
    return result
