"""Breadth-first search.

FIFO frontier. Cells are marked visited (and given their back-pointer) when
they are enqueued, so each cell enters the queue once at its true depth and
the first time the goal is dequeued the path is a shortest one.
"""

import logging
from collections import deque
from typing import Deque, Optional

from maze_search.algorithms.common import (
    RunControl,
    SearchContext,
    StepResult,
    begin,
    finish,
    halt,
    is_goal,
    mark_visited,
    pending_result,
    reconstruct_path,
    set_parent,
    valid_neighbors,
    visit,
)
from maze_search.grid import MazeGrid
from maze_search.position import Position
from maze_search.types import AlgorithmName, CompleteCallback, StepCallback

logger = logging.getLogger(__name__)


class BFSAlgorithm:
    name: str = AlgorithmName.BFS

    def __init__(self, grid: MazeGrid, start: Position, goal: Position) -> None:
        self.context = SearchContext(grid, start, goal)
        self.control = RunControl()
        self.queue: Deque[Position] = deque()

    def start(
        self,
        on_step: Optional[StepCallback] = None,
        on_complete: Optional[CompleteCallback] = None,
    ) -> None:
        begin(self.control, on_step, on_complete)
        self.queue.append(self.context.start)
        mark_visited(self.context, self.context.start)

    def step(self) -> StepResult:
        pending = pending_result(self.control)
        if pending is not None:
            return pending
        ctx = self.context
        if not self.queue:
            logger.debug("BFS exhausted after %d visits", ctx.visited_count)
            return finish(self.control, None)

        current = self.queue.popleft()
        visit(self.control, current)
        if is_goal(ctx, current):
            return finish(self.control, reconstruct_path(ctx))

        for neighbor in valid_neighbors(ctx, current):
            mark_visited(ctx, neighbor)
            set_parent(ctx, neighbor, current)
            self.queue.append(neighbor)
        return StepResult(visited=current)

    def stop(self) -> None:
        halt(self.control)

    @property
    def running(self) -> bool:
        return self.control.running

    @property
    def finished(self) -> bool:
        return self.control.finished
