"""Dijkstra's algorithm.

Priority queue keyed by tentative distance. Edge weights are uniformly 1 on
a maze grid, so the exploration order matches BFS, but relaxation is written
for the general case. Outdated queue entries are not removed when a distance
improves; they are skipped when popped (lazy deletion).
"""

import logging
from typing import Optional

import numpy as np

from maze_search.algorithms.common import (
    MinPriorityQueue,
    RunControl,
    SearchContext,
    StepResult,
    begin,
    finish,
    halt,
    is_goal,
    is_visited,
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

EDGE_WEIGHT = 1


class DijkstraAlgorithm:
    name: str = AlgorithmName.DIJKSTRA

    def __init__(self, grid: MazeGrid, start: Position, goal: Position) -> None:
        self.context = SearchContext(grid, start, goal)
        self.control = RunControl()
        self.distances = np.full((grid.height, grid.width), np.inf)
        self.queue = MinPriorityQueue()

    def start(
        self,
        on_step: Optional[StepCallback] = None,
        on_complete: Optional[CompleteCallback] = None,
    ) -> None:
        begin(self.control, on_step, on_complete)
        start = self.context.start
        self.distances[start.y, start.x] = 0
        self.queue.push(start, 0)

    def step(self) -> StepResult:
        pending = pending_result(self.control)
        if pending is not None:
            return pending
        ctx = self.context
        if not self.queue:
            logger.debug("Dijkstra exhausted after %d visits", ctx.visited_count)
            return finish(self.control, None)

        current, _ = self.queue.pop()
        if is_visited(ctx, current):
            return StepResult()

        mark_visited(ctx, current)
        visit(self.control, current)
        if is_goal(ctx, current):
            return finish(self.control, reconstruct_path(ctx))

        alt = self.distances[current.y, current.x] + EDGE_WEIGHT
        for neighbor in valid_neighbors(ctx, current):
            if alt < self.distances[neighbor.y, neighbor.x]:
                self.distances[neighbor.y, neighbor.x] = alt
                set_parent(ctx, neighbor, current)
                self.queue.push(neighbor, alt)
        return StepResult(visited=current)

    def stop(self) -> None:
        halt(self.control)

    @property
    def running(self) -> bool:
        return self.control.running

    @property
    def finished(self) -> bool:
        return self.control.finished
