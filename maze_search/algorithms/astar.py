"""A* search with the Manhattan distance heuristic.

The frontier is ordered by ``f = g + h``. On a 4-connected unit-cost grid the
Manhattan distance never overestimates and is consistent, so the first time
the goal is expanded its path is optimal. Stale frontier entries are skipped
on pop, as in Dijkstra.
"""

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
from maze_search.utils.grid import manhattan_distance


class AStarAlgorithm:
    name: str = AlgorithmName.ASTAR

    def __init__(self, grid: MazeGrid, start: Position, goal: Position) -> None:
        self.context = SearchContext(grid, start, goal)
        self.control = RunControl()
        self.g_score = np.full((grid.height, grid.width), np.inf)
        self.f_score = np.full((grid.height, grid.width), np.inf)
        self.open_set = MinPriorityQueue()

    def heuristic(self, pos: Position) -> int:
        return manhattan_distance(pos, self.context.goal)

    def start(
        self,
        on_step: Optional[StepCallback] = None,
        on_complete: Optional[CompleteCallback] = None,
    ) -> None:
        begin(self.control, on_step, on_complete)
        start = self.context.start
        self.g_score[start.y, start.x] = 0
        self.f_score[start.y, start.x] = self.heuristic(start)
        self.open_set.push(start, self.f_score[start.y, start.x])

    def step(self) -> StepResult:
        pending = pending_result(self.control)
        if pending is not None:
            return pending
        ctx = self.context
        if not self.open_set:
            return finish(self.control, None)

        current, _ = self.open_set.pop()
        if is_visited(ctx, current):
            return StepResult()

        mark_visited(ctx, current)
        visit(self.control, current)
        if is_goal(ctx, current):
            return finish(self.control, reconstruct_path(ctx))

        tentative = self.g_score[current.y, current.x] + 1
        for neighbor in valid_neighbors(ctx, current):
            if tentative < self.g_score[neighbor.y, neighbor.x]:
                set_parent(ctx, neighbor, current)
                self.g_score[neighbor.y, neighbor.x] = tentative
                f = tentative + self.heuristic(neighbor)
                self.f_score[neighbor.y, neighbor.x] = f
                self.open_set.push(neighbor, f)
        return StepResult(visited=current)

    def stop(self) -> None:
        halt(self.control)

    @property
    def running(self) -> bool:
        return self.control.running

    @property
    def finished(self) -> bool:
        return self.control.finished
