"""Depth-first search.

LIFO frontier with the same visited-on-push policy as BFS. The path found is
whatever the stack order reaches first; it is not necessarily the shortest.
"""

from typing import List, Optional

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


class DFSAlgorithm:
    name: str = AlgorithmName.DFS

    def __init__(self, grid: MazeGrid, start: Position, goal: Position) -> None:
        self.context = SearchContext(grid, start, goal)
        self.control = RunControl()
        self.stack: List[Position] = []

    def start(
        self,
        on_step: Optional[StepCallback] = None,
        on_complete: Optional[CompleteCallback] = None,
    ) -> None:
        begin(self.control, on_step, on_complete)
        self.stack.append(self.context.start)
        mark_visited(self.context, self.context.start)

    def step(self) -> StepResult:
        pending = pending_result(self.control)
        if pending is not None:
            return pending
        ctx = self.context
        if not self.stack:
            return finish(self.control, None)

        current = self.stack.pop()
        visit(self.control, current)
        if is_goal(ctx, current):
            return finish(self.control, reconstruct_path(ctx))

        # Pushed east, west, south, north: north is expanded first.
        for neighbor in valid_neighbors(ctx, current):
            mark_visited(ctx, neighbor)
            set_parent(ctx, neighbor, current)
            self.stack.append(neighbor)
        return StepResult(visited=current)

    def stop(self) -> None:
        halt(self.control)

    @property
    def running(self) -> bool:
        return self.control.running

    @property
    def finished(self) -> bool:
        return self.control.finished
