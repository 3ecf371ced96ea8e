"""Path helpers shared by hosts and tests."""

from typing import Optional, Sequence

from maze_search.grid import MazeGrid
from maze_search.position import Position
from maze_search.utils.grid import manhattan_distance


def calculate_path_length(path: Sequence[Position]) -> int:
    """Number of moves along ``path`` (cells minus one, never negative)."""
    return max(0, len(path) - 1)


def is_valid_path(
    grid: MazeGrid,
    path: Sequence[Position],
    start: Optional[Position] = None,
    goal: Optional[Position] = None,
) -> bool:
    """Return True if ``path`` is a walkable 4-connected route through ``grid``.

    Arguments:
        grid: Maze snapshot the path must stay inside.
        path: Ordered cells, first to last.
        start: If given, the first cell must equal it.
        goal: If given, the last cell must equal it.
    """
    if not path:
        return False
    if start is not None and path[0] != start:
        return False
    if goal is not None and path[-1] != goal:
        return False
    if any(not grid.is_path(p.x, p.y) for p in path):
        return False
    return all(manhattan_distance(a, b) == 1 for a, b in zip(path, path[1:]))
