"""Grid math helpers.

Bounds checks, neighbour enumeration and the distance metric used by the
generator and every search strategy. Functions here are pure and
intentionally lightweight to keep inner loops fast.
"""

from typing import Any, List, Optional, Tuple

from maze_search.position import Position

# East, west, south, north. DFS/BFS exploration order depends on this order.
DIRECTIONS: List[Tuple[int, int]] = [(1, 0), (-1, 0), (0, 1), (0, -1)]


def is_in_bounds(x: int, y: int, width: int, height: Optional[int] = None) -> bool:
    """Return True if ``(x, y)`` lies inside a ``width`` x ``height`` rectangle.

    ``height`` defaults to ``width`` for square mazes.
    """
    if height is None:
        height = width
    return 0 <= x < width and 0 <= y < height


def neighbors(pos: Position) -> List[Position]:
    """Four cardinal neighbours of ``pos`` in ``DIRECTIONS`` order (unchecked)."""
    return [Position(pos.x + dx, pos.y + dy) for dx, dy in DIRECTIONS]


def manhattan_distance(a: Position, b: Position) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


def create_2d(rows: int, cols: int, fill: Any = 0) -> List[List[Any]]:
    """Allocate a ``rows`` x ``cols`` list-of-lists filled with ``fill``."""
    return [[fill for _ in range(cols)] for _ in range(rows)]
