"""Strategy registry and factory.

``ALGORITHMS`` is a read-only name -> class mapping. Hosts that want extra
strategies build their own mapping and pass it as ``registry``; there is no
process-wide mutable registration.
"""

from typing import Any, Callable, Mapping

from pyrsistent import pmap
from pyrsistent.typing import PMap

from maze_search.algorithms.astar import AStarAlgorithm
from maze_search.algorithms.bfs import BFSAlgorithm
from maze_search.algorithms.common import SearchAlgorithm
from maze_search.algorithms.dfs import DFSAlgorithm
from maze_search.algorithms.dijkstra import DijkstraAlgorithm
from maze_search.errors import InvalidPositions, UnknownAlgorithm
from maze_search.grid import MazeGrid
from maze_search.position import Position, as_position
from maze_search.types import AlgorithmName

AlgorithmFactory = Callable[[MazeGrid, Position, Position], SearchAlgorithm]

ALGORITHMS: PMap[str, AlgorithmFactory] = pmap(
    {
        AlgorithmName.BFS: BFSAlgorithm,
        AlgorithmName.DFS: DFSAlgorithm,
        AlgorithmName.DIJKSTRA: DijkstraAlgorithm,
        AlgorithmName.ASTAR: AStarAlgorithm,
    }
)
"""Name -> strategy class mapping."""


def _coerce_position(value: Any, label: str, grid: MazeGrid) -> Position:
    try:
        pos = as_position(value)
    except ValueError as e:
        raise InvalidPositions(f"Invalid {label} position: {e}") from e
    if not grid.in_bounds(pos.x, pos.y):
        raise InvalidPositions(
            f"{label.capitalize()} {pos.as_tuple()} is outside the "
            f"{grid.width}x{grid.height} maze"
        )
    return pos


def create_algorithm(
    kind: str,
    grid: Any,
    start: Any,
    goal: Any,
    registry: Mapping[str, AlgorithmFactory] = ALGORITHMS,
) -> SearchAlgorithm:
    """Build an unstarted search strategy.

    Arguments:
        kind: Strategy name (case-insensitive), e.g. ``"astar"``.
        grid: ``MazeGrid`` or a non-empty rectangular 0/1 matrix.
        start: ``Position``, ``(x, y)`` or ``{"x": .., "y": ..}``.
        goal: Same forms as ``start``.
        registry: Name -> factory mapping to dispatch on.

    Raises:
        InvalidMazeFormat: ``grid`` is empty, ragged or not binary.
        InvalidPositions: ``start``/``goal`` lack integer coordinates or fall
            outside the grid.
        UnknownAlgorithm: ``kind`` is not in ``registry``.
    """
    maze = MazeGrid.from_rows(grid)
    start_pos = _coerce_position(start, "start", maze)
    goal_pos = _coerce_position(goal, "goal", maze)
    factory = registry.get(str(kind or "").lower())
    if factory is None:
        raise UnknownAlgorithm(kind)
    return factory(maze, start_pos, goal_pos)
