"""Search strategies.

Four independent strategies share one stepping contract (see
:mod:`maze_search.algorithms.common`)::

    from maze_search.algorithms import create_algorithm

    search = create_algorithm("astar", maze, (0, 1), (20, 19))
    search.start(on_step=draw_cell, on_complete=draw_path)
    while not search.step().done:
        pass
"""

from .astar import AStarAlgorithm
from .bfs import BFSAlgorithm
from .common import SearchAlgorithm, StepResult
from .dfs import DFSAlgorithm
from .dijkstra import DijkstraAlgorithm
from .factory import ALGORITHMS, create_algorithm

__all__ = [
    "ALGORITHMS",
    "AStarAlgorithm",
    "BFSAlgorithm",
    "DFSAlgorithm",
    "DijkstraAlgorithm",
    "SearchAlgorithm",
    "StepResult",
    "create_algorithm",
]
