"""Common type aliases and enumerations.

``StepCallback`` and ``CompleteCallback`` are the two hooks a host (renderer,
CLI, test) hands to a search strategy to observe its progress.
"""

from enum import IntEnum, StrEnum, auto
from typing import Callable, List, Optional, TYPE_CHECKING


# Forward declaration to avoid circular imports:
if TYPE_CHECKING:
    from maze_search.position import Position


class Cell(IntEnum):
    """Grid cell state. Values match the binary maze encoding (0 open, 1 wall)."""

    PATH = 0
    WALL = 1


class AlgorithmName(StrEnum):
    """Names accepted by :func:`maze_search.algorithms.factory.create_algorithm`."""

    BFS = auto()
    DFS = auto()
    DIJKSTRA = auto()
    ASTAR = auto()


Path = List["Position"]

StepCallback = Callable[[int, int], None]
CompleteCallback = Callable[[Optional[Path]], None]
