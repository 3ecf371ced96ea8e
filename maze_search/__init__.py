"""maze_search
=================

Perfect maze generation (randomized Kruskal) plus four step-by-step search
strategies (BFS, DFS, Dijkstra, A*) for visualizing how each explores.

Typical use::

    from maze_search import MazeGenerator, create_algorithm, run_to_completion

    gen = MazeGenerator(31, seed=1)
    maze = gen.generate()
    search = create_algorithm("astar", maze, gen.start_position, gen.goal_position)
    path = run_to_completion(search, on_step=lambda x, y: None)

Rendering and input handling are left to the host; it observes progress
through the ``on_step`` / ``on_complete`` callbacks.
"""

from .algorithms import (
    ALGORITHMS,
    AStarAlgorithm,
    BFSAlgorithm,
    DFSAlgorithm,
    DijkstraAlgorithm,
    SearchAlgorithm,
    StepResult,
    create_algorithm,
)
from .config import SolverConfig, normalize_maze_size
from .errors import (
    AlgorithmStateError,
    InvalidMazeFormat,
    InvalidPositions,
    MazeSearchError,
    SearchBudgetExceeded,
    UnknownAlgorithm,
)
from .generator import MazeGenerator, generate_kruskal_maze
from .grid import MazeGrid
from .position import Position
from .scheduler import StepScheduler, iter_steps, run_to_completion
from .session import MazeSession, SolveResult
from .types import AlgorithmName, Cell
from .utils.path import calculate_path_length, is_valid_path

__all__ = [
    "ALGORITHMS",
    "AStarAlgorithm",
    "AlgorithmName",
    "AlgorithmStateError",
    "BFSAlgorithm",
    "Cell",
    "DFSAlgorithm",
    "DijkstraAlgorithm",
    "InvalidMazeFormat",
    "InvalidPositions",
    "MazeGenerator",
    "MazeGrid",
    "MazeSearchError",
    "MazeSession",
    "Position",
    "SearchAlgorithm",
    "SearchBudgetExceeded",
    "SolveResult",
    "SolverConfig",
    "StepResult",
    "StepScheduler",
    "UnknownAlgorithm",
    "calculate_path_length",
    "create_algorithm",
    "generate_kruskal_maze",
    "is_valid_path",
    "iter_steps",
    "normalize_maze_size",
    "run_to_completion",
]
