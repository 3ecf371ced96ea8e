"""Command line entry point: ``python -m maze_search``.

Generates one maze, solves it with one or all strategies and prints a summary
line per strategy. ``--show`` also prints the maze with the path overlaid.
"""

import argparse
import logging
from typing import Iterable, List, Optional, Sequence

from maze_search.algorithms.factory import ALGORITHMS
from maze_search.config import DEFAULT_MAZE_SIZE, SolverConfig
from maze_search.grid import MazeGrid
from maze_search.position import Position
from maze_search.session import MazeSession, SolveResult

WALL_GLYPH = "#"
OPEN_GLYPH = "."
PATH_GLYPH = "*"


def render_text(maze: MazeGrid, path: Optional[Iterable[Position]] = None) -> str:
    on_path = set(path or ())
    lines: List[str] = []
    for y in range(maze.height):
        row = []
        for x in range(maze.width):
            if Position(x, y) in on_path:
                row.append(PATH_GLYPH)
            elif maze.is_wall(x, y):
                row.append(WALL_GLYPH)
            else:
                row.append(OPEN_GLYPH)
        lines.append("".join(row))
    return "\n".join(lines)


def format_result(result: SolveResult) -> str:
    if not result.solved:
        return f"{result.algorithm.upper():<9} no solution found ({result.visited} visited)"
    return (
        f"{result.algorithm.upper():<9} path length {result.path_length:>4}  "
        f"visited {result.visited:>5}  steps {result.steps:>5}  "
        f"{result.elapsed * 1000:.1f} ms"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="maze_search",
        description="Generate a Kruskal maze and solve it with BFS, DFS, Dijkstra or A*.",
    )
    parser.add_argument("--size", type=int, default=DEFAULT_MAZE_SIZE)
    parser.add_argument(
        "--algorithm", default="bfs", help=f"One of: {', '.join(sorted(ALGORITHMS))}"
    )
    parser.add_argument("--all", action="store_true", help="Run every algorithm")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--show", action="store_true", help="Print the solved maze")
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    session = MazeSession(
        SolverConfig(size=args.size, algorithm=args.algorithm, seed=args.seed)
    )
    names = sorted(ALGORITHMS) if args.all else [session.config.algorithm]

    print(f"Maze {session.maze.width}x{session.maze.height}")
    exit_code = 0
    for name in names:
        result = session.solve(name)
        if result is None:
            print(f"error: {session.last_error}")
            exit_code = 2
            continue
        print(format_result(result))
        if args.show:
            print(render_text(session.maze, result.path))
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
