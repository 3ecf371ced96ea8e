"""Perfect maze generation with randomized Kruskal's algorithm.

The maze lives on an odd ``N x N`` lattice: every cell with an odd row *and*
an odd column is a room, every other cell starts as wall. Each room carries a
disjoint-set label; walls between two rooms are visited in random order and
carved only when the rooms on either side still belong to different
components. The result is a spanning tree over the rooms, so any two open
cells are joined by exactly one simple path.

Finally the wall cells at ``(0, 1)`` and ``(N-1, N-2)`` are opened as entry and
exit. These are also the fixed start and goal positions.

Example:
    >>> gen = MazeGenerator(21, seed=7)
    >>> maze = gen.generate()
    >>> maze.is_path(*gen.start_position.as_tuple())
    True
"""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from maze_search.config import DEFAULT_MAZE_SIZE, normalize_maze_size
from maze_search.grid import MazeGrid
from maze_search.position import Position
from maze_search.types import Cell
from maze_search.utils.grid import is_in_bounds

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WallCandidate:
    """Removable wall between two rooms.

    Attributes:
        x: Wall column.
        y: Wall row.
        dx: Unit offset towards the far room along x (0 or 1).
        dy: Unit offset towards the far room along y (0 or 1).
    """

    x: int
    y: int
    dx: int
    dy: int

    @property
    def near(self) -> Position:
        return Position(self.x - self.dx, self.y - self.dy)

    @property
    def far(self) -> Position:
        return Position(self.x + self.dx, self.y + self.dy)


def start_position_for() -> Position:
    return Position(0, 1)


def goal_position_for(size: int) -> Position:
    return Position(size - 1, size - 2)


def init_rooms(size: int) -> tuple[np.ndarray, np.ndarray]:
    """Return ``(cells, labels)`` with every odd/odd cell opened and labelled.

    ``labels[y, x]`` is ``y * size + x`` for rooms and ``-1`` elsewhere.
    """
    cells = np.full((size, size), int(Cell.WALL), dtype=np.uint8)
    labels = np.full((size, size), -1, dtype=np.int64)
    cells[1::2, 1::2] = int(Cell.PATH)
    ys, xs = np.mgrid[0:size, 0:size]
    rooms = (ys % 2 == 1) & (xs % 2 == 1)
    labels[rooms] = (ys * size + xs)[rooms]
    return cells, labels


def wall_candidates(size: int) -> List[WallCandidate]:
    """Walls to the right of and below every room, row by row."""
    walls: List[WallCandidate] = []
    for y in range(1, size - 1, 2):
        for x in range(1, size - 1, 2):
            if x < size - 2:
                walls.append(WallCandidate(x + 1, y, 1, 0))
            if y < size - 2:
                walls.append(WallCandidate(x, y + 1, 0, 1))
    return walls


def merge_labels(labels: np.ndarray, old: int, new: int) -> None:
    """Relabel every room in component ``old`` as ``new`` (full scan)."""
    labels[labels == old] = new


def carve_walls(
    cells: np.ndarray, labels: np.ndarray, walls: List[WallCandidate]
) -> int:
    """Consume ``walls`` from the end, carving those that join two components.

    Returns the number of carved walls.
    """
    carved = 0
    while walls:
        wall = walls.pop()
        near, far = wall.near, wall.far
        near_label = labels[near.y, near.x]
        far_label = labels[far.y, far.x]
        if near_label != far_label:
            cells[wall.y, wall.x] = int(Cell.PATH)
            merge_labels(labels, int(far_label), int(near_label))
            carved += 1
    return carved


def generate_kruskal_maze(size: int, rng: Optional[random.Random] = None) -> MazeGrid:
    """Generate a perfect ``size`` x ``size`` maze (size is normalized first).

    Arguments:
        size: Requested side length; corrected to an odd value in [11, 99].
        rng: Random source for the wall order. A fresh ``random.Random`` is
            used when omitted.

    Returns:
        MazeGrid: Snapshot with entry ``(0, 1)`` and exit ``(N-1, N-2)`` open.
    """
    if rng is None:
        rng = random.Random()
    size = normalize_maze_size(size)
    cells, labels = init_rooms(size)
    walls = wall_candidates(size)
    rng.shuffle(walls)
    carved = carve_walls(cells, labels, walls)

    start = start_position_for()
    goal = goal_position_for(size)
    cells[start.y, start.x] = int(Cell.PATH)
    cells[goal.y, goal.x] = int(Cell.PATH)

    logger.debug("Generated %dx%d maze, carved %d walls", size, size, carved)
    return MazeGrid.from_rows(cells)


class MazeGenerator:
    """Owns the current maze and its size.

    The generator is the only holder of the maze; ``maze`` hands out the
    immutable snapshot, so callers cannot edit it in place.
    """

    def __init__(
        self,
        size: int = DEFAULT_MAZE_SIZE,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._size = normalize_maze_size(size)
        self._rng = rng if rng is not None else random.Random(seed)
        self._maze: Optional[MazeGrid] = None

    @property
    def size(self) -> int:
        return self._size

    @property
    def maze(self) -> Optional[MazeGrid]:
        """Current maze, or ``None`` before the first :meth:`generate`."""
        return self._maze

    def generate(self) -> MazeGrid:
        """Replace the current maze with a freshly generated one."""
        self._maze = generate_kruskal_maze(self._size, self._rng)
        return self._maze

    def update_size(self, new_size: int) -> MazeGrid:
        """Set a new (normalized) size and regenerate unconditionally."""
        self._size = normalize_maze_size(new_size)
        return self.generate()

    def is_wall(self, x: int, y: int) -> bool:
        if self._maze is None or not is_in_bounds(x, y, self._size):
            return True
        return self._maze.is_wall(x, y)

    def is_path(self, x: int, y: int) -> bool:
        return not self.is_wall(x, y)

    @property
    def start_position(self) -> Position:
        return start_position_for()

    @property
    def goal_position(self) -> Position:
        return goal_position_for(self._size)
