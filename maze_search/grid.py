"""Immutable maze grid snapshot.

``MazeGrid`` is the only form in which a maze leaves the generator. Rows are
persistent vectors (``pyrsistent.PVector``) so a snapshot handed to a search
strategy or a renderer can never be edited behind the generator's back; edits
return a new grid.

Design notes:

* ``rows[y][x]`` holds the integer value of a :class:`maze_search.types.Cell`
    (0 open, 1 wall). ``x`` is the column, ``y`` the row.
* Grids built from host data go through :meth:`MazeGrid.from_rows`, which
    raises :class:`maze_search.errors.InvalidMazeFormat` for empty, ragged or
    non-binary input.
* Reads outside the rectangle report a wall, matching how movement and search
    treat the border.
"""

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence, Tuple

import numpy as np
from pyrsistent import pvector
from pyrsistent.typing import PVector

from maze_search.errors import InvalidMazeFormat
from maze_search.position import Position
from maze_search.types import Cell
from maze_search.utils.grid import is_in_bounds

_CELL_VALUES = frozenset(int(c) for c in Cell)


@dataclass(frozen=True)
class MazeGrid:
    """Rectangular binary grid.

    Attributes:
        rows (PVector[PVector[int]]): Row-major cell values.
        width (int): Number of columns.
        height (int): Number of rows.
    """

    rows: PVector[PVector[int]]
    width: int
    height: int

    @classmethod
    def from_rows(cls, rows: Any) -> "MazeGrid":
        """Validate and freeze a row-major 0/1 matrix.

        Accepts another ``MazeGrid`` (returned unchanged), a 2D numpy array or
        any sequence of equal-length sequences.
        """
        if isinstance(rows, MazeGrid):
            return rows
        if isinstance(rows, np.ndarray):
            if rows.ndim != 2:
                raise InvalidMazeFormat(f"Expected a 2D array, got {rows.ndim}D")
            rows = rows.tolist()
        if isinstance(rows, (str, bytes)) or not isinstance(rows, Sequence):
            raise InvalidMazeFormat("Invalid maze format")
        if len(rows) == 0:
            raise InvalidMazeFormat("Maze must have at least one row")

        frozen: List[PVector[int]] = []
        width: Optional[int] = None
        for y, row in enumerate(rows):
            if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
                raise InvalidMazeFormat(f"Row {y} is not a sequence")
            if width is None:
                width = len(row)
                if width == 0:
                    raise InvalidMazeFormat("Maze rows must not be empty")
            elif len(row) != width:
                raise InvalidMazeFormat(
                    f"Row {y} has {len(row)} cells, expected {width}"
                )
            values = []
            for x, value in enumerate(row):
                if (
                    isinstance(value, bool)
                    or not isinstance(value, int)
                    or value not in _CELL_VALUES
                ):
                    raise InvalidMazeFormat(
                        f"Cell {(x, y)} holds {value!r}, expected 0 or 1"
                    )
                values.append(int(value))
            frozen.append(pvector(values))
        return cls(rows=pvector(frozen), width=len(frozen[0]), height=len(frozen))

    @classmethod
    def filled(cls, width: int, height: int, cell: Cell = Cell.WALL) -> "MazeGrid":
        row = pvector([int(cell)] * width)
        return cls(rows=pvector([row] * height), width=width, height=height)

    @property
    def size(self) -> int:
        """Side length of a square grid."""
        if self.width != self.height:
            raise ValueError(f"Grid is not square: {self.width}x{self.height}")
        return self.width

    def in_bounds(self, x: int, y: int) -> bool:
        return is_in_bounds(x, y, self.width, self.height)

    def cell(self, x: int, y: int) -> Cell:
        """Return the cell at ``(x, y)``; out-of-bounds reads are walls."""
        if not self.in_bounds(x, y):
            return Cell.WALL
        return Cell(self.rows[y][x])

    def is_wall(self, x: int, y: int) -> bool:
        return self.cell(x, y) == Cell.WALL

    def is_path(self, x: int, y: int) -> bool:
        return self.cell(x, y) == Cell.PATH

    def with_cells(self, positions: Iterable[Position], cell: Cell) -> "MazeGrid":
        """Return a copy with every position in ``positions`` set to ``cell``."""
        rows = self.rows
        for pos in positions:
            if not self.in_bounds(pos.x, pos.y):
                raise IndexError(
                    f"Out of bounds: {pos.as_tuple()} for grid {self.width}x{self.height}"
                )
            rows = rows.set(pos.y, rows[pos.y].set(pos.x, int(cell)))
        return MazeGrid(rows=rows, width=self.width, height=self.height)

    def open_cells(self) -> List[Position]:
        return [
            Position(x, y)
            for y in range(self.height)
            for x in range(self.width)
            if self.rows[y][x] == Cell.PATH
        ]

    def to_lists(self) -> List[List[int]]:
        """Mutable deep copy as nested lists."""
        return [list(row) for row in self.rows]

    def to_array(self) -> np.ndarray:
        """Copy as a ``(height, width)`` ``uint8`` array for renderers."""
        return np.array(self.to_lists(), dtype=np.uint8).reshape(
            self.height, self.width
        )

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.height, self.width)
