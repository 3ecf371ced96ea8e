# tests/unit/test_grid.py

import numpy as np
import pytest

from maze_search.errors import InvalidMazeFormat
from maze_search.grid import MazeGrid
from maze_search.position import Position, as_position
from maze_search.types import Cell
from maze_search.utils.grid import (
    DIRECTIONS,
    create_2d,
    is_in_bounds,
    manhattan_distance,
    neighbors,
)
from maze_search.utils.path import calculate_path_length, is_valid_path
from tests.test_utils import CORRIDOR


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (0, 0, True),
        (4, 4, True),
        (5, 0, False),
        (0, 5, False),
        (-1, 2, False),
        (2, -1, False),
    ],
)
def test_is_in_bounds_square(x: int, y: int, expected: bool) -> None:
    assert is_in_bounds(x, y, 5) is expected


def test_is_in_bounds_rectangle() -> None:
    assert is_in_bounds(6, 1, 7, 2)
    assert not is_in_bounds(1, 2, 7, 2)


def test_neighbors_order_is_east_west_south_north() -> None:
    assert DIRECTIONS == [(1, 0), (-1, 0), (0, 1), (0, -1)]
    assert neighbors(Position(3, 3)) == [
        Position(4, 3),
        Position(2, 3),
        Position(3, 4),
        Position(3, 2),
    ]


def test_manhattan_distance() -> None:
    assert manhattan_distance(Position(0, 1), Position(4, 3)) == 6
    assert manhattan_distance(Position(2, 2), Position(2, 2)) == 0


def test_create_2d_rows_are_independent() -> None:
    rows = create_2d(2, 3, None)
    rows[0][0] = "x"
    assert rows == [["x", None, None], [None, None, None]]


def test_from_rows_and_accessors() -> None:
    assert CORRIDOR.shape == (5, 5)
    assert CORRIDOR.size == 5
    assert CORRIDOR.cell(0, 1) == Cell.PATH
    assert CORRIDOR.is_wall(4, 1)
    assert CORRIDOR.is_path(3, 2)
    # outside reads as wall
    assert CORRIDOR.is_wall(-1, 1)
    assert CORRIDOR.is_wall(5, 3)


def test_from_rows_accepts_numpy_and_grid() -> None:
    array = CORRIDOR.to_array()
    assert array.dtype == np.uint8
    assert array.shape == (5, 5)
    assert MazeGrid.from_rows(array) == CORRIDOR
    assert MazeGrid.from_rows(CORRIDOR) is CORRIDOR


@pytest.mark.parametrize(
    "rows",
    [
        [],
        [[]],
        [[0, 1], [0]],
        [[0, 2]],
        [[0, True]],
        [["0", "1"]],
        "0101",
        ["01", "10"],
        None,
        42,
        np.zeros((2, 2, 2), dtype=np.uint8),
    ],
)
def test_from_rows_rejects_malformed(rows: object) -> None:
    with pytest.raises(InvalidMazeFormat):
        MazeGrid.from_rows(rows)


def test_grid_is_immutable_snapshot() -> None:
    copy = CORRIDOR.to_lists()
    copy[1][0] = 1
    assert CORRIDOR.is_path(0, 1)

    walled = CORRIDOR.with_cells([Position(0, 1)], Cell.WALL)
    assert walled.is_wall(0, 1)
    assert CORRIDOR.is_path(0, 1)
    with pytest.raises(IndexError):
        CORRIDOR.with_cells([Position(9, 9)], Cell.WALL)


def test_filled_and_open_cells() -> None:
    grid = MazeGrid.filled(3, 2, Cell.PATH)
    assert grid.shape == (2, 3)
    assert len(grid.open_cells()) == 6
    with pytest.raises(ValueError):
        grid.size


@pytest.mark.parametrize(
    "value, expected",
    [
        (Position(1, 2), Position(1, 2)),
        ((1, 2), Position(1, 2)),
        ([1, 2], Position(1, 2)),
        ({"x": 1, "y": 2}, Position(1, 2)),
    ],
)
def test_as_position(value: object, expected: Position) -> None:
    assert as_position(value) == expected


@pytest.mark.parametrize(
    "value", [None, (1,), {"x": 1}, (1.5, 2), ("1", "2"), (True, 0), "12"]
)
def test_as_position_rejects(value: object) -> None:
    with pytest.raises(ValueError):
        as_position(value)


def test_calculate_path_length() -> None:
    assert calculate_path_length([]) == 0
    assert calculate_path_length([Position(0, 1)]) == 0
    assert calculate_path_length([Position(0, 1), Position(1, 1)]) == 1


def test_is_valid_path() -> None:
    route = [
        Position(0, 1),
        Position(1, 1),
        Position(2, 1),
        Position(3, 1),
        Position(3, 2),
        Position(3, 3),
        Position(4, 3),
    ]
    assert is_valid_path(CORRIDOR, route, Position(0, 1), Position(4, 3))
    # gap between cells
    assert not is_valid_path(CORRIDOR, route[:2] + route[3:])
    # through a wall
    assert not is_valid_path(CORRIDOR, [Position(3, 1), Position(4, 1)])
    # wrong endpoints
    assert not is_valid_path(CORRIDOR, route, goal=Position(3, 3))
    assert not is_valid_path(CORRIDOR, [])
