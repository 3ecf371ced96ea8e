# tests/algorithms/test_contract.py
# Behaviour every strategy shares: callbacks, completion, cancellation.

from typing import List, Optional

import pytest

from maze_search.algorithms.factory import create_algorithm
from maze_search.errors import AlgorithmStateError
from maze_search.generator import MazeGenerator
from maze_search.grid import MazeGrid
from maze_search.position import Position
from maze_search.types import Path
from maze_search.utils.path import calculate_path_length, is_valid_path
from tests.test_utils import (
    ALGORITHM_NAMES,
    CORRIDOR,
    ENCLOSED_GOAL,
    SEEDS,
    run_recorded,
)

START = Position(0, 1)


@pytest.mark.parametrize("name", ALGORITHM_NAMES)
def test_corridor_path(name: str) -> None:
    goal = Position(4, 3)
    search = create_algorithm(name, CORRIDOR, START, goal)
    recorder = run_recorded(search)
    assert len(recorder.completions) == 1
    path = recorder.completions[0]
    assert path is not None
    assert is_valid_path(CORRIDOR, path, START, goal)
    assert calculate_path_length(path) == 6
    assert recorder.steps[0] == START
    assert recorder.steps[-1] == goal
    assert search.finished and not search.running


@pytest.mark.parametrize("name", ALGORITHM_NAMES)
def test_unreachable_goal_reports_none(name: str) -> None:
    search = create_algorithm(name, ENCLOSED_GOAL, START, Position(3, 1))
    recorder = run_recorded(search)
    assert recorder.completions == [None]
    # every reachable open cell was explored
    assert set(recorder.steps) == {
        Position(0, 1),
        Position(1, 1),
        Position(1, 2),
        Position(1, 3),
        Position(2, 3),
        Position(3, 3),
    }


@pytest.mark.parametrize("name", ALGORITHM_NAMES)
def test_start_equals_goal(name: str) -> None:
    search = create_algorithm(name, CORRIDOR, START, START)
    recorder = run_recorded(search)
    assert recorder.completions == [[START]]
    assert calculate_path_length([START]) == 0


@pytest.mark.parametrize("name", ALGORITHM_NAMES)
def test_each_cell_visited_once(name: str) -> None:
    gen = MazeGenerator(25, seed=3)
    maze = gen.generate()
    search = create_algorithm(name, maze, gen.start_position, gen.goal_position)
    recorder = run_recorded(search)
    assert len(recorder.steps) == len(set(recorder.steps))
    assert all(maze.is_path(p.x, p.y) for p in recorder.steps)
    if name in ("bfs", "dfs"):
        # marked on push, so queued but unexpanded cells count too
        assert len(recorder.steps) <= search.context.visited_count
    else:
        assert len(recorder.steps) == search.context.visited_count


@pytest.mark.parametrize("name", ALGORITHM_NAMES)
def test_step_results(name: str) -> None:
    search = create_algorithm(name, CORRIDOR, START, Position(4, 3))
    search.start()
    first = search.step()
    assert not first.done
    assert first.visited == START
    results = [first]
    while not results[-1].done:
        results.append(search.step())
    last = results[-1]
    assert last.found and last.path is not None
    assert last.visited == Position(4, 3)
    # After completion further steps are inert
    again = search.step()
    assert again.done and again.path == last.path
    assert not again.stopped


@pytest.mark.parametrize("name", ALGORITHM_NAMES)
def test_complete_fires_once_after_extra_steps(name: str) -> None:
    completions: List[Optional[Path]] = []
    search = create_algorithm(name, CORRIDOR, START, Position(4, 3))
    search.start(on_complete=completions.append)
    for _ in range(100):
        search.step()
    assert len(completions) == 1


@pytest.mark.parametrize("name", ALGORITHM_NAMES)
def test_stop_prevents_further_callbacks(name: str) -> None:
    steps: List[Position] = []
    completions: List[Optional[Path]] = []
    search = create_algorithm(name, CORRIDOR, START, Position(4, 3))
    search.start(lambda x, y: steps.append(Position(x, y)), completions.append)
    search.step()
    search.step()
    search.stop()
    seen = len(steps)
    for _ in range(20):
        result = search.step()
        assert result.done and result.stopped and result.path is None
    assert len(steps) == seen
    assert completions == []
    assert not search.running
    assert not search.finished


@pytest.mark.parametrize("name", ALGORITHM_NAMES)
def test_stop_from_step_callback(name: str) -> None:
    completions: List[Optional[Path]] = []
    search = create_algorithm(name, CORRIDOR, START, Position(4, 3))
    search.start(lambda x, y: search.stop(), completions.append)
    while not search.step().done:
        pass
    assert completions == []


@pytest.mark.parametrize("name", ALGORITHM_NAMES)
def test_step_before_start_is_inert(name: str) -> None:
    search = create_algorithm(name, CORRIDOR, START, Position(4, 3))
    result = search.step()
    assert result.done and result.stopped
    assert search.context.visited_count == 0


@pytest.mark.parametrize("name", ALGORITHM_NAMES)
def test_start_twice_raises(name: str) -> None:
    search = create_algorithm(name, CORRIDOR, START, Position(4, 3))
    search.start()
    with pytest.raises(AlgorithmStateError):
        search.start()


@pytest.mark.parametrize("seed", SEEDS)
def test_path_lengths_agree(seed: int) -> None:
    gen = MazeGenerator(31, seed=seed)
    maze = gen.generate()
    lengths = {}
    for name in ALGORITHM_NAMES:
        search = create_algorithm(name, maze, gen.start_position, gen.goal_position)
        path = run_recorded(search).completions[0]
        assert path is not None
        assert is_valid_path(maze, path, gen.start_position, gen.goal_position)
        lengths[name] = calculate_path_length(path)
    assert lengths["bfs"] == lengths["dijkstra"] == lengths["astar"]
    assert lengths["dfs"] >= lengths["bfs"]


def test_open_room_optimality() -> None:
    room = MazeGrid.from_rows([[0] * 9 for _ in range(9)])
    start, goal = Position(0, 0), Position(8, 5)
    lengths = {}
    for name in ALGORITHM_NAMES:
        path = run_recorded(create_algorithm(name, room, start, goal)).completions[0]
        assert path is not None
        assert is_valid_path(room, path, start, goal)
        lengths[name] = calculate_path_length(path)
    assert lengths["bfs"] == lengths["dijkstra"] == lengths["astar"] == 13
    assert lengths["dfs"] >= 13
