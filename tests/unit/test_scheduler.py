# tests/unit/test_scheduler.py

from typing import List, Optional

import pytest

from maze_search.algorithms.bfs import BFSAlgorithm
from maze_search.algorithms.factory import create_algorithm
from maze_search.errors import SearchBudgetExceeded
from maze_search.position import Position
from maze_search.scheduler import StepScheduler, iter_steps, run_to_completion
from maze_search.types import Path
from tests.test_utils import ALGORITHM_NAMES, CORRIDOR, ENCLOSED_GOAL

START, GOAL = Position(0, 1), Position(4, 3)


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def test_iter_steps_ends_with_terminal_result() -> None:
    search = BFSAlgorithm(CORRIDOR, START, GOAL)
    search.start()
    results = list(iter_steps(search))
    assert results[-1].done and results[-1].found
    assert not any(r.done for r in results[:-1])


@pytest.mark.parametrize("name", ALGORITHM_NAMES)
def test_run_to_completion_returns_path(name: str) -> None:
    visited: List[Position] = []
    completions: List[Optional[Path]] = []
    path = run_to_completion(
        create_algorithm(name, CORRIDOR, START, GOAL),
        on_step=lambda x, y: visited.append(Position(x, y)),
        on_complete=completions.append,
    )
    assert path is not None and path[0] == START and path[-1] == GOAL
    assert completions == [path]
    assert visited[-1] == GOAL


def test_run_to_completion_unreachable() -> None:
    search = BFSAlgorithm(ENCLOSED_GOAL, START, Position(3, 1))
    assert run_to_completion(search) is None


def test_run_to_completion_sleeps_between_steps() -> None:
    sleeps: List[float] = []
    search = BFSAlgorithm(CORRIDOR, START, GOAL)
    run_to_completion(search, delay=0.005, sleep=sleeps.append)
    assert sleeps
    assert set(sleeps) == {0.005}
    # no sleep after the terminal step
    assert len(sleeps) == search.control.steps - 1


def test_run_to_completion_budget() -> None:
    search = BFSAlgorithm(CORRIDOR, START, GOAL)
    with pytest.raises(SearchBudgetExceeded):
        run_to_completion(search, max_steps=3)
    assert not search.running
    assert search.step().stopped


def test_run_to_completion_stopped_from_callback() -> None:
    search = BFSAlgorithm(CORRIDOR, START, GOAL)
    completions: List[Optional[Path]] = []
    path = run_to_completion(
        search, on_step=lambda x, y: search.stop(), on_complete=completions.append
    )
    assert path is None
    assert completions == []


def test_scheduler_without_delay_steps_once_per_tick() -> None:
    scheduler = StepScheduler(BFSAlgorithm(CORRIDOR, START, GOAL), delay=0)
    scheduler.search.start()
    ticks = 0
    while not scheduler.done:
        assert len(scheduler.tick()) == 1
        ticks += 1
    assert ticks == scheduler.search.control.steps
    assert scheduler.tick() == []


def test_scheduler_paces_by_clock() -> None:
    clock = FakeClock()
    search = BFSAlgorithm(CORRIDOR, START, GOAL)
    search.start()
    scheduler = StepScheduler(search, delay=0.01, clock=clock)
    assert len(scheduler.tick()) == 1
    # nothing due yet
    assert scheduler.tick() == []
    clock.now = 0.035
    assert len(scheduler.tick()) == 3
    clock.now = 10.0
    results = scheduler.tick()
    assert results[-1].done and results[-1].found
    assert scheduler.done


def test_scheduler_cancel() -> None:
    search = BFSAlgorithm(CORRIDOR, START, GOAL)
    search.start()
    scheduler = StepScheduler(search, delay=0)
    scheduler.tick()
    scheduler.cancel()
    assert scheduler.done
    assert scheduler.tick() == []
    assert not search.running


def test_scheduler_rejects_negative_delay() -> None:
    with pytest.raises(ValueError):
        StepScheduler(BFSAlgorithm(CORRIDOR, START, GOAL), delay=-1)
