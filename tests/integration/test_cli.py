# tests/integration/test_cli.py

import pytest

from maze_search.__main__ import main, render_text
from maze_search.position import Position
from tests.test_utils import CORRIDOR


def test_render_text_overlays_path() -> None:
    text = render_text(CORRIDOR, [Position(0, 1), Position(1, 1)])
    assert text.splitlines() == [
        "#####",
        "**..#",
        "###.#",
        "#....",
        "#####",
    ]


def test_main_single_algorithm(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--size", "15", "--seed", "3", "--algorithm", "DFS"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Maze 15x15"
    assert out[1].startswith("DFS")
    assert "path length" in out[1]


def test_main_all_with_show(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--size", "11", "--seed", "1", "--all", "--show"]) == 0
    out = capsys.readouterr().out
    for name in ("ASTAR", "BFS", "DFS", "DIJKSTRA"):
        assert name in out
    assert "*" in out


def test_main_unknown_algorithm(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--algorithm", "greedy"]) == 2
    assert "Unknown algorithm type: greedy" in capsys.readouterr().out
