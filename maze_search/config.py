"""Configuration defaults and size normalization.

Maze sizes are never rejected: anything a host passes in is mapped to an odd
size in ``[MIN_MAZE_SIZE, MAX_MAZE_SIZE]``. Callers that care whether a value
was corrected compare the input with :func:`normalize_maze_size`'s output.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Optional

from maze_search.types import AlgorithmName

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

MIN_MAZE_SIZE = 11
MAX_MAZE_SIZE = 99
DEFAULT_MAZE_SIZE = 25

# Seconds between two scheduled search steps when animating.
DEFAULT_STEP_DELAY = 0.005

DEFAULT_ALGORITHM: str = AlgorithmName.BFS


def _parse_size(size: Any) -> Optional[int]:
    if isinstance(size, str):
        match = _LEADING_INT.match(size)
        return int(match.group(1)) if match else None
    try:
        return int(size)
    except (TypeError, ValueError, OverflowError):
        return None


def normalize_maze_size(size: Any) -> int:
    """Return an odd maze size clamped to the supported range.

    Strings are read up to their first non-digit (``"25.5"`` is 25).
    ``< 10`` (or unparsable) -> 11, ``>= 100`` -> 99, even values round up.

    >>> [normalize_maze_size(n) for n in (8, 10, 50, 51, 101)]
    [11, 11, 51, 51, 99]
    """
    parsed = _parse_size(size)
    if parsed is None or parsed < 10:
        normalized = MIN_MAZE_SIZE
    elif parsed > 100:
        normalized = MAX_MAZE_SIZE
    else:
        # 100 rounds up to 101, which is still out of range.
        normalized = min(parsed + 1 if parsed % 2 == 0 else parsed, MAX_MAZE_SIZE)
    if normalized != parsed:
        logger.debug("Maze size %r corrected to %d", size, normalized)
    return normalized


@dataclass(frozen=True)
class SolverConfig:
    """Settings for a :class:`maze_search.session.MazeSession`.

    Attributes:
        size: Requested maze side length (normalized on construction).
        algorithm: Default strategy name for solves (lower-cased).
        seed: Optional RNG seed for reproducible mazes.
        step_delay: Seconds between animated steps.
    """

    size: int = DEFAULT_MAZE_SIZE
    algorithm: str = DEFAULT_ALGORITHM
    seed: Optional[int] = None
    step_delay: float = DEFAULT_STEP_DELAY

    def __post_init__(self) -> None:
        object.__setattr__(self, "size", normalize_maze_size(self.size))
        object.__setattr__(self, "algorithm", str(self.algorithm).lower())
        if self.step_delay < 0:
            raise ValueError(f"step_delay must be >= 0, got {self.step_delay}")
