"""Exception hierarchy.

Everything raised deliberately by the package derives from
:class:`MazeSearchError`. Input errors also subclass ``ValueError`` and state
errors ``RuntimeError`` so callers catching the builtin kinds keep working.

An unreachable goal is *not* an error: it is reported as a ``None`` path.
"""


class MazeSearchError(Exception):
    """Base class for package errors."""


class InvalidMazeFormat(MazeSearchError, ValueError):
    """Grid is empty, ragged, or holds values other than 0/1."""


class InvalidPositions(MazeSearchError, ValueError):
    """Start or goal lacks integer coordinates or lies outside the grid."""


class UnknownAlgorithm(MazeSearchError, ValueError):
    """No strategy is registered under the requested name."""

    def __init__(self, name: object) -> None:
        super().__init__(f"Unknown algorithm type: {name}")
        self.name = name


class AlgorithmStateError(MazeSearchError, RuntimeError):
    """Search strategy used out of order (e.g. started twice)."""


class SearchBudgetExceeded(MazeSearchError, RuntimeError):
    """A driver stopped a search that ran past its step budget."""
