"""Position value object.

Immutable integer grid coordinates shared by the generator, the search
strategies and the session. Hosts frequently speak in ``(x, y)`` tuples or
``{"x": .., "y": ..}`` mappings; :func:`as_position` normalizes those.
"""

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Position":
        return Position(self.x + dx, self.y + dy)

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


def as_position(value: Any) -> Position:
    """Coerce a ``Position``, ``(x, y)`` pair or ``x``/``y`` mapping.

    Raises:
        ValueError: If ``value`` has no integer ``x`` and ``y`` coordinates.
    """
    if isinstance(value, Position):
        x, y = value.x, value.y
    elif isinstance(value, Mapping):
        if "x" not in value or "y" not in value:
            raise ValueError(f"Missing coordinates in {value!r}")
        x, y = value["x"], value["y"]
    elif isinstance(value, (tuple, list)) and len(value) == 2:
        x, y = value
    else:
        raise ValueError(f"Cannot interpret {value!r} as a position")
    for coord in (x, y):
        if isinstance(coord, bool) or not isinstance(coord, int):
            raise ValueError(f"Coordinates must be integers, got {value!r}")
    return Position(x, y)
