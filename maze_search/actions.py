"""Player movement actions.

``Action`` is the human readable direction enum used by
:meth:`maze_search.session.MazeSession.move_player`. Hosts map their own
input (arrow keys, WASD, buttons) onto these members.

``MOVE_DELTAS`` is the canonical action -> ``(dx, dy)`` mapping.
"""

from enum import StrEnum, auto
from typing import Dict, Tuple

from maze_search.position import Position


class Action(StrEnum):
    """Cardinal moves. ``UP`` decreases ``y``."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


MOVE_DELTAS: Dict[Action, Tuple[int, int]] = {
    Action.UP: (0, -1),
    Action.DOWN: (0, 1),
    Action.LEFT: (-1, 0),
    Action.RIGHT: (1, 0),
}


def apply_action(pos: Position, action: Action) -> Position:
    """Adjacent position in the direction of ``action`` (no bounds check)."""
    dx, dy = MOVE_DELTAS[Action(action)]
    return pos.offset(dx, dy)
