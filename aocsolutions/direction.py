"""Compass directions on a grid, including the diagonals."""

from __future__ import annotations

from enum import Enum


class Direction(Enum):
    """A step direction; y grows downwards."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    UP_RIGHT = 4
    UP_LEFT = 5
    DOWN_RIGHT = 6
    DOWN_LEFT = 7

    @property
    def offset(self) -> tuple[int, int]:
        """The (dx, dy) of one step in this direction."""
        return _OFFSETS[self]


_OFFSETS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP_RIGHT: (1, -1),
    Direction.UP_LEFT: (-1, -1),
    Direction.DOWN_RIGHT: (1, 1),
    Direction.DOWN_LEFT: (-1, 1),
}

_ALL = (
    Direction.RIGHT,
    Direction.LEFT,
    Direction.DOWN,
    Direction.UP,
    Direction.UP_RIGHT,
    Direction.UP_LEFT,
    Direction.DOWN_RIGHT,
    Direction.DOWN_LEFT,
)


def all_directions() -> tuple[Direction, ...]:
    """All eight directions, straight ones first."""
    return _ALL