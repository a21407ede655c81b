"""Snake directions and movement rules."""

from __future__ import annotations

import enum

Position = tuple[int, int]


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values.

    ``y`` grows downwards, so ``UP`` decrements it.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def is_reversal(current: Direction, new_direction: Direction) -> bool:
    """Return True if *new_direction* points straight back along *current*."""
    return _OPPOSITES[current] is new_direction


def next_head(head: Position, direction: Direction) -> Position:
    """Compute the cell one step ahead of *head*."""
    dx, dy = direction.value
    x, y = head
    return x + dx, y + dy


def advance(
    body: tuple[Position, ...], new_head: Position, grow: bool = False,
) -> tuple[Position, ...]:
    """Return a new body with *new_head* prepended.

    The tail is dropped unless *grow* is set, so the length either stays
    the same or increases by exactly one.
    """
    if grow:
        return (new_head, *body)
    return (new_head, *body[:-1])
