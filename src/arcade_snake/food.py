"""Food kinds and spawning logic."""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from arcade_snake.config import FoodConfig
from arcade_snake.grid import Grid
from arcade_snake.snake import Position

logger = logging.getLogger(__name__)

# Above this share of occupied cells, sample from the free-cell list
# instead of retrying random draws.
_DENSE_OCCUPANCY = 0.5


class FoodKind(str, enum.Enum):
    NORMAL = "normal"
    BONUS = "bonus"
    SPEED = "speed"


@dataclass(frozen=True)
class Food:
    """A single food item on the board."""

    position: Position
    kind: FoodKind
    points: int

    def to_dict(self) -> dict:
        return {
            "position": list(self.position),
            "kind": self.kind.value,
            "points": self.points,
        }


def pick_kind(roll: float, config: FoodConfig) -> tuple[FoodKind, int]:
    """Map a uniform draw in ``[0, 1)`` to a food kind and its points."""
    if roll < config.speed_chance:
        return FoodKind.SPEED, config.speed_points
    if roll < config.bonus_chance:
        return FoodKind.BONUS, config.bonus_points
    return FoodKind.NORMAL, config.normal_points


def generate_food(
    snake: Sequence[Position],
    rng: np.random.Generator,
    config: FoodConfig | None = None,
    grid: Grid | None = None,
) -> Food | None:
    """Place a new food item on a cell not covered by *snake*.

    Draws uniform coordinates and retries while they land on the snake.
    On crowded boards it samples the free-cell list directly, which keeps
    the placement uniform. Returns ``None`` when no cell is free.
    """
    cfg = config or FoodConfig()
    board = grid or Grid()
    occupied = set(snake)

    if len(occupied) >= board.cell_count:
        logger.warning("No free cells available for food spawning.")
        return None

    if len(occupied) / board.cell_count < _DENSE_OCCUPANCY:
        while True:
            x, y = (int(v) for v in rng.integers(0, board.size, size=2))
            if (x, y) not in occupied:
                break
    else:
        free = board.free_cells(occupied)
        x, y = free[int(rng.integers(len(free)))]

    kind, points = pick_kind(float(rng.random()), cfg)
    logger.debug("Spawned %s food at (%d, %d).", kind.value, x, y)
    return Food(position=(x, y), kind=kind, points=points)
