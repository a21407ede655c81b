"""Bounded square grid for the snake game."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from arcade_snake.snake import Position

GRID_SIZE = 20


class Grid:
    """Fixed square grid with no wraparound.

    Coordinates use (x, y) ordering; the NumPy occupancy mask is indexed
    ``[y, x]`` so rows correspond to screen lines.
    """

    def __init__(self, size: int = GRID_SIZE) -> None:
        if size < 4:
            raise ValueError("Grid size must be at least 4×4.")
        self.size = size

    @property
    def cell_count(self) -> int:
        return self.size * self.size

    @property
    def center(self) -> Position:
        """Return the starting cell for a fresh snake."""
        return self.size // 2, self.size // 2

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= x < self.size and 0 <= y < self.size

    def occupancy(self, cells: Iterable[Position]) -> np.ndarray:
        """Return a boolean ``[y, x]`` mask of the given in-bounds cells."""
        mask = np.zeros((self.size, self.size), dtype=bool)
        for x, y in cells:
            if self.in_bounds(x, y):
                mask[y, x] = True
        return mask

    def free_cells(self, cells: Iterable[Position]) -> list[Position]:
        """Return every cell not covered by *cells*, in row-major order."""
        ys, xs = np.where(~self.occupancy(cells))
        return list(zip(xs.tolist(), ys.tolist(), strict=True))

    def to_dict(self) -> dict:
        return {"width": self.size, "height": self.size}
