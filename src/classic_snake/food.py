"""Food placement logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from classic_snake.grid import CellType

if TYPE_CHECKING:
    from classic_snake.grid import Grid
    from classic_snake.snake import Snake

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Manages the single food item on the grid.

    Placement resamples uniform random cells inside the outer border ring
    until one is free of the snake and is not the cell the head enters on
    its next move. Uses a seeded NumPy RNG for reproducible placement.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
        max_retries: int = 1000,
        border: int = 1,
    ) -> None:
        if max_retries < 1:
            raise ValueError("max_retries must be at least 1.")
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_retries = max_retries
        self.border = border
        self.position: tuple[int, int] | None = None

    def place(self, snake: Snake) -> tuple[int, int] | None:
        """Place food for *snake* and return its position.

        Returns ``None`` when no inner cell is available.
        """
        self.clear()
        occupied = set(snake.body)
        lookahead = snake.next_head()

        lo = self.border
        col_hi = self.grid.cols - self.border
        row_hi = self.grid.rows - self.border
        for _ in range(self.max_retries):
            pos = (
                int(self.rng.integers(lo, col_hi)),
                int(self.rng.integers(lo, row_hi)),
            )
            if pos not in occupied and pos != lookahead:
                return self.place_at(*pos)

        # Crowded board: pick uniformly among the cells still valid.
        candidates = [
            pos for pos in self.grid.empty_inner_cells(self.border)
            if pos not in occupied and pos != lookahead
        ]
        if not candidates:
            logger.warning("No free cell available for food placement.")
            return None
        pos = candidates[int(self.rng.integers(len(candidates)))]
        return self.place_at(*pos)

    def place_at(self, col: int, row: int) -> tuple[int, int]:
        """Put the food at an explicit cell, replacing any current food."""
        self.clear()
        self.position = (col, row)
        self.grid.set(col, row, CellType.FOOD)
        logger.debug("Food placed at (%d, %d).", col, row)
        return self.position

    def clear(self) -> None:
        """Remove the current food, if any."""
        if self.position is None:
            return
        col, row = self.position
        if self.grid.get(col, row) == CellType.FOOD:
            self.grid.set(col, row, CellType.EMPTY)
        self.position = None

    def is_at(self, col: int, row: int) -> bool:
        return self.position == (col, row)
