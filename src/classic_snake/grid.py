"""Grid representation for the snake game."""

from __future__ import annotations

import enum

import numpy as np

MIN_GRID_SIZE = 5


class CellType(enum.IntEnum):
    """Integer codes stored in the grid array."""

    EMPTY = 0
    SNAKE = 1
    FOOD = 2


class Grid:
    """NumPy-backed occupancy grid of ``cols x rows`` cells.

    Public coordinates are ``(col, row)`` pairs; the backing array is
    indexed ``cells[row, col]`` to stay consistent with NumPy layout.
    """

    def __init__(self, cols: int = 20, rows: int = 20) -> None:
        if cols < MIN_GRID_SIZE or rows < MIN_GRID_SIZE:
            raise ValueError(
                f"Grid dimensions must be at least "
                f"{MIN_GRID_SIZE}×{MIN_GRID_SIZE}."
            )
        self.cols = cols
        self.rows = rows
        self.cells = np.zeros((rows, cols), dtype=np.int8)

    def clear(self) -> None:
        """Reset all cells to empty."""
        self.cells[:] = CellType.EMPTY

    def in_bounds(self, col: int, row: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= col < self.cols and 0 <= row < self.rows

    def get(self, col: int, row: int) -> CellType:
        """Return the cell type at the given coordinate."""
        return CellType(self.cells[row, col])

    def set(self, col: int, row: int, cell_type: CellType) -> None:
        """Set the cell type at the given coordinate."""
        self.cells[row, col] = cell_type

    def empty_inner_cells(self, border: int = 1) -> list[tuple[int, int]]:
        """Return empty ``(col, row)`` cells, skipping *border* outer rings."""
        inner = self.cells[border:self.rows - border, border:self.cols - border]
        rows, cols = np.where(inner == CellType.EMPTY)
        return [
            (c + border, r + border)
            for r, c in zip(rows.tolist(), cols.tolist(), strict=True)
        ]
