"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from collections import deque


class Direction(enum.Enum):
    """Cardinal movement directions with (col_delta, row_delta) values.

    Rows grow downward, so ``UP`` decreases the row index.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        return OPPOSITES[self]


# Pairs that would cause an instant 180° reversal.
OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake represented as an ordered deque of (col, row) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``.
    """

    def __init__(
        self,
        head_col: int,
        head_row: int,
        direction: Direction = Direction.UP,
        length: int = 3,
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        dc, dr = direction.value
        self.body: deque[tuple[int, int]] = deque()
        for i in range(length):
            self.body.append((head_col - dc * i, head_row - dr * i))
        self.direction = direction

    @property
    def head(self) -> tuple[int, int]:
        """Return the head coordinate."""
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def is_reversal(self, new_direction: Direction) -> bool:
        """Whether *new_direction* points straight back into the neck."""
        return OPPOSITES[new_direction] == self.direction

    def next_head(self) -> tuple[int, int]:
        """Compute the next head position without moving."""
        dc, dr = self.direction.value
        c, r = self.head
        return c + dc, r + dr

    def advance(self, grow: bool = False) -> tuple[int, int] | None:
        """Move the snake one step forward.

        Returns the vacated tail cell, or ``None`` if the snake grew.
        """
        self.body.appendleft(self.next_head())
        if grow:
            return None
        return self.body.pop()

    def hits_body(self, cell: tuple[int, int], tail_vacates: bool = False) -> bool:
        """Check whether *cell* collides with the body behind the head.

        With *tail_vacates* the current tail is ignored, since it moves
        away on a non-growing step.
        """
        segments = list(self.body)[1:]
        if tail_vacates and segments:
            segments.pop()
        return cell in segments
