"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from classic_snake.grid import MIN_GRID_SIZE

logger = logging.getLogger(__name__)

CELL_SIZE = 20
HEADER_HEIGHT = 60
SCORE_PER_FOOD = 10


@dataclass(frozen=True)
class GameConfig:
    """Board and rule settings for a game engine.

    Supports JSON serialization for reproducibility.
    """

    cols: int = 20
    rows: int = 20
    score_per_food: int = SCORE_PER_FOOD
    initial_length: int = 3
    max_food_retries: int = 1_000

    # When False, moving into the current tail cell is a collision even
    # though the tail would vacate it on a non-growing step.
    tail_vacates: bool = False

    seed: int | None = None

    def __post_init__(self) -> None:
        if self.cols < MIN_GRID_SIZE or self.rows < MIN_GRID_SIZE:
            raise ValueError(
                f"Board must be at least {MIN_GRID_SIZE}×{MIN_GRID_SIZE} cells."
            )
        if self.score_per_food < 1:
            raise ValueError("score_per_food must be positive.")
        if not 1 <= self.initial_length <= self.rows - self.rows // 2:
            raise ValueError(
                "initial_length must fit between the board centre and the "
                "bottom edge."
            )
        if self.max_food_retries < 1:
            raise ValueError("max_food_retries must be at least 1.")

    @classmethod
    def from_board(
        cls,
        width_px: int,
        height_px: int,
        cell_size: int = CELL_SIZE,
        header_height: int = HEADER_HEIGHT,
        **overrides,
    ) -> GameConfig:
        """Derive the grid size from a board's pixel dimensions."""
        if cell_size < 1:
            raise ValueError("cell_size must be positive.")
        cols = width_px // cell_size
        rows = (height_px - header_height) // cell_size
        return cls(cols=cols, rows=rows, **overrides)

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
