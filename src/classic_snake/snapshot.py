"""Read-only view of engine state for presentation adapters."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field


class GameStatus(str, enum.Enum):
    """Lifecycle states for a game session."""

    MENU = "menu"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class GameSnapshot(BaseModel):
    """Immutable snapshot of everything an adapter needs to draw a frame."""

    model_config = ConfigDict(frozen=True)

    status: GameStatus
    paused: bool
    difficulty: str | None = None
    tick_interval_ms: int | None = None
    cols: int = Field(ge=1)
    rows: int = Field(ge=1)
    snake: list[tuple[int, int]] = Field(default_factory=list)
    food: tuple[int, int] | None = None
    direction: str
    score: int = Field(default=0, ge=0)
    ticks: int = Field(default=0, ge=0)
    message: str = ""

    @property
    def head(self) -> tuple[int, int] | None:
        return self.snake[0] if self.snake else None
