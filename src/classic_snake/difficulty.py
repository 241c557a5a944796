"""Difficulty levels mapped to tick periods."""

from __future__ import annotations

import enum


class DifficultyLevel(enum.Enum):
    """Difficulty levels; each value is the tick period in milliseconds."""

    EASY = 120
    NORMAL = 75
    HARD = 45

    @property
    def interval_ms(self) -> int:
        return self.value

    @property
    def interval_seconds(self) -> float:
        return self.value / 1000.0

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_name(cls, name: str) -> DifficultyLevel:
        """Look up a level by case-insensitive name."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            choices = ", ".join(level.name.lower() for level in cls)
            raise ValueError(
                f"Unknown difficulty {name!r}; expected one of: {choices}."
            ) from None


DEFAULT_DIFFICULTY = DifficultyLevel.NORMAL

ALL_LEVELS: list[DifficultyLevel] = list(DifficultyLevel)
