"""Classic Snake: single-player game engine."""

from classic_snake.clock import ClockDriver
from classic_snake.config import GameConfig
from classic_snake.difficulty import DifficultyLevel
from classic_snake.engine import GameEngine
from classic_snake.grid import Grid
from classic_snake.snake import Direction, Snake
from classic_snake.snapshot import GameSnapshot, GameStatus

__all__ = [
    "ClockDriver",
    "DifficultyLevel",
    "Direction",
    "GameConfig",
    "GameEngine",
    "GameSnapshot",
    "GameStatus",
    "Grid",
    "Snake",
]
