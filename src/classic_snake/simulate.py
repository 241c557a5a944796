"""Headless session runner for smoke testing and throughput checks."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np

from classic_snake.config import GameConfig
from classic_snake.difficulty import DEFAULT_DIFFICULTY, DifficultyLevel
from classic_snake.engine import GameEngine
from classic_snake.snake import Direction
from classic_snake.snapshot import GameStatus

logger = logging.getLogger(__name__)

_ALL_DIRECTIONS = list(Direction)


@dataclass
class SimulationResult:
    """Outcome of one headless session."""

    difficulty: str
    score: int
    ticks: int
    length: int
    food_eaten: int
    game_over: bool
    message: str
    wall_time_seconds: float

    def summary(self) -> str:
        outcome = self.message if self.game_over else "Stopped (tick limit)"
        return (
            f"Simulation [{self.difficulty}]: {outcome} | "
            f"score={self.score} food={self.food_eaten} "
            f"length={self.length} ticks={self.ticks} "
            f"in {self.wall_time_seconds:.3f}s"
        )


def _choose_intent(
    engine: GameEngine, rng: np.random.Generator, turn_prob: float,
) -> Direction | None:
    """Random policy that prefers moves which do not end the game."""
    snake = engine.snake
    options = [d for d in _ALL_DIRECTIONS if not snake.is_reversal(d)]
    head_c, head_r = snake.head
    safe = []
    for d in options:
        dc, dr = d.value
        cell = (head_c + dc, head_r + dr)
        if engine.grid.in_bounds(*cell) and not snake.hits_body(cell):
            safe.append(d)

    if not safe:
        return None
    if snake.direction in safe and rng.random() >= turn_prob:
        return None
    return safe[int(rng.integers(len(safe)))]


def run_headless(
    config: GameConfig | None = None,
    difficulty: DifficultyLevel = DEFAULT_DIFFICULTY,
    *,
    seed: int | None = None,
    max_ticks: int = 1_000,
    turn_prob: float = 0.2,
) -> SimulationResult:
    """Play one session with random intents until game over or *max_ticks*.

    Ticks are issued back to back; the difficulty only labels the run.
    """
    if max_ticks < 1:
        raise ValueError("max_ticks must be at least 1.")
    engine_seq, policy_seq = np.random.SeedSequence(seed).spawn(2)
    engine = GameEngine(config, seed=engine_seq)
    rng = np.random.default_rng(policy_seq)
    engine.start(difficulty)

    start = time.perf_counter()
    while engine.status == GameStatus.PLAYING and engine.ticks < max_ticks:
        intent = _choose_intent(engine, rng, turn_prob)
        if intent is not None:
            engine.submit_direction(intent)
        engine.tick()
    elapsed = time.perf_counter() - start

    result = SimulationResult(
        difficulty=difficulty.label,
        score=engine.score,
        ticks=engine.ticks,
        length=len(engine.snake),
        food_eaten=engine.score // engine.config.score_per_food,
        game_over=engine.status == GameStatus.GAME_OVER,
        message=engine.message,
        wall_time_seconds=elapsed,
    )
    logger.info(result.summary())
    return result
