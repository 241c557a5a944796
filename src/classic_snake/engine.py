"""Tick-based game engine composing grid, snake, and food logic."""

from __future__ import annotations

import logging

import numpy as np

from classic_snake.config import GameConfig
from classic_snake.difficulty import DEFAULT_DIFFICULTY, DifficultyLevel
from classic_snake.food import FoodSpawner
from classic_snake.grid import CellType, Grid
from classic_snake.snake import Direction, Snake
from classic_snake.snapshot import GameSnapshot, GameStatus

logger = logging.getLogger(__name__)


class GameEngine:
    """Single-player snake state machine.

    The engine owns the grid, snake, food, score and lifecycle status. It
    has no timer: an external driver calls :meth:`tick` once per period of
    the current difficulty, and input handlers call
    :meth:`submit_direction` at any time in between. Presentation code
    reads state back through :meth:`snapshot` or :meth:`get_state`.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        seed: int | np.random.SeedSequence | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.grid = Grid(cols=self.config.cols, rows=self.config.rows)
        self.rng = np.random.default_rng(
            seed if seed is not None else self.config.seed,
        )
        self.food_spawner = FoodSpawner(
            self.grid,
            rng=self.rng,
            max_retries=self.config.max_food_retries,
        )

        self.snake: Snake | None = None
        self.difficulty: DifficultyLevel | None = None
        self.status = GameStatus.MENU
        self.score = 0
        self.ticks = 0
        self.message = ""
        self._pending_direction: Direction | None = None

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    @property
    def cols(self) -> int:
        return self.grid.cols

    @property
    def rows(self) -> int:
        return self.grid.rows

    @property
    def paused(self) -> bool:
        return self.status == GameStatus.PAUSED

    @property
    def direction(self) -> Direction:
        """Direction applied on the last tick (UP before the first game)."""
        return self.snake.direction if self.snake is not None else Direction.UP

    @property
    def pending_direction(self) -> Direction | None:
        """Intent that the next tick will apply, if any."""
        return self._pending_direction

    @property
    def snake_body(self) -> list[tuple[int, int]]:
        return list(self.snake.body) if self.snake is not None else []

    @property
    def food(self) -> tuple[int, int] | None:
        return self.food_spawner.position

    @property
    def tick_interval_ms(self) -> int | None:
        return self.difficulty.interval_ms if self.difficulty else None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self, difficulty: DifficultyLevel | None = None) -> dict:
        """Begin a fresh session, discarding all previous game state.

        Without *difficulty* the previous session's level is reused, or
        the default level if there was none.
        """
        if difficulty is None:
            difficulty = self.difficulty or DEFAULT_DIFFICULTY
        if not isinstance(difficulty, DifficultyLevel):
            raise TypeError(
                f"difficulty must be a DifficultyLevel, got {difficulty!r}."
            )

        self.difficulty = difficulty
        self.grid.clear()
        self.food_spawner.position = None

        self.snake = Snake(
            self.cols // 2,
            self.rows // 2,
            Direction.UP,
            length=self.config.initial_length,
        )
        for c, r in self.snake.body:
            self.grid.set(c, r, CellType.SNAKE)
        self.food_spawner.place(self.snake)

        self.score = 0
        self.ticks = 0
        self.message = ""
        self._pending_direction = None
        self.status = GameStatus.PLAYING
        logger.info(
            "Game started on %d×%d board at %s (%d ms/tick).",
            self.cols, self.rows, difficulty.label, difficulty.interval_ms,
        )
        return self.get_state()

    def toggle_pause(self) -> bool:
        """Flip between playing and paused. Returns the new paused flag."""
        if self.status == GameStatus.PLAYING:
            self.status = GameStatus.PAUSED
        elif self.status == GameStatus.PAUSED:
            self.status = GameStatus.PLAYING
        else:
            return False
        logger.debug("Paused: %s", self.paused)
        return self.paused

    def resume(self) -> None:
        """Leave the paused state; no effect in any other state."""
        if self.status == GameStatus.PAUSED:
            self.status = GameStatus.PLAYING
            logger.debug("Resumed.")

    def to_menu(self) -> None:
        """Return to the menu.

        The last board and score stay readable so the menu can show them
        until the next :meth:`start`.
        """
        self._pending_direction = None
        self.status = GameStatus.MENU

    # ------------------------------------------------------------------
    # Input and simulation
    # ------------------------------------------------------------------

    def submit_direction(self, direction: Direction) -> bool:
        """Record a direction intent for the next tick.

        Intents are coalesced: the last accepted one before a tick wins.
        Returns ``False`` when the intent is ignored because the game is
        not running or *direction* would reverse the snake.
        """
        if not isinstance(direction, Direction):
            raise TypeError(
                f"direction must be a Direction, got {direction!r}."
            )
        if self.status != GameStatus.PLAYING or self.snake is None:
            return False
        if self.snake.is_reversal(direction):
            return False
        self._pending_direction = direction
        return True

    def tick(self) -> dict:
        """Advance the game by one cell.

        Does nothing unless the game is playing. Returns the full game
        state as a serializable dict.
        """
        if self.status != GameStatus.PLAYING or self.snake is None:
            return self.get_state()

        if self._pending_direction is not None:
            self.snake.direction = self._pending_direction
            self._pending_direction = None

        next_c, next_r = self.snake.next_head()

        # --- boundary check ---
        if not self.grid.in_bounds(next_c, next_r):
            self._game_over("wall")
            return self.get_state()

        # --- self-collision check ---
        will_grow = self.food_spawner.is_at(next_c, next_r)
        tail_vacates = self.config.tail_vacates and not will_grow
        if self.snake.hits_body((next_c, next_r), tail_vacates=tail_vacates):
            self._game_over("self")
            return self.get_state()

        # --- move ---
        vacated = self.snake.advance(grow=will_grow)
        if vacated is not None:
            self.grid.set(vacated[0], vacated[1], CellType.EMPTY)
        self.grid.set(next_c, next_r, CellType.SNAKE)

        if will_grow:
            self.score += self.config.score_per_food
            self.food_spawner.place(self.snake)

        self.ticks += 1
        return self.get_state()

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def snapshot(self) -> GameSnapshot:
        """Return an immutable view of the current state."""
        return GameSnapshot(
            status=self.status,
            paused=self.paused,
            difficulty=self.difficulty.name if self.difficulty else None,
            tick_interval_ms=self.tick_interval_ms,
            cols=self.cols,
            rows=self.rows,
            snake=self.snake_body,
            food=self.food,
            direction=self.direction.name,
            score=self.score,
            ticks=self.ticks,
            message=self.message,
        )

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return self.snapshot().model_dump(mode="json")

    def abort(self, reason: str) -> None:
        """End a running or paused session that cannot continue."""
        if self.status not in (GameStatus.PLAYING, GameStatus.PAUSED):
            return
        self._pending_direction = None
        self.status = GameStatus.GAME_OVER
        self.message = f"Game stopped: {reason}. Score: {self.score}"
        logger.warning(
            "Game aborted (%s) after %d ticks with score %d.",
            reason, self.ticks, self.score,
        )

    def _game_over(self, cause: str) -> None:
        """End the session, freezing the last valid board for display."""
        self._pending_direction = None
        self.status = GameStatus.GAME_OVER
        self.message = f"Game Over! Score: {self.score}"
        logger.info(
            "Game over (%s collision) after %d ticks with score %d.",
            cause, self.ticks, self.score,
        )
