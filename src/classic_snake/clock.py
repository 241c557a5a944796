"""Async periodic driver that ticks a game engine at its difficulty's rate."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable

from classic_snake.difficulty import DifficultyLevel
from classic_snake.engine import GameEngine
from classic_snake.snake import Direction
from classic_snake.snapshot import GameSnapshot, GameStatus

logger = logging.getLogger(__name__)

TickCallback = Callable[[GameSnapshot], Awaitable[None] | None]


class ClockDriver:
    """Runs the engine's tick loop on the current event loop.

    Every engine call made through the driver is serialized by one lock,
    so a tick always runs to completion before an intent or pause is
    observed. The timer runs only while the engine is playing and is
    restarted whenever the (status, paused, tick interval) triple changes.
    """

    def __init__(
        self,
        engine: GameEngine | None = None,
        on_tick: TickCallback | None = None,
    ) -> None:
        self.engine = engine if engine is not None else GameEngine()
        self._on_tick = on_tick
        self._lock = asyncio.Lock()
        self._task: asyncio.Task | None = None
        self._signals: tuple | None = None

    @property
    def running(self) -> bool:
        """Whether the periodic tick task is alive."""
        return self._task is not None and not self._task.done()

    async def start(
        self, difficulty: DifficultyLevel | None = None,
    ) -> GameSnapshot:
        async with self._lock:
            self.engine.start(difficulty)
            self._sync(force=True)
            return self.engine.snapshot()

    async def submit_direction(self, direction: Direction) -> bool:
        async with self._lock:
            return self.engine.submit_direction(direction)

    async def toggle_pause(self) -> GameSnapshot:
        async with self._lock:
            self.engine.toggle_pause()
            self._sync()
            return self.engine.snapshot()

    async def resume(self) -> GameSnapshot:
        async with self._lock:
            self.engine.resume()
            self._sync()
            return self.engine.snapshot()

    async def to_menu(self) -> GameSnapshot:
        async with self._lock:
            self.engine.to_menu()
            self._sync()
            return self.engine.snapshot()

    async def snapshot(self) -> GameSnapshot:
        async with self._lock:
            return self.engine.snapshot()

    async def close(self) -> None:
        """Stop the tick loop and wait for it to finish."""
        task = self._task
        self._cancel()
        if task is not None:
            await asyncio.gather(task, return_exceptions=True)
        logger.info("Clock driver closed.")

    def _current_signals(self) -> tuple:
        return (
            self.engine.status,
            self.engine.paused,
            self.engine.tick_interval_ms,
        )

    def _sync(self, force: bool = False) -> None:
        """Start, stop, or restart the timer to match engine state."""
        signals = self._current_signals()
        if not force and signals == self._signals and (
            self.running == (self.engine.status == GameStatus.PLAYING)
        ):
            return

        self._cancel()
        self._signals = signals
        if self.engine.status == GameStatus.PLAYING:
            interval = self.engine.difficulty.interval_seconds
            self._task = asyncio.create_task(self._tick_loop(interval))
            logger.info("Clock started at %.0f ms/tick.", interval * 1000)

    def _cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def _tick_loop(self, interval: float) -> None:
        """Tick every *interval* seconds until the game stops playing."""
        try:
            while self.engine.status == GameStatus.PLAYING:
                await asyncio.sleep(interval)
                async with self._lock:
                    if self.engine.status != GameStatus.PLAYING:
                        break
                    self.engine.tick()
                    snapshot = self.engine.snapshot()
                await self._notify(snapshot)
        except asyncio.CancelledError:
            logger.info("Tick loop cancelled.")
        except Exception:
            logger.exception("Tick loop error.")
            self.engine.abort("clock error")
        else:
            logger.info("Clock stopped (status=%s).", self.engine.status.value)

    async def _notify(self, snapshot: GameSnapshot) -> None:
        if self._on_tick is None:
            return
        result = self._on_tick(snapshot)
        if inspect.isawaitable(result):
            await result
