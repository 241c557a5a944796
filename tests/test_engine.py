"""Tests for the GameEngine module."""

import json

import pytest

from classic_snake.config import GameConfig
from classic_snake.difficulty import DifficultyLevel
from classic_snake.engine import GameEngine
from classic_snake.grid import CellType
from classic_snake.snake import Direction, Snake
from classic_snake.snapshot import GameStatus


def _engine(cols: int = 10, rows: int = 10, seed: int = 0, **kwargs) -> GameEngine:
    engine = GameEngine(GameConfig(cols=cols, rows=rows, **kwargs), seed=seed)
    engine.start(DifficultyLevel.NORMAL)
    return engine


def _put_snake(engine: GameEngine, snake: Snake) -> None:
    """Replace the snake and repaint the grid to match."""
    engine.grid.clear()
    engine.snake = snake
    for c, r in snake.body:
        engine.grid.set(c, r, CellType.SNAKE)
    engine.food_spawner.position = None


class TestEngineInit:
    def test_starts_in_menu(self):
        engine = GameEngine(seed=0)
        assert engine.status == GameStatus.MENU
        assert engine.snake is None
        assert engine.food is None
        assert engine.score == 0
        assert engine.snake_body == []

    def test_tick_in_menu_is_noop(self):
        engine = GameEngine(seed=0)
        state = engine.tick()
        assert state["status"] == "menu"
        assert engine.ticks == 0


class TestEngineStart:
    def test_snake_spawns_centered_vertical(self):
        engine = _engine()
        assert engine.snake_body == [(5, 5), (5, 6), (5, 7)]
        assert engine.direction == Direction.UP
        assert engine.status == GameStatus.PLAYING
        assert not engine.paused

    def test_food_placed_on_start(self):
        engine = _engine()
        assert engine.food is not None
        assert engine.food not in engine.snake_body
        assert engine.food != (5, 4)

    def test_grid_painted(self):
        engine = _engine()
        for c, r in engine.snake_body:
            assert engine.grid.get(c, r) == CellType.SNAKE
        assert engine.grid.get(*engine.food) == CellType.FOOD

    def test_difficulty_recorded(self):
        engine = GameEngine(GameConfig(cols=10, rows=10), seed=0)
        engine.start(DifficultyLevel.HARD)
        assert engine.difficulty is DifficultyLevel.HARD
        assert engine.tick_interval_ms == 45

    def test_restart_reuses_previous_difficulty(self):
        engine = GameEngine(GameConfig(cols=10, rows=10), seed=0)
        engine.start(DifficultyLevel.EASY)
        engine.start()
        assert engine.difficulty is DifficultyLevel.EASY

    def test_first_start_without_level_uses_normal(self):
        engine = GameEngine(GameConfig(cols=10, rows=10), seed=0)
        engine.start()
        assert engine.difficulty is DifficultyLevel.NORMAL

    def test_rejects_non_level(self):
        engine = GameEngine(seed=0)
        with pytest.raises(TypeError):
            engine.start(75)
        assert engine.status == GameStatus.MENU

    @pytest.mark.parametrize("setup", ["menu", "playing", "paused", "game_over"])
    def test_start_resets_from_any_status(self, setup):
        engine = _engine()
        engine.score = 40
        engine.ticks = 12
        engine.submit_direction(Direction.LEFT)
        if setup == "menu":
            engine.to_menu()
        elif setup == "paused":
            engine.toggle_pause()
        elif setup == "game_over":
            engine._game_over("wall")

        engine.start(DifficultyLevel.NORMAL)
        assert engine.status == GameStatus.PLAYING
        assert engine.score == 0
        assert engine.ticks == 0
        assert engine.message == ""
        assert engine.pending_direction is None
        assert engine.snake_body == [(5, 5), (5, 6), (5, 7)]


class TestSubmitDirection:
    def test_applied_on_next_tick_only(self):
        engine = _engine()
        assert engine.submit_direction(Direction.LEFT)
        assert engine.direction == Direction.UP
        assert engine.pending_direction == Direction.LEFT
        engine.tick()
        assert engine.direction == Direction.LEFT
        assert engine.pending_direction is None
        assert engine.snake.head == (4, 5)

    def test_reversal_ignored(self):
        engine = _engine()
        assert not engine.submit_direction(Direction.DOWN)
        assert engine.pending_direction is None

    def test_reversal_leaves_pending_unchanged(self):
        engine = _engine()
        engine.submit_direction(Direction.LEFT)
        assert not engine.submit_direction(Direction.DOWN)
        assert engine.pending_direction == Direction.LEFT

    def test_last_write_wins(self):
        engine = _engine()
        engine.submit_direction(Direction.LEFT)
        engine.submit_direction(Direction.RIGHT)
        engine.tick()
        assert engine.direction == Direction.RIGHT
        assert engine.snake.head == (6, 5)

    def test_reversal_checked_against_applied_direction(self):
        engine = _engine()
        engine.submit_direction(Direction.LEFT)
        engine.tick()
        # Now heading LEFT; RIGHT is a reversal, UP is not.
        assert not engine.submit_direction(Direction.RIGHT)
        assert engine.submit_direction(Direction.UP)

    def test_ignored_while_paused(self):
        engine = _engine()
        engine.toggle_pause()
        assert not engine.submit_direction(Direction.LEFT)
        assert engine.pending_direction is None

    def test_ignored_when_not_playing(self):
        engine = GameEngine(seed=0)
        assert not engine.submit_direction(Direction.LEFT)

    def test_rejects_non_direction(self):
        engine = _engine()
        with pytest.raises(TypeError):
            engine.submit_direction("LEFT")
        assert engine.pending_direction is None


class TestEngineMovement:
    def test_basic_tick_keeps_length(self):
        engine = _engine()
        engine.food_spawner.place_at(1, 1)
        state = engine.tick()
        assert engine.snake_body == [(5, 4), (5, 5), (5, 6)]
        assert state["ticks"] == 1
        assert engine.grid.get(5, 7) == CellType.EMPTY
        assert engine.grid.get(5, 4) == CellType.SNAKE

    def test_length_constant_without_food(self):
        engine = _engine(cols=20, rows=20)
        engine.food_spawner.place_at(1, 1)
        engine.submit_direction(Direction.RIGHT)
        for _ in range(5):
            engine.tick()
            assert len(engine.snake) == 3

    def test_segments_stay_in_bounds_while_playing(self):
        engine = _engine()
        for _ in range(50):
            engine.tick()
            if engine.status != GameStatus.PLAYING:
                break
            assert all(engine.grid.in_bounds(c, r) for c, r in engine.snake_body)


class TestFoodConsumption:
    def test_eat_food_scenario(self):
        engine = _engine()
        engine.food_spawner.place_at(5, 4)
        engine.tick()
        assert engine.score == 10
        assert len(engine.snake) == 4
        assert engine.snake_body == [(5, 4), (5, 5), (5, 6), (5, 7)]

    def test_new_food_placed_after_eating(self):
        engine = _engine()
        engine.food_spawner.place_at(5, 4)
        engine.tick()
        assert engine.food is not None
        assert engine.food not in engine.snake_body
        assert engine.food != engine.snake.next_head()
        assert engine.grid.get(*engine.food) == CellType.FOOD

    def test_grid_head_remains_snake_after_eating(self):
        engine = _engine()
        engine.food_spawner.place_at(5, 4)
        engine.tick()
        assert engine.grid.get(5, 4) == CellType.SNAKE

    def test_score_per_food_configurable(self):
        engine = _engine(score_per_food=3)
        engine.food_spawner.place_at(5, 4)
        engine.tick()
        assert engine.score == 3


class TestWallCollision:
    def test_wall_scenario(self):
        engine = _engine()
        _put_snake(engine, Snake(0, 3, Direction.LEFT))
        before = engine.snake_body
        engine.tick()
        assert engine.status == GameStatus.GAME_OVER
        assert engine.snake_body == before

    def test_dies_heading_up(self):
        engine = _engine()
        engine.food_spawner.place_at(1, 1)
        for _ in range(20):
            engine.tick()
            if engine.status == GameStatus.GAME_OVER:
                break
        assert engine.status == GameStatus.GAME_OVER
        assert engine.snake.head == (5, 0)
        assert engine.ticks == 5

    def test_game_over_message_and_frozen_state(self):
        engine = _engine()
        engine.score = 30
        _put_snake(engine, Snake(0, 3, Direction.LEFT))
        engine.food_spawner.place_at(4, 4)
        engine.tick()
        assert engine.message == "Game Over! Score: 30"
        assert not engine.paused
        frozen = engine.get_state()
        engine.tick()
        assert engine.get_state() == frozen
        assert not engine.submit_direction(Direction.UP)


class TestSelfCollision:
    @staticmethod
    def _coiled(engine: GameEngine) -> None:
        # Head at (3,3) moving LEFT with the tail sitting at (2,3).
        snake = Snake(3, 3, Direction.LEFT, length=1)
        snake.body.extend([(3, 4), (2, 4), (2, 3)])
        _put_snake(engine, snake)

    def test_moving_into_tail_is_collision_by_default(self):
        engine = _engine()
        self._coiled(engine)
        before = engine.snake_body
        engine.tick()
        assert engine.status == GameStatus.GAME_OVER
        assert engine.snake_body == before

    def test_tail_vacates_option(self):
        engine = _engine(tail_vacates=True)
        self._coiled(engine)
        engine.tick()
        assert engine.status == GameStatus.PLAYING
        assert engine.snake_body == [(2, 3), (3, 3), (3, 4), (2, 4)]
        assert engine.grid.get(2, 3) == CellType.SNAKE

    def test_tail_vacates_still_collides_when_growing(self):
        engine = _engine(tail_vacates=True)
        self._coiled(engine)
        engine.food_spawner.position = (2, 3)
        engine.tick()
        assert engine.status == GameStatus.GAME_OVER

    def test_dies_on_body(self):
        engine = _engine(cols=20, rows=20)
        snake = Snake(5, 5, Direction.UP, length=5)
        _put_snake(engine, snake)
        engine.food_spawner.place_at(1, 1)
        engine.submit_direction(Direction.RIGHT)
        engine.tick()
        engine.submit_direction(Direction.DOWN)
        engine.tick()
        engine.submit_direction(Direction.LEFT)
        engine.tick()
        assert engine.status == GameStatus.GAME_OVER


class TestPauseResume:
    def test_toggle_twice_is_identity(self):
        engine = _engine()
        assert engine.toggle_pause() is True
        assert engine.status == GameStatus.PAUSED
        assert engine.toggle_pause() is False
        assert engine.status == GameStatus.PLAYING

    def test_tick_while_paused_changes_nothing(self):
        engine = _engine()
        engine.toggle_pause()
        before = engine.get_state()
        for _ in range(3):
            engine.tick()
        assert engine.get_state() == before

    def test_resume(self):
        engine = _engine()
        engine.toggle_pause()
        engine.resume()
        assert engine.status == GameStatus.PLAYING
        engine.resume()
        assert engine.status == GameStatus.PLAYING

    def test_pause_ignored_outside_play(self):
        engine = GameEngine(seed=0)
        assert engine.toggle_pause() is False
        assert engine.status == GameStatus.MENU

        engine = _engine()
        _put_snake(engine, Snake(0, 3, Direction.LEFT))
        engine.tick()
        engine.toggle_pause()
        assert engine.status == GameStatus.GAME_OVER


class TestAbort:
    @pytest.mark.parametrize("pause_first", [False, True])
    def test_abort_ends_session(self, pause_first):
        engine = _engine()
        engine.score = 20
        engine.submit_direction(Direction.LEFT)
        if pause_first:
            engine.toggle_pause()
        before = engine.snake_body
        engine.abort("clock error")
        assert engine.status == GameStatus.GAME_OVER
        assert engine.message == "Game stopped: clock error. Score: 20"
        assert engine.pending_direction is None
        assert engine.snake_body == before

    def test_abort_ignored_outside_session(self):
        engine = GameEngine(seed=0)
        engine.abort("clock error")
        assert engine.status == GameStatus.MENU
        assert engine.message == ""


class TestToMenu:
    @pytest.mark.parametrize("pause_first", [False, True])
    def test_to_menu_keeps_last_score(self, pause_first):
        engine = _engine()
        engine.score = 20
        if pause_first:
            engine.toggle_pause()
        engine.to_menu()
        assert engine.status == GameStatus.MENU
        assert engine.score == 20
        engine.tick()
        assert engine.score == 20

    def test_to_menu_drops_pending_intent(self):
        engine = _engine()
        engine.submit_direction(Direction.LEFT)
        engine.to_menu()
        assert engine.pending_direction is None


class TestEngineSnapshot:
    def test_state_is_json_serializable(self):
        engine = _engine()
        engine.tick()
        serialized = json.dumps(engine.get_state())
        assert isinstance(serialized, str)

    def test_snapshot_fields(self):
        engine = _engine()
        engine.food_spawner.place_at(2, 2)
        snap = engine.snapshot()
        assert snap.status == GameStatus.PLAYING
        assert snap.paused is False
        assert snap.difficulty == "NORMAL"
        assert snap.tick_interval_ms == 75
        assert (snap.cols, snap.rows) == (10, 10)
        assert snap.snake == [(5, 5), (5, 6), (5, 7)]
        assert snap.head == (5, 5)
        assert snap.food == (2, 2)
        assert snap.direction == "UP"

    def test_state_structure(self):
        state = _engine().get_state()
        for key in (
            "status", "paused", "snake", "food", "direction",
            "score", "ticks", "message",
        ):
            assert key in state
        assert state["status"] == "playing"


class TestEngineDeterminism:
    def test_same_seed_same_outcome(self):
        actions = [
            Direction.RIGHT, Direction.RIGHT, Direction.UP,
            Direction.UP, Direction.LEFT,
        ]
        assert self._run(123, actions) == self._run(123, actions)

    def test_seed_from_config(self):
        a = GameEngine(GameConfig(seed=9))
        b = GameEngine(GameConfig(seed=9))
        a.start()
        b.start()
        assert a.food == b.food

    @staticmethod
    def _run(seed: int, actions: list[Direction]) -> dict:
        engine = GameEngine(GameConfig(cols=20, rows=20), seed=seed)
        engine.start()
        for action in actions:
            engine.submit_direction(action)
            engine.tick()
        return engine.get_state()
