"""Tick-based game engine composing snake, food, and scoring rules."""

from __future__ import annotations

import logging
from dataclasses import replace

import numpy as np

from arcade_snake.config import GameConfig
from arcade_snake.events import EventBus, FoodEaten, GameOver, LevelUp
from arcade_snake.food import FoodKind, generate_food
from arcade_snake.grid import GRID_SIZE, Grid
from arcade_snake.highscore import HighScoreStore, InMemoryHighScoreStore
from arcade_snake.snake import Direction, advance, is_reversal, next_head
from arcade_snake.state import GamePhase, GameState, GameStats

logger = logging.getLogger(__name__)


class GameEngine:
    """Single-player snake state machine.

    The engine owns the current :class:`GameState` and replaces it on
    every transition. Each call to :meth:`tick` advances the game by one
    step. Operations invoked in the wrong phase are no-ops, so input and
    timer collaborators never need to guard their calls.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        high_scores: HighScoreStore | None = None,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config or GameConfig()
        self.grid = Grid(GRID_SIZE)
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.high_scores = (
            high_scores if high_scores is not None else InMemoryHighScoreStore()
        )
        self.events = EventBus()

        self._state = GameState(
            snake=(self.grid.center,),
            food=None,
            direction=Direction.RIGHT,
            phase=GamePhase.NOT_STARTED,
            score=0,
            level=1,
            tick_interval_ms=self.config.initial_speed_ms,
        )
        self._pending_direction: Direction | None = None
        self._stored_high_score = 0

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    @property
    def pending_direction(self) -> Direction | None:
        return self._pending_direction

    @property
    def high_score(self) -> int:
        """Best known score, including the current run."""
        return max(self._stored_high_score, self._state.score)

    def start(self) -> GameState:
        """Begin a fresh game, discarding any previous run."""
        snake = (self.grid.center,)
        self._stored_high_score = self.high_scores.get_high_score()
        self._pending_direction = None
        self._state = GameState(
            snake=snake,
            food=generate_food(snake, self.rng, self.config.food, self.grid),
            direction=Direction.RIGHT,
            phase=GamePhase.RUNNING,
            score=0,
            level=1,
            tick_interval_ms=self.config.initial_speed_ms,
            stats=GameStats(),
        )
        logger.info(
            "Game started (high score %d).", self._stored_high_score,
        )
        return self._state

    def restore(self, state: GameState) -> None:
        """Replace the current snapshot, e.g. to resume a saved game."""
        self._state = state
        self._pending_direction = None

    def set_direction(self, direction: Direction) -> None:
        """Buffer a direction change for the next tick.

        Later calls overwrite earlier ones. A direction pointing back along
        the committed heading, or along the one already buffered, is
        ignored.
        """
        if self._state.phase != GamePhase.RUNNING:
            return
        if is_reversal(self._state.direction, direction):
            return
        pending = self._pending_direction
        if pending is not None and is_reversal(pending, direction):
            return
        self._pending_direction = direction

    def toggle_pause(self) -> GamePhase:
        """Switch between running and paused; other phases are unaffected."""
        phase = self._state.phase
        if phase == GamePhase.RUNNING:
            self._state = replace(self._state, phase=GamePhase.PAUSED)
        elif phase == GamePhase.PAUSED:
            self._state = replace(self._state, phase=GamePhase.RUNNING)
        return self._state.phase

    def advance_clock(self, seconds: int = 1) -> None:
        """Add running time to the elapsed-seconds counter."""
        if self._state.phase != GamePhase.RUNNING:
            return
        stats = self._state.stats
        self._state = replace(
            self._state,
            stats=replace(stats, elapsed_seconds=stats.elapsed_seconds + seconds),
        )

    def tick(self) -> GameState:
        """Advance the game by one step and return the new snapshot."""
        prev = self._state
        if prev.phase != GamePhase.RUNNING:
            return prev

        direction = self._pending_direction or prev.direction
        self._pending_direction = None
        head = next_head(prev.head, direction)

        # --- boundary check ---
        if not self.grid.in_bounds(*head):
            return self._end_game(direction, "wall")

        # --- self-collision check ---
        # The tail still counts: it only moves away on ticks without growth.
        if head in prev.snake:
            return self._end_game(direction, "self")

        food = prev.food
        if food is None or head != food.position:
            self._state = replace(
                prev,
                snake=advance(prev.snake, head),
                direction=direction,
                stats=replace(prev.stats, current_streak=0),
            )
            return self._state

        # --- food consumption ---
        score = prev.score + food.points
        level = self.config.level_for(score)
        streak = prev.stats.current_streak + 1
        snake = advance(prev.snake, head, grow=True)
        new_food = generate_food(snake, self.rng, self.config.food, self.grid)

        self._state = replace(
            prev,
            snake=snake,
            food=new_food,
            direction=direction,
            score=score,
            level=level,
            tick_interval_ms=self.config.tick_interval_for(
                level, boosted=food.kind == FoodKind.SPEED,
            ),
            stats=replace(
                prev.stats,
                food_eaten=prev.stats.food_eaten + 1,
                current_streak=streak,
                best_streak=max(prev.stats.best_streak, streak),
            ),
        )

        self.events.emit(FoodEaten(position=head, kind=food.kind, points=food.points))
        if level > prev.level:
            logger.debug("Level up: %d -> %d.", prev.level, level)
            self.events.emit(LevelUp(level=level))
        if new_food is None:
            return self._end_game(direction, "board_full")
        return self._state

    def _end_game(self, direction: Direction, reason: str) -> GameState:
        """Freeze the run and record the high score if it was beaten."""
        state = replace(self._state, direction=direction, phase=GamePhase.GAME_OVER)
        self._state = state

        new_high_score = state.score > self._stored_high_score
        if new_high_score:
            self.high_scores.set_high_score(state.score)
            self._stored_high_score = state.score
            logger.info("New high score: %d.", state.score)

        logger.info(
            "Game over (%s) with score %d at level %d after %s.",
            reason, state.score, state.level, state.stats.elapsed_display,
        )
        self.events.emit(
            GameOver(
                score=state.score,
                level=state.level,
                elapsed_seconds=state.stats.elapsed_seconds,
                reason=reason,
                new_high_score=new_high_score,
            )
        )
        return state
