"""Immutable game snapshots read by rendering collaborators."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from arcade_snake.food import Food
from arcade_snake.snake import Direction, Position


class GamePhase(str, enum.Enum):
    """Lifecycle states for a game."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameStats:
    """Per-run counters shown alongside the score."""

    elapsed_seconds: int = 0
    food_eaten: int = 0
    current_streak: int = 0
    best_streak: int = 0

    @property
    def elapsed_display(self) -> str:
        """Elapsed time formatted as ``m:ss``."""
        minutes, seconds = divmod(self.elapsed_seconds, 60)
        return f"{minutes}:{seconds:02d}"

    def to_dict(self) -> dict:
        return {
            "elapsed_seconds": self.elapsed_seconds,
            "food_eaten": self.food_eaten,
            "current_streak": self.current_streak,
            "best_streak": self.best_streak,
        }


@dataclass(frozen=True)
class GameState:
    """A complete, read-only view of the game after a transition.

    The engine swaps in a new instance on every change, so a renderer
    holding a reference never observes a half-applied tick.
    """

    snake: tuple[Position, ...]
    food: Food | None
    direction: Direction
    phase: GamePhase
    score: int
    level: int
    tick_interval_ms: int
    stats: GameStats = field(default_factory=GameStats)

    @property
    def head(self) -> Position:
        return self.snake[0]

    def to_dict(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "phase": self.phase.value,
            "snake": [list(seg) for seg in self.snake],
            "food": self.food.to_dict() if self.food is not None else None,
            "direction": self.direction.name.lower(),
            "score": self.score,
            "level": self.level,
            "tick_interval_ms": self.tick_interval_ms,
            "stats": self.stats.to_dict(),
        }
