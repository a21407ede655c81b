"""Transient notifications for sound and particle collaborators."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from arcade_snake.food import FoodKind
from arcade_snake.snake import Position

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FoodEaten:
    position: Position
    kind: FoodKind
    points: int


@dataclass(frozen=True)
class LevelUp:
    level: int


@dataclass(frozen=True)
class GameOver:
    """Final results of a run.

    ``reason`` is ``"wall"``, ``"self"`` or ``"board_full"``.
    """

    score: int
    level: int
    elapsed_seconds: int
    reason: str
    new_high_score: bool


GameEvent = FoodEaten | LevelUp | GameOver
Listener = Callable[[GameEvent], None]


class EventBus:
    """Fan-out of game events to registered listeners.

    Listeners are notifications only: a listener that raises is logged
    and skipped so the remaining listeners still receive the event.
    """

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, event: GameEvent) -> None:
        # Iterate over a snapshot so listeners may unsubscribe while handling.
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception(
                    "Listener %r failed on %s.", listener, type(event).__name__,
                )
