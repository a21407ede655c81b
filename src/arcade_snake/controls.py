"""Input adapter mapping keys and direction names to session commands."""

from __future__ import annotations

import logging

from arcade_snake.session import GameSession
from arcade_snake.snake import Direction

logger = logging.getLogger(__name__)

PAUSE = "pause"

KEY_BINDINGS: dict[str, Direction | str] = {
    "ArrowUp": Direction.UP,
    "ArrowDown": Direction.DOWN,
    "ArrowLeft": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
    " ": PAUSE,
}

_DIRECTION_MAP: dict[str, Direction] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


def parse_direction(name: object) -> Direction | None:
    """Map a direction name such as ``"Up"`` to a :class:`Direction`."""
    if not isinstance(name, str):
        return None
    return _DIRECTION_MAP.get(name.strip().lower())


def handle_key(session: GameSession, key: str) -> bool:
    """Apply the command bound to *key*. Returns False for unbound keys."""
    action = KEY_BINDINGS.get(key)
    if action is None:
        return False
    if action == PAUSE:
        session.toggle_pause()
    else:
        session.set_direction(action)
    logger.debug("Key %r -> %s.", key, action)
    return True
