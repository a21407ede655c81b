"""High score persistence collaborators."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

HIGH_SCORE_KEY = "snake-high-score"


class HighScoreStore(Protocol):
    """Opaque cell holding the best score across runs."""

    def get_high_score(self) -> int: ...

    def set_high_score(self, score: int) -> None: ...


class InMemoryHighScoreStore:
    """Process-local store, used by default and in tests."""

    def __init__(self, initial: int = 0) -> None:
        self._score = initial

    def get_high_score(self) -> int:
        return self._score

    def set_high_score(self, score: int) -> None:
        self._score = score


class JsonHighScoreStore:
    """Stores high scores in a JSON object file, one integer per key.

    A missing or unreadable file counts as a high score of 0. Writing
    keeps any other keys already present in the file.
    """

    def __init__(self, path: str | Path, key: str = HIGH_SCORE_KEY) -> None:
        self._path = Path(path)
        self.key = key

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            raw = json.loads(self._path.read_text())
        except (OSError, ValueError):
            logger.warning("Ignoring unreadable high score file %s.", self._path)
            return {}
        if not isinstance(raw, dict):
            logger.warning("Ignoring malformed high score file %s.", self._path)
            return {}
        return raw

    def get_high_score(self) -> int:
        value = self._read().get(self.key, 0)
        if isinstance(value, bool) or not isinstance(value, int):
            logger.warning(
                "Ignoring non-integer high score %r in %s.", value, self._path,
            )
            return 0
        return value

    def set_high_score(self, score: int) -> None:
        data = self._read()
        data[self.key] = int(score)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data, indent=2))
        logger.info("High score %d saved to %s.", score, self._path)
