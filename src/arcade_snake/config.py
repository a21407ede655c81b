"""Gameplay tuning: scoring, level and speed curves, food odds."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FoodConfig:
    """Spawn odds and point values for each food kind.

    A uniform draw below ``speed_chance`` yields speed food, below
    ``bonus_chance`` bonus food, and anything else normal food.
    """

    speed_chance: float = 0.03
    bonus_chance: float = 0.10
    normal_points: int = 10
    bonus_points: int = 25
    speed_points: int = 5

    def __post_init__(self) -> None:
        if not 0.0 <= self.speed_chance <= self.bonus_chance <= 1.0:
            raise ValueError(
                "Food chances must satisfy 0 <= speed_chance <= bonus_chance <= 1."
            )
        if min(self.normal_points, self.bonus_points, self.speed_points) < 0:
            raise ValueError("Food points must be non-negative.")


@dataclass(frozen=True)
class GameConfig:
    """Timing and progression settings for a single-player game.

    Defaults reproduce the classic arcade tuning. Supports JSON
    serialization so a tuned ruleset can be shipped alongside a build.
    """

    # Tick interval
    initial_speed_ms: int = 200
    speed_increase_ms: int = 10
    min_speed_ms: int = 50
    speed_boost_ms: int = 30
    boosted_floor_ms: int = 30

    # Progression
    level_threshold: int = 50

    # Timers owned by the session
    clock_interval_ms: int = 1000
    particle_lifetime_ms: int = 500

    food: FoodConfig = field(default_factory=FoodConfig)

    def __post_init__(self) -> None:
        if self.level_threshold < 1:
            raise ValueError("level_threshold must be at least 1.")
        if self.speed_increase_ms < 0 or self.speed_boost_ms < 0:
            raise ValueError("Speed steps must be non-negative.")
        if not 0 < self.boosted_floor_ms <= self.min_speed_ms <= self.initial_speed_ms:
            raise ValueError(
                "Speeds must satisfy 0 < boosted_floor_ms <= min_speed_ms "
                "<= initial_speed_ms."
            )
        if self.clock_interval_ms < 1 or self.particle_lifetime_ms < 1:
            raise ValueError("Timer intervals must be positive.")

    def level_for(self, score: int) -> int:
        """Return the level reached at *score* (levels start at 1)."""
        return score // self.level_threshold + 1

    def tick_interval_for(self, level: int, boosted: bool = False) -> int:
        """Return the tick interval in milliseconds for *level*.

        The level curve bottoms out at ``min_speed_ms``; a speed boost is
        subtracted afterwards and bottoms out at ``boosted_floor_ms``.
        """
        base = max(
            self.min_speed_ms,
            self.initial_speed_ms - (level - 1) * self.speed_increase_ms,
        )
        boost = self.speed_boost_ms if boosted else 0
        return max(self.boosted_floor_ms, base - boost)

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        food_data = raw.pop("food", {})
        raw["food"] = FoodConfig(**food_data)
        return cls(**raw)
