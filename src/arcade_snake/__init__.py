"""Arcade Snake: single-player game core."""

from arcade_snake.config import FoodConfig, GameConfig
from arcade_snake.engine import GameEngine
from arcade_snake.events import EventBus, FoodEaten, GameOver, LevelUp
from arcade_snake.food import Food, FoodKind, generate_food
from arcade_snake.grid import GRID_SIZE, Grid
from arcade_snake.highscore import InMemoryHighScoreStore, JsonHighScoreStore
from arcade_snake.scheduler import AsyncioScheduler, ManualScheduler
from arcade_snake.session import GameSession
from arcade_snake.snake import Direction
from arcade_snake.state import GamePhase, GameState, GameStats

__all__ = [
    "GRID_SIZE",
    "AsyncioScheduler",
    "Direction",
    "EventBus",
    "Food",
    "FoodConfig",
    "FoodEaten",
    "FoodKind",
    "GameConfig",
    "GameEngine",
    "GameOver",
    "GamePhase",
    "GameSession",
    "GameState",
    "GameStats",
    "Grid",
    "InMemoryHighScoreStore",
    "JsonHighScoreStore",
    "LevelUp",
    "ManualScheduler",
    "generate_food",
]
