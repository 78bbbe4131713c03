"""Snek — grid snake rule engine."""

from snek.arena import Arena
from snek.config import ConfigError, GameConfig
from snek.food import FoodSpawner
from snek.game import Game, GameOver, Key, Running
from snek.render import (
    AsciiCanvas,
    Canvas,
    DrawCommand,
    DrawRole,
    RecordingCanvas,
)
from snek.snake import Coordinate, Direction, Snake

__all__ = [
    "Arena",
    "AsciiCanvas",
    "Canvas",
    "ConfigError",
    "Coordinate",
    "Direction",
    "DrawCommand",
    "DrawRole",
    "FoodSpawner",
    "Game",
    "GameConfig",
    "GameOver",
    "Key",
    "RecordingCanvas",
    "Running",
    "Snake",
]
