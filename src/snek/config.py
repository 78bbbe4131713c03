"""Game configuration: arena size, timing, and start layout."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

MOVING_PERIOD = 0.075  # Seconds between cadence steps.
RESTART_TIME = 1.0  # Seconds spent game-over before a restart.


class ConfigError(ValueError):
    """Raised when a game cannot be built from the given settings."""


@dataclass(frozen=True)
class GameConfig:
    """Everything a :class:`~snek.game.Game` needs at construction.

    Dimensions are grid units and include the one-cell border on each
    side. Supports JSON serialization for reproducible runs.
    """

    width: int = 30
    height: int = 30

    # Timing
    moving_period: float = MOVING_PERIOD
    restart_time: float = RESTART_TIME

    # Layout applied on creation and on every restart
    snake_x: int = 2
    snake_y: int = 2
    snake_length: int = 3
    food_x: int = 6
    food_y: int = 4

    # Food placement
    max_spawn_attempts: int = 1_000
    seed: int | None = None

    def __post_init__(self) -> None:
        from snek.arena import Arena

        arena = Arena(self.width, self.height)
        if self.moving_period <= 0:
            raise ConfigError("moving_period must be positive.")
        if self.restart_time <= 0:
            raise ConfigError("restart_time must be positive.")
        if self.snake_length < 1:
            raise ConfigError("snake_length must be at least 1.")
        if self.max_spawn_attempts < 1:
            raise ConfigError("max_spawn_attempts must be at least 1.")

        snake_cells = [
            (self.snake_x + i, self.snake_y) for i in range(self.snake_length)
        ]
        for x, y in snake_cells:
            if not arena.in_interior(x, y):
                raise ConfigError(
                    "starting snake does not fit inside the arena border; "
                    "increase the arena or move the snake."
                )
        if not arena.in_interior(self.food_x, self.food_y):
            raise ConfigError("starting food must lie inside the arena border.")
        if (self.food_x, self.food_y) in snake_cells:
            raise ConfigError("starting food overlaps the starting snake.")

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
        return cls(**raw)
