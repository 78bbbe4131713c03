"""Frame-driven game state machine tying snake, food, and timing together."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

import numpy as np

from snek.arena import Arena
from snek.config import GameConfig
from snek.food import FoodSpawner
from snek.render import Canvas, DrawRole
from snek.snake import Coordinate, Direction, Snake

logger = logging.getLogger(__name__)


class Key(enum.Enum):
    """Decoded key presses delivered by the event loop."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    OTHER = "other"


# Only arrow keys steer the snake.
_KEY_DIRECTIONS: dict[Key, Direction] = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}


@dataclass(frozen=True)
class Running:
    """Snake is alive; *waiting_time* counts seconds since the last step."""

    waiting_time: float = 0.0


@dataclass(frozen=True)
class GameOver:
    """Snake has died; *elapsed* counts seconds since it happened."""

    elapsed: float = 0.0


class Game:
    """Single-snake game driven by per-frame time deltas and key presses.

    :meth:`update` is called once per rendered frame and advances the
    snake at most one cell, whenever the cadence timer has reached
    ``moving_period``. :meth:`key_pressed` may step immediately when the
    player turns. After a collision the game sits in :class:`GameOver`
    for ``restart_time`` seconds and then resets itself.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        cfg = config or GameConfig()
        self.config = cfg
        self.arena = Arena(cfg.width, cfg.height)
        self.rng = rng if rng is not None else np.random.default_rng(cfg.seed)
        self.spawner = FoodSpawner(
            self.arena, rng=self.rng, max_attempts=cfg.max_spawn_attempts,
        )
        self.snake = self._new_snake()
        self.food: Coordinate | None = self._default_food()
        self.state: Running | GameOver = Running()

    @property
    def width(self) -> int:
        return self.arena.width

    @property
    def height(self) -> int:
        return self.arena.height

    @property
    def game_over(self) -> bool:
        return isinstance(self.state, GameOver)

    @property
    def waiting_time(self) -> float:
        """Seconds on whichever timer the current state runs."""
        if isinstance(self.state, GameOver):
            return self.state.elapsed
        return self.state.waiting_time

    def _new_snake(self) -> Snake:
        cfg = self.config
        return Snake(cfg.snake_x, cfg.snake_y, length=cfg.snake_length)

    def _default_food(self) -> Coordinate:
        return Coordinate(self.config.food_x, self.config.food_y)

    def restart(self) -> None:
        """Put snake, food, and timer back to their starting values."""
        self.snake = self._new_snake()
        self.food = self._default_food()
        self.state = Running()
        logger.info("Game restarted.")

    def update(self, delta_time: float) -> None:
        """Advance timers by *delta_time* seconds; step if one is due.

        At most one step happens per call, however large the delta.
        """
        state = self.state
        if isinstance(state, GameOver):
            elapsed = state.elapsed + delta_time
            if elapsed > self.config.restart_time:
                self.restart()
            else:
                self.state = GameOver(elapsed)
            return

        self.state = Running(state.waiting_time + delta_time)

        if self.food is None:
            self.food_add()
            if self.game_over:
                return

        if self.state.waiting_time >= self.config.moving_period:
            self.update_snake()

    def update_snake(self, direction: Direction | None = None) -> None:
        """Take one step if it is legal, otherwise end the game."""
        if self.game_over:
            return
        if self.check_alive(direction):
            self.snake.move_forward(direction)
            self.check_eating()
            self.state = Running()
        else:
            self._end_game()

    def key_pressed(self, key: object) -> None:
        """Steer the snake, stepping immediately on an accepted turn."""
        if self.game_over or not isinstance(key, Key):
            return

        direction = _KEY_DIRECTIONS.get(key)
        if direction is None:
            return

        # Reversing is always fatal and repeating the current heading
        # would only speed the snake up, so both are ignored.
        heading = self.snake.head_direction()
        if direction in (heading, heading.opposite()):
            return
        self.update_snake(direction)

    def check_alive(self, direction: Direction | None = None) -> bool:
        """Check whether the next step in *direction* is survivable."""
        x, y = self.snake.head_next(direction)
        if self.snake.tail_overlap(x, y):
            return False
        return self.arena.in_interior(x, y)

    def check_eating(self) -> None:
        """Consume food under the head and grow by one segment."""
        if self.food is not None and self.food == self.snake.head_position():
            self.food = None
            self.snake.tail_restore()
            logger.debug("Food eaten; snake length is %d.", len(self.snake))

    def food_add(self) -> None:
        """Spawn food on a free cell; a full arena ends the game."""
        cell = self.spawner.spawn(self.snake)
        if cell is None:
            self._end_game()
            return
        self.food = cell

    def _end_game(self) -> None:
        self.state = GameOver()
        logger.info(
            "Game over with head at %s and length %d.",
            self.snake.head_position(), len(self.snake),
        )

    def draw(self, canvas: Canvas) -> None:
        """Emit draw instructions for snake, food, border, and overlay."""
        self.snake.draw(canvas)

        if self.food is not None:
            canvas.draw_block(DrawRole.FOOD, self.food.x, self.food.y)

        self.arena.draw(canvas)

        if self.game_over:
            canvas.draw_rect(
                DrawRole.GAME_OVER_OVERLAY, 0, 0, self.width, self.height,
            )

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "game_over": self.game_over,
            "waiting_time": self.waiting_time,
            "arena": self.arena.to_dict(),
            "snake": self.snake.to_dict(),
            "food": list(self.food) if self.food is not None else None,
        }
