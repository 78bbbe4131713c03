"""Food spawning logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from snek.snake import Coordinate

if TYPE_CHECKING:
    from snek.arena import Arena
    from snek.snake import Snake

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Places food on a uniformly random free interior cell.

    Rejection sampling is tried first, matching the classic behaviour of
    rerolling until the cell is clear of the snake. After
    *max_attempts* misses the spawner picks directly from the remaining
    free cells, so a crowded arena never loops forever.
    """

    def __init__(
        self,
        arena: Arena,
        rng: np.random.Generator | None = None,
        max_attempts: int = 1_000,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.arena = arena
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = max_attempts

    def random_cell(self) -> Coordinate:
        """Draw an interior cell, ignoring what occupies it."""
        x = int(self.rng.integers(1, self.arena.width - 1))
        y = int(self.rng.integers(1, self.arena.height - 1))
        return Coordinate(x, y)

    def spawn(self, snake: Snake) -> Coordinate | None:
        """Return a cell for new food, or ``None`` if the snake fills the arena."""
        for _ in range(self.max_attempts):
            cell = self.random_cell()
            if not snake.occupies(cell.x, cell.y):
                logger.debug("Food spawned at %s.", cell)
                return cell

        free = self.arena.free_cells(snake.body)
        if not free:
            logger.warning("No free cells available for food spawning.")
            return None

        logger.warning(
            "Food sampling missed %d times; choosing among %d free cells.",
            self.max_attempts, len(free),
        )
        x, y = free[int(self.rng.integers(len(free)))]
        return Coordinate(x, y)
