"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from collections import deque
from typing import TYPE_CHECKING, NamedTuple

from snek.render import DrawRole

if TYPE_CHECKING:
    from snek.render import Canvas


class Coordinate(NamedTuple):
    """A grid cell in game units (not pixels)."""

    x: int
    y: int


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values.

    The y axis grows downward, so ``UP`` decrements y.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def opposite(self) -> Direction:
        """Return the direction that would reverse into the body."""
        return _OPPOSITES[self]


_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake represented as an ordered deque of body cells.

    The head is ``body[0]``; the oldest segment is ``body[-1]``. Every
    move drops the last segment into :attr:`ghost_tail` so that growth
    can put it back on the following step.
    """

    def __init__(self, x: int, y: int, length: int = 3) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        self.direction = Direction.RIGHT
        self.body: deque[Coordinate] = deque()
        for i in range(length):
            self.body.appendleft(Coordinate(x + i, y))
        self.ghost_tail: Coordinate | None = None

    def __len__(self) -> int:
        return len(self.body)

    def head_position(self) -> Coordinate:
        """Return the head coordinate."""
        return self.body[0]

    def head_direction(self) -> Direction:
        """Return the direction the snake is travelling in."""
        return self.direction

    def head_next(self, direction: Direction | None = None) -> Coordinate:
        """Compute where the head would be after one step, without moving."""
        if direction is None:
            direction = self.direction
        dx, dy = direction.value
        x, y = self.head_position()
        return Coordinate(x + dx, y + dy)

    def tail_overlap(self, x: int, y: int) -> bool:
        """Check whether ``(x, y)`` hits any segment behind the head."""
        cell = (x, y)
        return any(seg == cell for i, seg in enumerate(self.body) if i > 0)

    def occupies(self, x: int, y: int) -> bool:
        """Check whether the snake occupies a given cell, head included."""
        return (x, y) in self.body

    def move_forward(self, direction: Direction | None = None) -> None:
        """Advance one cell, adopting *direction* first if given.

        Legality is the caller's concern; this always succeeds.
        """
        if direction is not None:
            self.direction = direction
        self.body.appendleft(self.head_next())
        # Body is never empty, so the pop always yields the old tail.
        self.ghost_tail = self.body.pop()

    def tail_restore(self) -> None:
        """Re-attach the last vacated tail cell, growing by one segment."""
        if self.ghost_tail is None:
            return
        self.body.append(self.ghost_tail)
        self.ghost_tail = None

    def draw(self, canvas: Canvas) -> None:
        """Emit one block per segment, the head in its own role."""
        for index, block in enumerate(self.body):
            role = DrawRole.SNAKE_HEAD if index == 0 else DrawRole.SNAKE_BODY
            canvas.draw_block(role, block.x, block.y)

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg) for seg in self.body],
            "direction": self.direction.name.lower(),
            "ghost_tail": (
                list(self.ghost_tail) if self.ghost_tail is not None else None
            ),
        }
