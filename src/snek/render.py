"""Draw-instruction boundary between the engine and a renderer.

The engine never computes pixels or colours. It reports grid-unit blocks
and rectangles tagged with a :class:`DrawRole`; a renderer decides what
each role looks like.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class DrawRole(enum.Enum):
    """Logical colour role of a drawn entity."""

    FOOD = "food"
    SNAKE_HEAD = "snake-head"
    SNAKE_BODY = "snake-body"
    BORDER = "border"
    GAME_OVER_OVERLAY = "game-over-overlay"


@dataclass(frozen=True)
class DrawCommand:
    """A single rectangle in grid units."""

    role: DrawRole
    x: int
    y: int
    width: int = 1
    height: int = 1


class Canvas:
    """Receiver of draw instructions.

    Subclasses implement :meth:`draw_rect`; :meth:`draw_block` is a
    one-cell rectangle unless overridden.
    """

    def draw_block(self, role: DrawRole, x: int, y: int) -> None:
        self.draw_rect(role, x, y, 1, 1)

    def draw_rect(
        self, role: DrawRole, x: int, y: int, width: int, height: int,
    ) -> None:
        raise NotImplementedError


class RecordingCanvas(Canvas):
    """Canvas that keeps every instruction it receives, in order."""

    def __init__(self) -> None:
        self.commands: list[DrawCommand] = []

    def draw_rect(
        self, role: DrawRole, x: int, y: int, width: int, height: int,
    ) -> None:
        self.commands.append(DrawCommand(role, x, y, width, height))

    def clear(self) -> None:
        self.commands.clear()


# The overlay only fills cells nothing else has drawn on.
_ASCII_GLYPHS: dict[DrawRole, str] = {
    DrawRole.BORDER: "#",
    DrawRole.FOOD: "*",
    DrawRole.SNAKE_BODY: "o",
    DrawRole.SNAKE_HEAD: "@",
    DrawRole.GAME_OVER_OVERLAY: "x",
}


class AsciiCanvas(Canvas):
    """Rasterises draw instructions onto a character grid."""

    def __init__(self, width: int, height: int, empty: str = " ") -> None:
        self.width = width
        self.height = height
        self.empty = empty
        self.rows = [[empty] * width for _ in range(height)]

    def draw_rect(
        self, role: DrawRole, x: int, y: int, width: int, height: int,
    ) -> None:
        glyph = _ASCII_GLYPHS[role]
        overlay = role is DrawRole.GAME_OVER_OVERLAY
        for row in range(max(y, 0), min(y + height, self.height)):
            for col in range(max(x, 0), min(x + width, self.width)):
                if overlay and self.rows[row][col] != self.empty:
                    continue
                self.rows[row][col] = glyph

    def render(self) -> str:
        return "\n".join("".join(row) for row in self.rows)
