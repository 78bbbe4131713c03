"""Bounded arena with an impassable one-cell border."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from snek.config import ConfigError
from snek.render import Canvas, DrawRole


class Arena:
    """Rectangular play field measured in grid units.

    The outermost ring of cells is wall, so the playable interior spans
    ``1 <= x <= width - 2`` and ``1 <= y <= height - 2``.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 2 or height <= 2:
            raise ConfigError(
                f"Arena must be larger than 2x2 to have an interior, "
                f"got {width}x{height}."
            )
        self.width = width
        self.height = height

    @property
    def interior_size(self) -> int:
        return (self.width - 2) * (self.height - 2)

    def in_interior(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies strictly inside the border."""
        return 0 < x < self.width - 1 and 0 < y < self.height - 1

    def free_cells(
        self, occupied: Iterable[tuple[int, int]],
    ) -> list[tuple[int, int]]:
        """Return interior ``(x, y)`` cells not listed in *occupied*."""
        mask = np.zeros((self.height, self.width), dtype=bool)
        mask[1:-1, 1:-1] = True
        for x, y in occupied:
            if self.in_interior(x, y):
                mask[y, x] = False
        ys, xs = np.nonzero(mask)
        return list(zip(xs.tolist(), ys.tolist(), strict=True))

    def draw(self, canvas: Canvas) -> None:
        """Emit the four border walls: top, bottom, left, right."""
        canvas.draw_rect(DrawRole.BORDER, 0, 0, self.width, 1)
        canvas.draw_rect(DrawRole.BORDER, 0, self.height - 1, self.width, 1)
        canvas.draw_rect(DrawRole.BORDER, 0, 0, 1, self.height)
        canvas.draw_rect(DrawRole.BORDER, self.width - 1, 0, 1, self.height)

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}
