"""World state - the position of the single glyph."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WorldBounds:
    """World dimensions in glyph cells.

    Terminal cells are roughly twice as tall as they are wide, so every
    world cell spans two columns.
    """
    width: int
    height: int

    @classmethod
    def from_viewport(cls, cols: int, rows: int) -> WorldBounds:
        return cls(width=cols // 2, height=rows)


@dataclass
class WorldState:
    """Logical cell position of the glyph."""
    x: int = 0
    y: int = 0

    def move(self, dx: int, dy: int) -> None:
        """Shift the glyph. Bounds are only applied by clamp()."""
        self.x += dx
        self.y += dy

    def clamp(self, bounds: WorldBounds) -> None:
        """Pull the position back inside bounds.

        A zero-sized axis pins the coordinate at 0.
        """
        self.x = max(0, min(self.x, bounds.width - 1))
        self.y = max(0, min(self.y, bounds.height - 1))

    @property
    def screen_position(self) -> tuple[int, int]:
        """(col, row) of the glyph's first column on screen."""
        return self.x * 2, self.y
