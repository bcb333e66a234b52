"""Basic 2D value types shared by the game objects."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Coord2D:
    """A point or vector in screen space."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Bounds2D:
    """An axis-aligned box given by its top-left and bottom-right corners."""

    top_left: Coord2D = field(default_factory=Coord2D)
    bot_right: Coord2D = field(default_factory=Coord2D)

    def center(self) -> Coord2D:
        """Return the centre point of the box."""
        return Coord2D(
            (self.top_left.x + self.bot_right.x) / 2,
            (self.top_left.y + self.bot_right.y) / 2,
        )

    def dimensions(self) -> Coord2D:
        """Return the box size as a coordinate where x is width and y is height."""
        return Coord2D(
            self.bot_right.x - self.top_left.x,
            self.bot_right.y - self.top_left.y,
        )