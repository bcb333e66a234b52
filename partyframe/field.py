"""The playing field: a coloured border around the scene."""

from __future__ import annotations

from typing import Any

from partyframe import shape
from partyframe.gameobject import GameObject
from partyframe.geometry import Bounds2D, Coord2D


class Field(GameObject):
    """A stationary rectangle outline centred on its bounds."""

    def __init__(self, bounds: Bounds2D, color: int) -> None:
        super().__init__(bounds.center(), Coord2D(0.0, 0.0))
        self.size = bounds.dimensions()
        self.color = color

    def update(self, milliseconds: int) -> None:
        self.default_update(milliseconds)

    def draw(self, surface: Any) -> None:
        """Draw the four border lines."""
        half_w = self.size.x / 2.0
        half_h = self.size.y / 2.0
        left = self.position.x - half_w
        right = self.position.x + half_w
        bottom = self.position.y - half_h
        top = self.position.y + half_h
        r, g, b = shape.unpack_rgb(self.color)

        shape.draw_line(surface, left, top, right, top, r, g, b)
        shape.draw_line(surface, right, top, right, bottom, r, g, b)
        shape.draw_line(surface, right, bottom, left, bottom, r, g, b)
        shape.draw_line(surface, left, bottom, left, top, r, g, b)