"""A bouncing ball that changes colour whenever it hits its bounds."""

from __future__ import annotations

from typing import Any, Callable, Optional

from partyframe import shape
from partyframe.gameobject import GameObject
from partyframe.geometry import Bounds2D, Coord2D
from partyframe.rng import rand_float, rand_int

MAX_VEL = 5.0
MIN_RADIUS = 10.0
MAX_RADIUS = 50.0

CollideCallback = Callable[["Ball"], None]

_collide_callback: Optional[CollideCallback] = None


def set_collide_callback(callback: Optional[CollideCallback]) -> None:
    """Call ``callback(ball)`` each time any ball hits a wall."""
    global _collide_callback
    _collide_callback = callback


def clear_collide_callback() -> None:
    global _collide_callback
    _collide_callback = None


class Ball(GameObject):
    """A ball that starts at the centre of its bounds with a random velocity."""

    def __init__(self, bounds: Bounds2D) -> None:
        velocity = Coord2D(rand_float(-MAX_VEL, MAX_VEL), rand_float(-MAX_VEL, MAX_VEL))
        super().__init__(bounds.center(), velocity)
        self.bounds = bounds
        self.radius = rand_float(MIN_RADIUS, MAX_RADIUS)
        self.color = 0
        self.randomize_color()

    def randomize_color(self) -> None:
        """Pick a random 24-bit colour."""
        color = rand_int(0, 256)
        color += rand_int(0, 256) << 8
        color += rand_int(0, 256) << 16
        self.color = color

    def draw(self, surface: Any) -> None:
        r, g, b = shape.unpack_rgb(self.color)
        shape.draw_circle(surface, self.radius, self.position.x, self.position.y, r, g, b, True)
        shape.draw_rect(surface, 50.0, 50.0, 75.0, 75.0, r, g, b, True)

    def update(self, milliseconds: int) -> None:
        self.default_update(milliseconds)
        self._collide_field()

    def _bounce(self) -> None:
        self.randomize_color()
        if _collide_callback is not None:
            _collide_callback(self)

    def _collide_field(self) -> None:
        left = self.bounds.top_left.x
        right = self.bounds.bot_right.x
        top = self.bounds.top_left.y
        bottom = self.bounds.bot_right.y
        pos, vel, radius = self.position, self.velocity, self.radius

        if pos.x - radius <= left:
            vel.x = -vel.x
            pos.x = left + radius
            self._bounce()
        if pos.x + radius >= right:
            vel.x = -vel.x
            pos.x = right - radius
            self._bounce()
        if pos.y + radius >= bottom:
            vel.y = -vel.y
            pos.y = bottom - radius
            self._bounce()
        if pos.y - radius <= top:
            vel.y = -vel.y
            pos.y = top + radius
            self._bounce()