"""Primitive drawing helpers: circles, lines and rectangles on a pygame surface."""

from __future__ import annotations

import math
from typing import Any

import pygame

DEG2RAD = 3.14159 / 180.0

Point = tuple[float, float]


def unpack_rgb(color: int) -> tuple[int, int, int]:
    """Split a 0xRRGGBB colour into its red, green and blue bytes."""
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def circle_outline_points(radius: float, x: float, y: float) -> list[Point]:
    """Points of a thick circle outline: three rings, every three degrees."""
    points: list[Point] = []
    for degrees in range(0, 360, 3):
        angle = degrees * DEG2RAD
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        for ring in (radius, radius + 2.0, radius - 2.0):
            points.append((x + cos_a * ring, y + sin_a * ring))
    return points


def circle_fan_points(radius: float, x: float, y: float) -> list[Point]:
    """The centre followed by the rim of a filled circle, every eight degrees."""
    points: list[Point] = [(x, y)]
    for degrees in range(0, 361, 8):
        angle = degrees * DEG2RAD
        points.append((x + math.cos(angle) * radius, y + math.sin(angle) * radius))
    return points


def draw_circle(surface: Any, radius: float, x: float, y: float,
                r: int, g: int, b: int, filled: bool) -> None:
    """Draw a solid circle when ``filled``, otherwise a dotted outline."""
    color = (r, g, b, 0xFF)
    if filled:
        rim = circle_fan_points(radius, x, y)[1:]
        pygame.draw.polygon(surface, color, rim)
        return
    area = surface.get_rect()
    for px, py in circle_outline_points(radius, x, y):
        point = (int(round(px)), int(round(py)))
        if area.collidepoint(point):
            surface.set_at(point, color)


def draw_line(surface: Any, start_x: float, start_y: float, end_x: float, end_y: float,
              r: int, g: int, b: int) -> None:
    """Draw a straight line between two points."""
    pygame.draw.line(surface, (r, g, b), (start_x, start_y), (end_x, end_y))


def draw_rect(surface: Any, left_x: float, top_y: float, right_x: float, bot_y: float,
              r: int, g: int, b: int, filled: bool) -> None:
    """Fill the rectangle between two corners.

    The rectangle is always drawn solid; ``filled`` is accepted for symmetry
    with :func:`draw_circle`.
    """
    left, right = sorted((left_x, right_x))
    top, bottom = sorted((top_y, bot_y))
    area = pygame.Rect(int(left), int(top), int(right - left), int(bottom - top))
    surface.fill((r, g, b, 0xFF), area)