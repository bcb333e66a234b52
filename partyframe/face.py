"""Animated character faces cut from a sprite sheet of characters and moods."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Optional

import pygame

from partyframe.gameobject import GameObject
from partyframe.geometry import Bounds2D, Coord2D
from partyframe.rng import rand_int

CHARACTER_PAGE = "asset/snoods_default.png"
CHARACTER_COUNT = 8

MIN_UPDATE_TIME = 500
MAX_UPDATE_TIME = 2000


class Mood(IntEnum):
    """Rows of the sprite sheet, top to bottom."""

    NORMAL = 0
    HAPPY = 1
    SAD = 2
    ANGRY = 3


MOOD_COUNT = len(Mood)

_texture: Optional[pygame.Surface] = None


def init_textures(path: str = CHARACTER_PAGE) -> pygame.Surface:
    """Load the shared sprite sheet once; later calls return the loaded sheet."""
    global _texture
    if _texture is None:
        try:
            _texture = pygame.image.load(path)
        except pygame.error as exc:
            raise OSError(f"cannot load sprite sheet {path!r}") from exc
    return _texture


def _update_time() -> int:
    return rand_int(MIN_UPDATE_TIME, MAX_UPDATE_TIME)


class Face(GameObject):
    """A random character that changes mood every half to two seconds."""

    def __init__(self, box: Bounds2D) -> None:
        super().__init__(box.center(), Coord2D(0.0, 0.0))
        self.size = box.dimensions()
        self.character = rand_int(0, CHARACTER_COUNT)
        self.mood = Mood.NORMAL
        self.next_update = _update_time()

    def texture_coords(self) -> tuple[float, float, float, float]:
        """Return (u_left, v_top, u_right, v_bottom), with v of 0 at the sheet's bottom."""
        u_per_char = 1.0 / CHARACTER_COUNT
        v_per_mood = 1.0 / MOOD_COUNT
        u = self.character * u_per_char
        v = (MOOD_COUNT - self.mood) * v_per_mood
        return u, v, u + u_per_char, v - v_per_mood

    def draw(self, surface: Any) -> None:
        """Draw this face's frame stretched over its box; white if no sheet is loaded."""
        width = int(round(self.size.x))
        height = int(round(self.size.y))
        if width <= 0 or height <= 0:
            return
        left = int(self.position.x - self.size.x / 2)
        top = int(self.position.y - self.size.y / 2)

        if _texture is None:
            surface.fill((0xFF, 0xFF, 0xFF, 0xFF), pygame.Rect(left, top, width, height))
            return

        sheet_w, sheet_h = _texture.get_size()
        cell_w = sheet_w // CHARACTER_COUNT
        cell_h = sheet_h // MOOD_COUNT
        frame = _texture.subsurface(
            pygame.Rect(self.character * cell_w, int(self.mood) * cell_h, cell_w, cell_h)
        )
        surface.blit(pygame.transform.scale(frame, (width, height)), (left, top))

    def update(self, milliseconds: int) -> None:
        """Move, then pick a new mood once the countdown runs out."""
        self.default_update(milliseconds)
        if self.next_update > milliseconds:
            self.next_update -= milliseconds
            return
        self.mood = Mood(rand_int(0, MOOD_COUNT))
        self.next_update = _update_time()