"""Application settings and the draw/update hooks the window loop calls."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

DEFAULT_WIDTH = 1024
DEFAULT_HEIGHT = 768
DEFAULT_BPP = 24
DEFAULT_MAX_SOUNDS = 20


@dataclass
class Application:
    """A titled application with window settings and per-frame hooks."""

    title: str
    draw_func: Optional[Callable[[], None]] = None
    update_func: Optional[Callable[[int], None]] = None
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    bits_per_pixel: int = DEFAULT_BPP
    max_sounds: int = DEFAULT_MAX_SOUNDS

    def draw(self) -> None:
        """Run the draw hook, if one is set."""
        if self.draw_func is not None:
            self.draw_func()

    def update(self, milliseconds: int) -> None:
        """Run the update hook for the elapsed time, if one is set."""
        if self.update_func is not None:
            self.update_func(milliseconds)