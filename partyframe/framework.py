"""The game window: event dispatch into the input system and the frame loop."""

from __future__ import annotations

from typing import Any

import pygame

from partyframe.application import Application
from partyframe.geometry import Coord2D
from partyframe.inputstate import InputButton, InputSystem

BACKGROUND = (0, 0, 0)

# how long a hidden window sleeps waiting for an event, in milliseconds
_HIDDEN_WAIT_MS = 10

_MOUSE_BUTTONS = {1: InputButton.LEFT, 3: InputButton.RIGHT}


def _build_key_map() -> dict[int, int]:
    """Map pygame key constants to virtual-key codes."""
    keys = {
        pygame.K_LEFT: 0x25,
        pygame.K_UP: 0x26,
        pygame.K_RIGHT: 0x27,
        pygame.K_DOWN: 0x28,
        pygame.K_ESCAPE: 0x1B,
        pygame.K_SPACE: 0x20,
        pygame.K_RETURN: 0x0D,
        pygame.K_BACKSPACE: 0x08,
        pygame.K_TAB: 0x09,
    }
    for offset in range(26):
        keys[pygame.K_a + offset] = 0x41 + offset
    for offset in range(10):
        keys[pygame.K_0 + offset] = 0x30 + offset
    return keys


_KEY_MAP = _build_key_map()


class Window:
    """A resizable window that feeds events to an input system and runs frames.

    Each :meth:`update` handles the pending events and, while the window is
    visible, advances the application by the elapsed time and draws a frame.
    """

    def __init__(self, app: Application, inputs: InputSystem) -> None:
        self.app = app
        self.inputs = inputs
        inputs.reset()
        pygame.display.init()
        try:
            self.surface = pygame.display.set_mode((app.width, app.height), pygame.RESIZABLE)
        except pygame.error as exc:
            pygame.display.quit()
            raise RuntimeError(f"cannot create window: {exc}") from exc
        pygame.display.set_caption(app.title)
        pygame.mouse.set_visible(False)
        self.surface.fill(BACKGROUND)
        self.visible = True
        self.last_tick = pygame.time.get_ticks()

    def handle_event(self, event: Any) -> bool:
        """Apply one event; return False when it asks the program to quit."""
        kind = event.type
        if kind == pygame.QUIT:
            return False
        if kind == pygame.WINDOWMINIMIZED:
            self.visible = False
        elif kind in (pygame.WINDOWMAXIMIZED, pygame.WINDOWRESTORED):
            self.visible = True
            self.surface = pygame.display.get_surface()
        elif kind in (pygame.VIDEORESIZE, pygame.WINDOWSIZECHANGED):
            self.surface = pygame.display.get_surface()
        elif kind in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            button = _MOUSE_BUTTONS.get(getattr(event, "button", 0))
            if button is not None:
                self.inputs.mouse_update_button(button, kind == pygame.MOUSEBUTTONDOWN)
        elif kind == pygame.MOUSEMOTION:
            x, y = event.pos
            self.inputs.mouse_update_position(Coord2D(float(x), float(y)))
        elif kind in (pygame.KEYDOWN, pygame.KEYUP):
            vk_code = _KEY_MAP.get(event.key)
            if vk_code is not None:
                self.inputs.key_update(vk_code, kind == pygame.KEYDOWN)
        return True

    def update(self) -> bool:
        """Run one pass of the loop; return False once a quit was requested."""
        for event in pygame.event.get():
            if not self.handle_event(event):
                return False

        if not self.visible:
            event = pygame.event.wait(_HIDDEN_WAIT_MS)
            if event.type != pygame.NOEVENT:
                return self.handle_event(event)
            return True

        now = pygame.time.get_ticks()
        ticks = now - self.last_tick
        self.last_tick = now

        self.app.update(ticks)
        self.surface.fill(BACKGROUND)
        self.app.draw()
        pygame.display.flip()
        return True

    def send_terminate(self) -> None:
        """Queue a request to end the loop."""
        pygame.event.post(pygame.event.Event(pygame.QUIT))

    def change_resolution(self, width: int, height: int, bits_per_pixel: int) -> None:
        """Switch to a full-screen mode of the given size and colour depth."""
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid resolution {width}x{height}")
        if bits_per_pixel <= 0:
            raise ValueError(f"invalid colour depth {bits_per_pixel}")
        try:
            self.surface = pygame.display.set_mode(
                (width, height), pygame.FULLSCREEN, depth=bits_per_pixel
            )
        except pygame.error as exc:
            raise RuntimeError(f"cannot change resolution: {exc}") from exc

    def shutdown(self) -> None:
        """Clear the input state and close the window."""
        self.inputs.reset()
        if pygame.display.get_init():
            pygame.mouse.set_visible(True)
        pygame.display.quit()


def init_window(app: Application, inputs: InputSystem) -> Window:
    """Create the application's window and hook it to the input system."""
    return Window(app, inputs)