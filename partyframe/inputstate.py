"""Keyboard and mouse state with edge-triggered key callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Optional

from partyframe.geometry import Coord2D

KEY_STATES = 256

InputCallback = Callable[[Any], None]


class InputButton(IntEnum):
    RIGHT = 0
    LEFT = 1


class GameKey(IntEnum):
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    X = 4
    Z = 5
    ESC = 6


# virtual-key codes for each game key
KEY_CODES: dict[GameKey, int] = {
    GameKey.UP: 0x26,
    GameKey.DOWN: 0x28,
    GameKey.LEFT: 0x25,
    GameKey.RIGHT: 0x27,
    GameKey.X: 0x58,
    GameKey.Z: 0x5A,
    GameKey.ESC: 0x1B,
}


@dataclass
class _Binding:
    callback: Optional[InputCallback] = None
    context: Any = None
    pressed_last_frame: bool = False


def _check_vk(vk_code: int) -> int:
    if not 0 <= vk_code < KEY_STATES:
        raise ValueError(f"virtual-key code out of range: {vk_code}")
    return vk_code


class InputSystem:
    """Holds the current keyboard and mouse state and the key bindings."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Release every key and button, move the mouse to the origin, drop bindings."""
        self._keys = [False] * KEY_STATES
        self._mouse_position = Coord2D()
        self._buttons = {button: False for button in InputButton}
        self._bindings = {key: _Binding() for key in GameKey}

    def key_pressed(self, vk_code: int) -> bool:
        return self._keys[_check_vk(vk_code)]

    def mouse_position(self) -> Coord2D:
        return Coord2D(self._mouse_position.x, self._mouse_position.y)

    def mouse_pressed(self, button: InputButton) -> bool:
        return self._buttons[InputButton(button)]

    def key_update(self, vk_code: int, pressed: bool) -> None:
        self._keys[_check_vk(vk_code)] = bool(pressed)

    def mouse_update_position(self, coords: Coord2D) -> None:
        self._mouse_position = Coord2D(coords.x, coords.y)

    def mouse_update_button(self, button: InputButton, pressed: bool) -> None:
        self._buttons[InputButton(button)] = bool(pressed)

    def set_callback(self, key: GameKey, callback: Optional[InputCallback], context: Any) -> None:
        """Bind ``callback(context)`` to the moment ``key`` goes down."""
        binding = self._bindings[GameKey(key)]
        binding.callback = callback
        binding.context = context

    def clear_callback(self, key: GameKey) -> None:
        binding = self._bindings[GameKey(key)]
        binding.callback = None
        binding.context = None

    def clear_all_callbacks(self) -> None:
        for key in GameKey:
            self.clear_callback(key)

    def update(self) -> None:
        """Fire the callback of every game key pressed since the previous update.

        A key pressed without a bound callback is an error.
        """
        for key, binding in self._bindings.items():
            pressed = self._keys[KEY_CODES[key]]
            if pressed and not binding.pressed_last_frame:
                if binding.callback is None:
                    raise RuntimeError(f"no callback bound to {key.name}")
                binding.callback(binding.context)
            binding.pressed_last_frame = pressed