"""Base class for everything that moves and draws in the scene."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from partyframe.geometry import Bounds2D, Coord2D

Registration = Callable[["GameObject"], None]


@dataclass
class _Registrar:
    register: Optional[Registration] = None
    deregister: Optional[Registration] = None


_registrar = _Registrar()


def enable_registration(register: Optional[Registration], deregister: Optional[Registration]) -> None:
    """Call ``register`` for each new object and ``deregister`` for each destroyed one."""
    _registrar.register = register
    _registrar.deregister = deregister


def disable_registration() -> None:
    """Stop notifying a registrar about object creation and destruction."""
    _registrar.register = None
    _registrar.deregister = None


class GameObject:
    """An object with a position and a velocity.

    Subclasses override :meth:`draw` and :meth:`update`; the base update moves
    the object by its velocity once per call.
    """

    def __init__(self, position: Optional[Coord2D] = None, velocity: Optional[Coord2D] = None) -> None:
        position = position or Coord2D()
        velocity = velocity or Coord2D()
        self.position = Coord2D(position.x, position.y)
        self.velocity = Coord2D(velocity.x, velocity.y)
        self.bounds = Bounds2D()
        if _registrar.register is not None:
            _registrar.register(self)

    def destroy(self) -> None:
        """Tell the registrar, if any, that this object is going away."""
        if _registrar.deregister is not None:
            _registrar.deregister(self)

    def draw(self, surface: Any) -> None:
        """Draw the object; a plain object has nothing to show."""

    def update(self, milliseconds: int) -> None:
        """Advance the object by the elapsed time."""
        self.default_update(milliseconds)

    def default_update(self, milliseconds: int) -> None:
        """Move by the current velocity, one step per update regardless of time."""
        self.position.x += self.velocity.x
        self.position.y += self.velocity.y