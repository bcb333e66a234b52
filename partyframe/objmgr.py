"""Fixed-capacity registry of live game objects."""

from __future__ import annotations

from typing import Any, Optional

from partyframe.gameobject import GameObject, disable_registration, enable_registration


class ObjectManagerError(RuntimeError):
    """Raised when the object manager is used inconsistently."""


class ObjectManager:
    """Tracks every object created while it is active, in a fixed number of slots.

    Creating the manager hooks it into object registration, so new objects add
    themselves and destroyed objects remove themselves. The manager does not own
    the objects.
    """

    def __init__(self, max_objects: int) -> None:
        if max_objects < 0:
            raise ValueError("max_objects must not be negative")
        self._slots: list[Optional[GameObject]] = [None] * max_objects
        self._count = 0
        enable_registration(self.add, self.remove)

    def shutdown(self) -> None:
        """Unhook from registration; every object must already be removed."""
        disable_registration()
        if self._count != 0:
            raise ObjectManagerError(f"{self._count} objects still registered at shutdown")
        self._slots = []

    def add(self, obj: GameObject) -> None:
        """Place the object in the first free slot."""
        try:
            index = self._slots.index(None)
        except ValueError:
            raise ObjectManagerError("no room to add another object") from None
        self._slots[index] = obj
        self._count += 1

    def remove(self, obj: GameObject) -> None:
        """Free the slot holding the object."""
        for index, slot in enumerate(self._slots):
            if slot is obj:
                self._slots[index] = None
                self._count -= 1
                return
        raise ObjectManagerError("object to remove is not registered")

    def draw(self, surface: Any) -> None:
        """Draw every registered object in slot order."""
        for obj in self._slots:
            if obj is not None:
                obj.draw(surface)

    def update(self, milliseconds: int) -> None:
        """Update every registered object in slot order."""
        for obj in self._slots:
            if obj is not None:
                obj.update(milliseconds)

    def __len__(self) -> int:
        return self._count