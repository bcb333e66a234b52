"""Tracks the application's window size between frames."""

from __future__ import annotations

from typing import Any


class WindowTracker:
    """Remembers the last seen window size and whether it just changed."""

    def __init__(self) -> None:
        self.width = 0
        self.height = 0
        self.changed = False

    def update(self, app: Any) -> bool:
        """Take the size from ``app``; return whether it differs from the last one."""
        if app.height == self.height and app.width == self.width:
            self.changed = False
        else:
            self.height = app.height
            self.width = app.width
            self.changed = True
        return self.changed