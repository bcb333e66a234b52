"""The game: level set-up, the per-frame hooks and the program entry point."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Any, Optional

from partyframe.application import Application
from partyframe.geometry import Bounds2D, Coord2D
from partyframe.inputstate import InputSystem
from partyframe.levelmgr import Level, LevelDef, LevelManager
from partyframe.objmgr import ObjectManager
from partyframe.rendertools import WindowTracker

GAME_NAME = "Framework1"
MAX_OBJECTS = 500
DEFAULT_ASSETS = "asset"
SOUND_FILE = "beep.wav"
TEXTURE_FILE = "snoods_default.png"


def _default_levels() -> list[LevelDef]:
    return [
        LevelDef(
            field_bounds=Bounds2D(Coord2D(0.0, 0.0), Coord2D(974.0, 600.0)),
            field_color=0xFF0000FF,
            num_balls=0,
            num_faces=0,
        )
    ]


class Game:
    """Owns the object manager and level manager for one run of the game."""

    def __init__(self, app: Application, inputs: InputSystem, sounds: Any) -> None:
        self.app = app
        self.inputs = inputs
        self.sounds = sounds
        self.level_defs = _default_levels()
        self.window = WindowTracker()
        self.sound_path: Optional[str] = os.path.join(DEFAULT_ASSETS, SOUND_FILE)
        self.texture_path: Optional[str] = os.path.join(DEFAULT_ASSETS, TEXTURE_FILE)
        self.objects: Optional[ObjectManager] = None
        self.levels: Optional[LevelManager] = None
        self.current_level: Optional[Level] = None

    def start(self) -> None:
        """Size the first level to the window and load it."""
        self.window.update(self.app)
        first = self.level_defs[0]
        first.window_height = self.window.height
        first.window_width = self.window.width

        self.objects = ObjectManager(MAX_OBJECTS)
        self.levels = LevelManager(self.inputs, self.sounds, self.sound_path, self.texture_path)
        self.inputs.reset()
        self.current_level = self.levels.load(first)

    def draw(self, surface: Any) -> None:
        """Draw every live object."""
        if self.objects is not None:
            self.objects.draw(surface)

    def update(self, milliseconds: int) -> None:
        """Fire key bindings, then advance every live object."""
        self.inputs.update()
        if self.objects is not None:
            self.objects.update(milliseconds)

    def shutdown(self) -> None:
        """Unload the level and release everything started by :meth:`start`."""
        if self.levels is not None:
            self.levels.unload(self.current_level)
            self.levels.shutdown()
        self.current_level = None
        self.levels = None
        self.inputs.reset()
        if self.objects is not None:
            self.objects.shutdown()
        self.objects = None


def main(argv: Optional[list[str]] = None) -> int:
    """Open the game window and run until it is closed."""
    from partyframe.framework import init_window
    from partyframe.sound import SoundManager

    parser = argparse.ArgumentParser(prog="partyframe", description="Run the party game.")
    parser.add_argument("--assets", default=DEFAULT_ASSETS,
                        help="directory holding the sound and sprite files")
    args = parser.parse_args(argv)

    app = Application(GAME_NAME)
    inputs = InputSystem()
    sounds = SoundManager(app.max_sounds)
    try:
        window = init_window(app, inputs)
    except RuntimeError as exc:
        sounds.shutdown()
        print(exc, file=sys.stderr)
        return 1

    game = Game(app, inputs, sounds)
    game.sound_path = os.path.join(args.assets, SOUND_FILE)
    game.texture_path = os.path.join(args.assets, TEXTURE_FILE)
    app.update_func = game.update
    app.draw_func = lambda: game.draw(window.surface)

    try:
        game.start()
        while window.update():
            pass
    finally:
        game.shutdown()
        window.shutdown()
        sounds.shutdown()
    return 0


if __name__ == "__main__":
    sys.exit(main())