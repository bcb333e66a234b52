"""Level definitions and the manager that builds and tears down a level's objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from partyframe import ball as ball_module
from partyframe import face as face_module
from partyframe.ball import Ball
from partyframe.face import Face
from partyframe.field import Field
from partyframe.geometry import Bounds2D, Coord2D
from partyframe.inputstate import GameKey, InputSystem
from partyframe.sound import SOUND_NOSOUND, WaveError

RED = 0xFF0000
BLUE = 0x0000FF


@dataclass
class LevelDef:
    """What a level contains and how large the window showing it is."""

    field_bounds: Bounds2D = field(default_factory=Bounds2D)
    field_color: int = 0
    num_balls: int = 0
    num_faces: int = 0
    window_height: int = 0
    window_width: int = 0


@dataclass
class Level:
    """The objects that make up a loaded level."""

    definition: LevelDef
    field: Field
    just_ball: Ball
    balls: list[Ball] = field(default_factory=list)
    faces: list[Face] = field(default_factory=list)


def _set_ball_blue(target: Ball) -> None:
    target.color = BLUE


def _set_ball_red(target: Ball) -> None:
    target.color = RED


def _face_grid(bounds: Bounds2D, count: int) -> list[Face]:
    """Fill the bounds with a ``count`` by ``count`` grid of faces."""
    if count <= 0:
        return []
    size = bounds.dimensions()
    cell_w = size.x / count
    cell_h = size.y / count
    faces = []
    for row in range(count):
        for col in range(count):
            left = bounds.top_left.x + col * cell_w
            top = bounds.top_left.y + row * cell_h
            box = Bounds2D(Coord2D(left, top), Coord2D(left + cell_w, top + cell_h))
            faces.append(Face(box))
    return faces


class LevelManager:
    """Loads shared level assets and builds levels from their definitions.

    Every ball collision plays the loaded beep, if one could be loaded.
    """

    def __init__(self, inputs: InputSystem, sounds: Any,
                 sound_path: Optional[str], texture_path: Optional[str]) -> None:
        self.inputs = inputs
        self.sounds = sounds
        if texture_path is not None:
            face_module.init_textures(texture_path)

        self.sound_id = SOUND_NOSOUND
        if sounds is not None and sound_path is not None:
            try:
                self.sound_id = sounds.load(sound_path)
            except (WaveError, OSError, RuntimeError):
                self.sound_id = SOUND_NOSOUND

        ball_module.set_collide_callback(self._play_sound)

    def _play_sound(self, _ball: Ball) -> None:
        if self.sounds is not None:
            self.sounds.play(self.sound_id)

    def load(self, level_def: LevelDef) -> Level:
        """Create the field, the balls and faces, and the key-controlled ball."""
        level_field = Field(level_def.field_bounds, level_def.field_color)
        balls = [Ball(level_def.field_bounds) for _ in range(level_def.num_balls)]
        faces = _face_grid(level_def.field_bounds, level_def.num_faces)

        window_bounds = Bounds2D(
            Coord2D(0.0, 0.0),
            Coord2D(float(level_def.window_width), float(level_def.window_height)),
        )
        just_ball = Ball(window_bounds)

        self.inputs.set_callback(GameKey.Z, _set_ball_blue, just_ball)
        self.inputs.set_callback(GameKey.X, _set_ball_red, just_ball)

        return Level(level_def, level_field, just_ball, balls, faces)

    def unload(self, level: Optional[Level]) -> None:
        """Destroy every object the level created."""
        if level is None:
            return
        for face in level.faces:
            face.destroy()
        level.faces.clear()
        for item in level.balls:
            item.destroy()
        level.balls.clear()
        level.field.destroy()
        level.just_ball.destroy()

    def shutdown(self) -> None:
        """Stop reacting to collisions and release the loaded sound."""
        ball_module.clear_collide_callback()
        if self.sounds is not None:
            self.sounds.unload(self.sound_id)
        self.sound_id = SOUND_NOSOUND