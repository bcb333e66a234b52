import pytest

from partyframe import ball as ball_module
from partyframe.gameobject import disable_registration
from partyframe.geometry import Bounds2D, Coord2D
from partyframe.inputstate import InputSystem
from partyframe.levelmgr import LevelDef, LevelManager
from partyframe.objmgr import ObjectManager
from partyframe.sound import SOUND_NOSOUND, WaveError


class FakeSounds:
    def __init__(self, fail=False):
        self.fail = fail
        self.loaded = []
        self.played = []
        self.unloaded = []

    def load(self, filename):
        if self.fail:
            raise WaveError("unreadable")
        self.loaded.append(filename)
        return 7

    def play(self, sound_id):
        self.played.append(sound_id)

    def unload(self, sound_id):
        self.unloaded.append(sound_id)


@pytest.fixture(autouse=True)
def clean_globals():
    disable_registration()
    ball_module.clear_collide_callback()
    yield
    disable_registration()
    ball_module.clear_collide_callback()


def make_def(num_balls=0, num_faces=0):
    return LevelDef(
        field_bounds=Bounds2D(Coord2D(0.0, 0.0), Coord2D(974.0, 600.0)),
        field_color=0xFF0000FF,
        num_balls=num_balls,
        num_faces=num_faces,
        window_height=600,
        window_width=800,
    )


def make_manager(sounds=None):
    inputs = InputSystem()
    sounds = sounds if sounds is not None else FakeSounds()
    return LevelManager(inputs, sounds, "beep.wav", None), inputs, sounds


def test_sound_loaded_on_init():
    manager, _, sounds = make_manager()
    assert sounds.loaded == ["beep.wav"]
    assert manager.sound_id == 7


def test_failed_sound_load_gives_no_sound():
    manager, _, _ = make_manager(FakeSounds(fail=True))
    assert manager.sound_id == SOUND_NOSOUND


def test_load_builds_field_from_definition():
    manager, _, _ = make_manager()
    level_def = make_def()
    level = manager.load(level_def)
    assert level.definition is level_def
    assert level.field.color == 0xFF0000FF
    assert level.field.size == level_def.field_bounds.dimensions()
    assert level.field.position == level_def.field_bounds.center()


def test_just_ball_bounded_by_window():
    manager, _, _ = make_manager()
    level = manager.load(make_def())
    bounds = level.just_ball.bounds
    assert bounds.top_left == Coord2D(0.0, 0.0)
    assert bounds.bot_right == Coord2D(800.0, 600.0)
    assert level.just_ball.position == bounds.center()


def test_balls_and_face_grid_created():
    manager, _, _ = make_manager()
    level = manager.load(make_def(num_balls=3, num_faces=2))
    assert len(level.balls) == 3
    assert len(level.faces) == 4
    field_bounds = level.definition.field_bounds
    for face in level.faces:
        assert field_bounds.top_left.x <= face.position.x <= field_bounds.bot_right.x
        assert field_bounds.top_left.y <= face.position.y <= field_bounds.bot_right.y


def test_z_key_turns_ball_blue_and_x_red():
    manager, inputs, _ = make_manager()
    level = manager.load(make_def())
    inputs.key_update(0x5A, True)
    inputs.update()
    assert level.just_ball.color == 0x0000FF
    inputs.key_update(0x5A, False)
    inputs.key_update(0x58, True)
    inputs.update()
    assert level.just_ball.color == 0xFF0000


def test_collision_plays_sound():
    manager, _, sounds = make_manager()
    level = manager.load(make_def())
    level.just_ball.position.x = -1000.0
    level.just_ball.update(16)
    assert sounds.played == [7]


def test_objects_registered_and_unloaded():
    objects = ObjectManager(50)
    manager, _, _ = make_manager()
    level = manager.load(make_def(num_balls=2, num_faces=1))
    assert len(objects) == 2 + len(level.balls) + len(level.faces)
    manager.unload(level)
    assert len(objects) == 0
    assert level.balls == [] and level.faces == []
    objects.shutdown()


def test_shutdown_releases_sound_and_callback():
    manager, _, sounds = make_manager()
    level = manager.load(make_def())
    manager.shutdown()
    assert sounds.unloaded == [7]
    assert manager.sound_id == SOUND_NOSOUND
    level.just_ball.position.x = -1000.0
    level.just_ball.update(16)
    assert sounds.played == []