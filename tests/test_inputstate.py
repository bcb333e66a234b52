import pytest

from partyframe.geometry import Coord2D
from partyframe.inputstate import KEY_CODES, GameKey, InputButton, InputSystem


@pytest.mark.parametrize(
    "key, code",
    [(GameKey.X, 0x58), (GameKey.Z, 0x5A), (GameKey.ESC, 0x1B)],
)
def test_key_codes_match_virtual_keys(key, code):
    inputs = InputSystem()
    calls = []
    inputs.set_callback(key, calls.append, key)
    inputs.key_update(code, True)
    inputs.update()
    assert KEY_CODES[key] == code
    assert calls == [key]


def test_key_state_round_trip():
    inputs = InputSystem()
    assert inputs.key_pressed(0x41) is False
    inputs.key_update(0x41, True)
    assert inputs.key_pressed(0x41) is True
    inputs.key_update(0x41, False)
    assert inputs.key_pressed(0x41) is False


@pytest.mark.parametrize("code", [-1, 256])
def test_out_of_range_key_rejected(code):
    inputs = InputSystem()
    with pytest.raises(ValueError):
        inputs.key_update(code, True)
    with pytest.raises(ValueError):
        inputs.key_pressed(code)


def test_mouse_state_round_trip():
    inputs = InputSystem()
    inputs.mouse_update_position(Coord2D(12, 34))
    inputs.mouse_update_button(InputButton.LEFT, True)
    assert inputs.mouse_position() == Coord2D(12, 34)
    assert inputs.mouse_pressed(InputButton.LEFT) is True
    assert inputs.mouse_pressed(InputButton.RIGHT) is False


def test_reset_clears_state():
    inputs = InputSystem()
    inputs.key_update(0x26, True)
    inputs.mouse_update_button(InputButton.RIGHT, True)
    inputs.mouse_update_position(Coord2D(5, 5))
    inputs.reset()
    assert inputs.key_pressed(0x26) is False
    assert inputs.mouse_pressed(InputButton.RIGHT) is False
    assert inputs.mouse_position() == Coord2D(0, 0)


def test_callback_fires_once_per_press():
    inputs = InputSystem()
    calls = []
    inputs.set_callback(GameKey.Z, calls.append, "ball")
    inputs.key_update(KEY_CODES[GameKey.Z], True)
    inputs.update()
    inputs.update()
    assert calls == ["ball"]
    inputs.key_update(KEY_CODES[GameKey.Z], False)
    inputs.update()
    inputs.key_update(KEY_CODES[GameKey.Z], True)
    inputs.update()
    assert calls == ["ball", "ball"]


def test_unbound_pressed_key_raises():
    inputs = InputSystem()
    inputs.key_update(KEY_CODES[GameKey.ESC], True)
    with pytest.raises(RuntimeError):
        inputs.update()


def test_clear_callback_makes_press_an_error():
    inputs = InputSystem()
    calls = []
    inputs.set_callback(GameKey.UP, calls.append, 1)
    inputs.clear_callback(GameKey.UP)
    inputs.key_update(KEY_CODES[GameKey.UP], True)
    with pytest.raises(RuntimeError):
        inputs.update()
    assert calls == []


def test_clear_all_callbacks():
    inputs = InputSystem()
    calls = []
    for key in GameKey:
        inputs.set_callback(key, calls.append, key)
    inputs.clear_all_callbacks()
    inputs.key_update(KEY_CODES[GameKey.X], True)
    with pytest.raises(RuntimeError):
        inputs.update()
    assert calls == []


def test_invalid_game_key_rejected():
    inputs = InputSystem()
    with pytest.raises(ValueError):
        inputs.set_callback(len(GameKey), print, None)


def test_unmapped_key_does_not_trigger():
    inputs = InputSystem()
    inputs.key_update(0x41, True)
    inputs.update()
    assert inputs.key_pressed(0x41) is True