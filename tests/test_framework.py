import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from partyframe.application import Application
from partyframe.framework import Window, init_window
from partyframe.inputstate import GameKey, InputButton, InputSystem


@pytest.fixture
def calls():
    return {"update": [], "draw": 0}


@pytest.fixture
def window(calls):
    def on_draw():
        calls["draw"] += 1
        win.surface.fill((255, 0, 0), pygame.Rect(0, 0, 4, 4))

    app = Application(
        "Framework1",
        draw_func=on_draw,
        update_func=calls["update"].append,
        width=200,
        height=100,
    )
    inputs = InputSystem()
    win = init_window(app, inputs)
    yield win
    win.shutdown()


def test_window_matches_application_settings(window):
    assert window.surface.get_size() == (200, 100)
    assert pygame.display.get_caption()[0] == "Framework1"
    assert window.visible is True


def test_key_events_update_virtual_key_state(window):
    assert window.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_x))
    assert window.inputs.key_pressed(0x58) is True
    window.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_x))
    assert window.inputs.key_pressed(0x58) is False


def test_arrow_key_maps_to_up_code(window):
    window.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP))
    assert window.inputs.key_pressed(0x26) is True


def test_key_press_reaches_bound_callback(window):
    hits = []
    window.inputs.set_callback(GameKey.Z, hits.append, "ctx")
    window.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_z))
    window.inputs.update()
    assert hits == ["ctx"]


def test_mouse_events(window):
    window.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(12, 34), rel=(0, 0), buttons=(0, 0, 0)))
    position = window.inputs.mouse_position()
    assert (position.x, position.y) == (12.0, 34.0)

    window.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0)))
    assert window.inputs.mouse_pressed(InputButton.LEFT) is True
    assert window.inputs.mouse_pressed(InputButton.RIGHT) is False

    window.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(0, 0)))
    window.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=(0, 0)))
    assert window.inputs.mouse_pressed(InputButton.RIGHT) is True
    assert window.inputs.mouse_pressed(InputButton.LEFT) is False


def test_quit_event_stops_loop(window):
    assert window.handle_event(pygame.event.Event(pygame.QUIT)) is False


def test_send_terminate_ends_update(window):
    window.send_terminate()
    assert window.update() is False


def test_update_runs_app_and_draws(window, calls):
    assert window.update() is True
    assert len(calls["update"]) == 1
    assert calls["update"][0] >= 0
    assert calls["draw"] == 1
    assert tuple(window.surface.get_at((0, 0)))[:3] == (255, 0, 0)
    assert tuple(window.surface.get_at((10, 10)))[:3] == (0, 0, 0)


def test_minimized_window_skips_frames(window, calls):
    window.handle_event(pygame.event.Event(pygame.WINDOWMINIMIZED))
    assert window.visible is False
    assert window.update() is True
    assert calls["update"] == []
    assert calls["draw"] == 0

    window.handle_event(pygame.event.Event(pygame.WINDOWRESTORED))
    assert window.visible is True


def test_change_resolution_rejects_bad_size(window):
    with pytest.raises(ValueError):
        window.change_resolution(0, 10, 32)
    with pytest.raises(ValueError):
        window.change_resolution(10, 10, 0)


def test_shutdown_clears_input_state():
    inputs = InputSystem()
    win = Window(Application("t", width=64, height=48), inputs)
    win.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    assert inputs.key_pressed(0x1B) is True
    win.shutdown()
    assert inputs.key_pressed(0x1B) is False
    assert pygame.display.get_init() is False