import pygame
import pytest

from partyframe import ball as ball_module
from partyframe import rng, shape
from partyframe.ball import Ball
from partyframe.gameobject import disable_registration
from partyframe.geometry import Bounds2D, Coord2D
from partyframe.objmgr import ObjectManager


@pytest.fixture(autouse=True)
def _clean_state():
    disable_registration()
    ball_module.clear_collide_callback()
    rng.seed(1234)
    yield
    ball_module.clear_collide_callback()
    disable_registration()


def _bounds(size=200.0):
    return Bounds2D(Coord2D(0.0, 0.0), Coord2D(size, size))


def test_new_ball_starts_at_centre_with_limits():
    bounds = _bounds()
    ball = Ball(bounds)
    assert ball.position == bounds.center()
    assert -5.0 <= ball.velocity.x <= 5.0
    assert -5.0 <= ball.velocity.y <= 5.0
    assert 10.0 <= ball.radius <= 50.0
    assert 0 <= ball.color < 1 << 24


def test_randomize_color_stays_in_24_bits():
    ball = Ball(_bounds())
    for _ in range(50):
        ball.randomize_color()
        assert 0 <= ball.color < 1 << 24


def test_left_wall_bounce_fires_callback():
    hits = []
    ball_module.set_collide_callback(hits.append)
    ball = Ball(_bounds())
    ball.velocity = Coord2D(-1.0, 0.0)
    ball.position = Coord2D(ball.radius + 0.5, 100.0)
    ball.update(16)
    assert ball.velocity.x == 1.0
    assert ball.position.x == pytest.approx(ball.radius)
    assert hits == [ball]


def test_bottom_wall_bounce():
    ball = Ball(_bounds())
    ball.velocity = Coord2D(0.0, 2.0)
    ball.position = Coord2D(100.0, 200.0 - ball.radius - 1.0)
    ball.update(16)
    assert ball.velocity.y == -2.0
    assert ball.position.y == pytest.approx(200.0 - ball.radius)


def test_cleared_callback_is_not_called():
    hits = []
    ball_module.set_collide_callback(hits.append)
    ball_module.clear_collide_callback()
    ball = Ball(_bounds())
    ball.velocity = Coord2D(-1.0, 0.0)
    ball.position = Coord2D(ball.radius, 100.0)
    ball.update(16)
    assert hits == []
    assert ball.velocity.x == 1.0


def test_free_movement_inside_bounds():
    ball = Ball(_bounds())
    ball.velocity = Coord2D(1.0, -1.0)
    ball.position = Coord2D(100.0, 100.0)
    ball.radius = 10.0
    ball.update(16)
    assert ball.position == Coord2D(101.0, 99.0)


def test_ball_registers_with_manager():
    manager = ObjectManager(4)
    ball = Ball(_bounds())
    assert len(manager) == 1
    ball.destroy()
    assert len(manager) == 0
    manager.shutdown()


def test_draw_uses_ball_colour():
    surface = pygame.Surface((300, 300))
    ball = Ball(_bounds(300.0))
    ball.draw(surface)
    expected = shape.unpack_rgb(ball.color)
    assert tuple(surface.get_at((150, 150)))[:3] == expected
    assert tuple(surface.get_at((60, 60)))[:3] == expected