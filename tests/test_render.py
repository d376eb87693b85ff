import math

import pygame
import pytest

from aimlab.canvas import Canvas
from aimlab.render import (
    BACKGROUND,
    BUTTON_COLOUR,
    CROSSHAIR_COLOUR,
    CURSOR_COLOUR,
    TARGET_COLOUR,
    Cursor,
    Renderer,
    project,
)
from aimlab.targets import Target, TargetSlots
from aimlab.transform import look_at, perspective
from aimlab.vector import Vec3
from aimlab.world import World


def _camera_matrices():
    view = look_at((0.0, 0.0, 0.0), (0.0, 0.0, -1.0), (0.0, 1.0, 0.0))
    projection = perspective(math.radians(45.0), 800 / 600, 0.1, 100.0)
    return view, projection


@pytest.fixture
def renderer(tmp_path):
    r = Renderer(pygame.Surface((800, 600)), tmp_path)
    r.clear()
    return r


def test_project_point_ahead_lands_in_centre():
    view, projection = _camera_matrices()
    assert project((0.0, 0.0, -10.0), view, projection, 800, 600) == pytest.approx((400, 300))


def test_project_point_behind_is_none():
    view, projection = _camera_matrices()
    assert project((0.0, 0.0, 10.0), view, projection, 800, 600) is None


def test_project_keeps_left_right_and_up_down():
    view, projection = _camera_matrices()
    x, y = project((1.0, 1.0, -10.0), view, projection, 800, 600)
    assert x > 400
    assert y < 300


def test_cursor_model_places_origin_at_position():
    cursor = Cursor()
    cursor.update_position(120, 80)
    assert cursor.position == (120.0, 80.0)
    origin = cursor.model_matrix @ (0.0, 0.0, 0.0, 1.0)
    assert tuple(origin[:2]) == pytest.approx((120.0, 80.0))


def test_cursor_segments_centre_on_position():
    cursor = Cursor()
    cursor.update_position(50, 60)
    segments = cursor.segments()
    assert len(segments) == 2
    for (ax, ay), (bx, by) in segments:
        assert ((ax + bx) / 2, (ay + by) / 2) == pytest.approx((50.0, 60.0))


def test_clear_fills_background(renderer):
    assert renderer.surface.get_at((10, 10))[:3] == BACKGROUND


def test_crosshair_crosses_centre(renderer):
    renderer.draw_crosshair()
    assert renderer.surface.get_at((400, 300))[:3] == CROSSHAIR_COLOUR
    assert renderer.surface.get_at((10, 10))[:3] == BACKGROUND


def test_cursor_drawn_at_position(renderer):
    cursor = Cursor()
    cursor.update_position(100, 150)
    renderer.draw_cursor(cursor)
    assert renderer.surface.get_at((100, 150))[:3] == CURSOR_COLOUR


def test_world_draws_target_ahead(renderer):
    target = Target(Vec3(0.0, 0.0, -10.0), TargetSlots([]))
    world = World(targets=[target])
    renderer.draw_world(world)
    assert renderer.surface.get_at((420, 320))[:3] == TARGET_COLOUR
    assert renderer.surface.get_at((5, 5))[:3] == BACKGROUND
    assert renderer.surface.get_at((400, 300))[:3] == CROSSHAIR_COLOUR


def test_canvas_ui_box_is_drawn_with_y_upwards(renderer):
    canvas = Canvas()
    canvas.add_ui_box(200.0, 100.0, 0.0, 1.0, 1.0, "BUTTON")
    renderer.draw_canvas(canvas)
    assert renderer.surface.get_at((200, 500))[:3] == BUTTON_COLOUR
    assert renderer.surface.get_at((200, 100))[:3] == BACKGROUND