import math

import pytest

from cgl.color import Color
from cgl.examples import (
    TRIANGLE_COLOR,
    TRIANGLE_VERTICES,
    Camera,
    EventDisplay,
    TemplateRenderer,
    TextDrawer,
    TriangleDrawer,
    coordinate_lines,
)
from cgl.misc import PI, EventType, Key, MouseButton
from cgl.vector import Vector3D, dot


def _only_line(renderer):
    lines = list(renderer.text_mgr)
    assert len(lines) == 1
    return lines[0]


@pytest.fixture
def event_display():
    r = EventDisplay()
    r.init()
    r.resize(200, 100)
    return r


def test_event_display_names():
    r = EventDisplay()
    assert r.name() == "Event handling example"
    assert r.info() == "Event handling example"


def test_init_adds_greeting(event_display):
    line = _only_line(event_display)
    assert line.text == "Hi there!"
    assert (line.x, line.y) == (0.0, 0.0)
    assert line.size == 16
    assert line.color == Color.WHITE


def test_hdpi_doubles_font_size():
    r = TextDrawer()
    r.use_hdpi_render_target()
    r.init()
    assert _only_line(r).size == 32


def test_cursor_ignored_without_drag(event_display):
    event_display.cursor_event(0, 0)
    line = _only_line(event_display)
    assert (line.x, line.y) == (0.0, 0.0)


def test_drag_moves_anchor(event_display):
    event_display.mouse_event(MouseButton.LEFT, EventType.PRESS, 0)
    event_display.cursor_event(0, 0)
    line = _only_line(event_display)
    assert line.x == pytest.approx(-1.0)
    assert line.y == pytest.approx(1.0)
    event_display.mouse_event(MouseButton.LEFT, EventType.RELEASE, 0)
    event_display.cursor_event(100, 50)
    assert _only_line(event_display).x == pytest.approx(-1.0)


def test_right_button_does_not_drag(event_display):
    event_display.mouse_event(MouseButton.RIGHT, EventType.PRESS, 0)
    assert event_display.left_down is False


def test_scroll_changes_size(event_display):
    event_display.scroll_event(0.5, 2.5)
    assert _only_line(event_display).size == 16 + 3
    assert event_display.size == 16 + 3


@pytest.mark.parametrize(
    "key, event, expected",
    [
        (ord("A"), EventType.PRESS, "You just pressed: A"),
        (Key.ENTER, EventType.RELEASE, "You just released: Enter"),
        (ord("Q"), EventType.REPEAT, "You are holding: Q"),
    ],
)
def test_keyboard_messages(event_display, key, event, expected):
    event_display.keyboard_event(key, event, 0)
    assert _only_line(event_display).text == expected


def test_text_drawer_follows_cursor():
    r = TextDrawer()
    r.init()
    r.resize(200, 100)
    r.cursor_event(100, 50)
    line = _only_line(r)
    assert line.x == pytest.approx(0.0)
    assert line.y == pytest.approx(0.0)
    assert r.name() == "Text manager example"


def test_triangle_toggle():
    r = TriangleDrawer()
    r.init()
    assert r.render() == []
    r.keyboard_event(ord("R"), EventType.PRESS, 0)
    [(color, vertices)] = r.render()
    assert color == TRIANGLE_COLOR == (0.1, 0.2, 0.3)
    assert vertices == TRIANGLE_VERTICES
    r.keyboard_event(ord("R"), EventType.PRESS, 0)
    assert r.render() == []


def test_triangle_other_keys_ignored():
    r = TriangleDrawer()
    r.keyboard_event(ord("X"), EventType.PRESS, 0)
    assert r.render() == []
    assert r.name() == "Drawing example"


def test_coordinate_lines():
    lines = coordinate_lines()
    assert len(lines) == 3 + 9 + 9
    for (color, start, end), axis in zip(lines[:3], range(3)):
        assert start == Vector3D(0.0, 0.0, 0.0)
        assert end[axis] == 1.0
        assert color[axis] == 1.0
    for _, start, end in lines[3:]:
        assert start.y == 0.0 and end.y == 0.0
        assert (end - start).norm() == pytest.approx(8.0)


def test_camera_invariants():
    cam = Camera()
    assert cam.dir.norm() == pytest.approx(1.0)
    assert dot(cam.up, cam.dir) == pytest.approx(0.0, abs=1e-12)
    assert cam.pos.norm() == pytest.approx(cam.r)
    eye, center, up = cam.look_at()
    assert center.norm() == pytest.approx(0.0, abs=1e-12)
    assert eye == cam.pos


def test_template_scroll_zooms():
    r = TemplateRenderer()
    r.init()
    before = r.camera.r
    r.scroll_event(1.0, 0.0)
    assert r.camera.r == pytest.approx(before * 1.1)
    assert r.camera.pos.norm() == pytest.approx(r.camera.r)


def test_template_drag_rotates():
    r = TemplateRenderer()
    r.init()
    r.resize(200, 100)
    r.cursor_event(0, 0)
    phi = r.camera.phi
    r.mouse_event(MouseButton.LEFT, EventType.PRESS, 0)
    r.cursor_event(50, 0)
    assert r.camera.phi == pytest.approx(phi + 50 / 200 * PI)
    assert (r.mouse_x, r.mouse_y) == (50, 0)


def test_template_anchor_offset():
    r = TemplateRenderer()
    r.init()
    r.resize(200, 100)
    r.cursor_event(90, 60)
    line = _only_line(r)
    assert line.x == pytest.approx(0.0)
    assert line.y == pytest.approx(0.0)


def test_template_render_frame():
    r = TemplateRenderer()
    r.init()
    frame = r.render()
    assert len(frame.lines) == len(coordinate_lines())
    assert [line.text for line in frame.text] == ["Hi there!"]
    assert math.isclose(frame.eye.norm(), r.camera.r)
    assert r.name() == "Template Renderer"