"""Example renderers: event handling, text display, a triangle and a 3D template scene."""

from __future__ import annotations

import math
from dataclasses import dataclass

from cgl.color import Color
from cgl.misc import PI, EventType, Key, MouseButton
from cgl.osdtext import OSDLine, OSDText
from cgl.renderer import Renderer
from cgl.vector import Vector3D, cross

__all__ = [
    "EventDisplay",
    "TextDrawer",
    "TriangleDrawer",
    "Camera",
    "TemplateRenderer",
    "TemplateFrame",
    "coordinate_lines",
    "TRIANGLE_COLOR",
    "TRIANGLE_VERTICES",
]

GREETING = "Hi there!"
DEFAULT_FONT_SIZE = 16

TRIANGLE_COLOR = (0.1, 0.2, 0.3)
TRIANGLE_VERTICES = (
    Vector3D(0.0, 0.5, 0.0),
    Vector3D(-0.5, -0.5, 0.0),
    Vector3D(0.5, -0.5, 0.0),
)

_EVENT_PREFIXES = {
    EventType.PRESS: "You just pressed: ",
    EventType.RELEASE: "You just released: ",
    EventType.REPEAT: "You are holding: ",
}


def _key_message(key, event) -> str:
    """Describe a keyboard event the way the example renderers display it."""
    prefix = _EVENT_PREFIXES.get(event, "")
    if key == Key.ENTER:
        return prefix + "Enter"
    return prefix + chr(key % 256)


def _screen_anchor(x, y, w, h) -> tuple[float, float]:
    """Map window coordinates (origin top left) to screen space [-1, 1]."""
    return 2 * (x - 0.5 * w) / w, 2 * (0.5 * h - y) / h


class _TextRenderer(Renderer):
    """A renderer with one on-screen line of text."""

    def __init__(self):
        self.text_mgr = OSDText()
        self.line_id = -1
        self.size = DEFAULT_FONT_SIZE
        self.width = 0
        self.height = 0

    def init(self) -> None:
        self.text_mgr.use_hdpi = self.use_hdpi
        self.size = DEFAULT_FONT_SIZE
        self.line_id = self.text_mgr.add_line(
            0.0, 0.0, GREETING, self.size, Color.WHITE
        )

    def render(self) -> list[OSDLine]:
        return self.text_mgr.render()

    def resize(self, w, h) -> None:
        self.width = w
        self.height = h
        self.text_mgr.resize(w, h)

    def _scroll_size(self, offset_x, offset_y) -> None:
        self.size += int(offset_y + offset_x)
        self.text_mgr.set_size(self.line_id, self.size)


class EventDisplay(_TextRenderer):
    """Shows the last key event; the text can be dragged and resized."""

    def __init__(self):
        super().__init__()
        self.left_down = False

    def init(self) -> None:
        super().init()

    def render(self) -> list[OSDLine]:
        return super().render()

    def resize(self, w, h) -> None:
        super().resize(w, h)

    def name(self) -> str:
        return "Event handling example"

    def info(self) -> str:
        return "Event handling example"

    def cursor_event(self, x, y) -> None:
        if self.left_down:
            ax, ay = _screen_anchor(x, y, self.width, self.height)
            self.text_mgr.set_anchor(self.line_id, ax, ay)

    def scroll_event(self, offset_x, offset_y) -> None:
        self._scroll_size(offset_x, offset_y)

    def mouse_event(self, key, event, mods) -> None:
        if key == MouseButton.LEFT:
            if event == EventType.PRESS:
                self.left_down = True
            if event == EventType.RELEASE:
                self.left_down = False

    def keyboard_event(self, key, event, mods) -> None:
        self.text_mgr.set_text(self.line_id, _key_message(key, event))


class TextDrawer(_TextRenderer):
    """A line of text that follows the cursor and grows with scrolling."""

    def init(self) -> None:
        super().init()

    def render(self) -> list[OSDLine]:
        return super().render()

    def resize(self, w, h) -> None:
        super().resize(w, h)

    def name(self) -> str:
        return "Text manager example"

    def info(self) -> str:
        return "Text manager example"

    def cursor_event(self, x, y) -> None:
        ax, ay = _screen_anchor(x, y, self.width, self.height)
        self.text_mgr.set_anchor(self.line_id, ax, ay)

    def scroll_event(self, offset_x, offset_y) -> None:
        self._scroll_size(offset_x, offset_y)


class TriangleDrawer(Renderer):
    """Draws one triangle, toggled on and off by the R key."""

    def __init__(self):
        self.should_draw = False
        self.width = 0
        self.height = 0

    def init(self) -> None:
        """Nothing to prepare."""

    def render(self) -> list[tuple[tuple[float, float, float], tuple[Vector3D, ...]]]:
        """The triangles to draw, each as ``(rgb, vertices)``."""
        if not self.should_draw:
            return []
        return [(TRIANGLE_COLOR, tuple(Vector3D(*v) for v in TRIANGLE_VERTICES))]

    def resize(self, w, h) -> None:
        self.width = w
        self.height = h

    def name(self) -> str:
        return "Drawing example"

    def info(self) -> str:
        return "Drawing example"

    def keyboard_event(self, key, event, mods) -> None:
        if key == ord("R"):
            self.should_draw = not self.should_draw


class Camera:
    """An orbiting camera looking at the origin from distance ``r``."""

    FIELD_OF_VIEW = 50.0
    ASPECT = 1.0
    NEAR = 0.01
    FAR = 100.0

    def __init__(self):
        self.r = 5.0
        self.phi = PI / 4
        self.theta = PI / 4
        self.pos = Vector3D()
        self.dir = Vector3D()
        self.up = Vector3D()
        self.update()

    def update(self) -> None:
        """Recompute direction, up vector and position from the angles and distance."""
        self.dir = -Vector3D(
            math.sin(self.phi), math.cos(self.theta), math.cos(self.phi)
        ).unit()
        self.up = cross(self.dir, cross(Vector3D(0.0, 1.0, 0.0), self.dir)).unit()
        self.pos = -self.dir * self.r

    def look_at(self) -> tuple[Vector3D, Vector3D, Vector3D]:
        """The ``(eye, center, up)`` triple of the view."""
        center = self.pos + self.dir * self.r
        return Vector3D(*self.pos), center, Vector3D(*self.up)


def coordinate_lines() -> list[tuple[tuple[float, float, float, float], Vector3D, Vector3D]]:
    """Line segments of the coordinate axes and a ground grid, as ``(rgba, start, end)``."""
    origin = Vector3D(0.0, 0.0, 0.0)
    lines = [
        ((1.0, 0.0, 0.0, 1.0), origin, Vector3D(1.0, 0.0, 0.0)),
        ((0.0, 1.0, 0.0, 1.0), origin, Vector3D(0.0, 1.0, 0.0)),
        ((0.0, 0.0, 1.0, 1.0), origin, Vector3D(0.0, 0.0, 1.0)),
    ]
    grey = (0.5, 0.5, 0.5, 0.5)
    lines.extend(
        (grey, Vector3D(x - 4, 0.0, -4.0), Vector3D(x - 4, 0.0, 4.0)) for x in range(9)
    )
    lines.extend(
        (grey, Vector3D(-4.0, 0.0, z - 4), Vector3D(4.0, 0.0, z - 4)) for z in range(9)
    )
    return lines


@dataclass
class TemplateFrame:
    """Everything the template renderer draws in one frame."""

    eye: Vector3D
    center: Vector3D
    up: Vector3D
    lines: list
    text: list[OSDLine]


class TemplateRenderer(_TextRenderer):
    """A 3D scene with an orbiting camera and a text line following the cursor."""

    def __init__(self):
        super().__init__()
        self.left_down = False
        self.camera = Camera()
        self.mouse_x = 0.0
        self.mouse_y = 0.0

    def init(self) -> None:
        super().init()

    def render(self) -> TemplateFrame:
        eye, center, up = self.camera.look_at()
        return TemplateFrame(eye, center, up, coordinate_lines(), self.text_mgr.render())

    def resize(self, w, h) -> None:
        super().resize(w, h)

    def name(self) -> str:
        return "Template Renderer"

    def info(self) -> str:
        return "Template Renderer"

    def cursor_event(self, x, y) -> None:
        w, h = self.width, self.height
        if self.left_down:
            self.camera.phi += (x - self.mouse_x) / w * PI
            self.camera.theta -= (y - self.mouse_y) / w * PI
            self.camera.update()
        self.mouse_x = x
        self.mouse_y = y
        anchor_x = 2 * (x + 10 - 0.5 * w) / w
        anchor_y = 2 * (0.5 * h - y + 10) / h
        self.text_mgr.set_anchor(self.line_id, anchor_x, anchor_y)

    def scroll_event(self, offset_x, offset_y) -> None:
        self.camera.r += (offset_x + offset_y) * self.camera.r * 0.1
        self.camera.update()

    def mouse_event(self, key, event, mods) -> None:
        if key == MouseButton.LEFT:
            if event == EventType.PRESS:
                self.left_down = True
            if event == EventType.RELEASE:
                self.left_down = False

    def keyboard_event(self, key, event, mods) -> None:
        self.text_mgr.set_text(self.line_id, _key_message(key, event))