"""Base class for user renderers driven by a viewer."""

from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = ["Renderer"]

_RELEASE = 0
_PRESS = 1


class Renderer(ABC):
    """A user-space renderer.

    The viewer calls :meth:`init` once, :meth:`render` every frame and
    :meth:`resize` when the drawing area changes. Input events are passed
    on to the event methods; unless overridden they only keep track of the
    input state (cursor position, total scroll, buttons and keys held).
    """

    use_hdpi: bool = False
    cursor_position: tuple[float, float] = (0.0, 0.0)
    scroll_offset: tuple[float, float] = (0.0, 0.0)

    @abstractmethod
    def init(self) -> None:
        """Prepare the renderer before its first frame."""

    @abstractmethod
    def render(self) -> None:
        """Draw one frame."""

    @abstractmethod
    def resize(self, w, h) -> None:
        """Respond to a new drawing area size."""

    @abstractmethod
    def name(self) -> str:
        """A name for the renderer, shown in the window title."""

    @abstractmethod
    def info(self) -> str:
        """A short description of the renderer."""

    @property
    def mouse_buttons_down(self) -> set[int]:
        """Mouse buttons currently held."""
        return self.__dict__.setdefault("_mouse_buttons_down", set())

    @property
    def keys_down(self) -> set[int]:
        """Keyboard keys currently held."""
        return self.__dict__.setdefault("_keys_down", set())

    @staticmethod
    def _track(held: set[int], key, event) -> None:
        if event == _PRESS:
            held.add(key)
        elif event == _RELEASE:
            held.discard(key)

    def cursor_event(self, x, y) -> None:
        """Cursor moved to window coordinates ``(x, y)``, origin top left."""
        self.cursor_position = (x, y)

    def scroll_event(self, offset_x, offset_y) -> None:
        """Mouse wheel scrolled; offsets are accumulated."""
        sx, sy = self.scroll_offset
        self.scroll_offset = (sx + offset_x, sy + offset_y)

    def mouse_event(self, key, event, mods) -> None:
        """Mouse button pressed or released."""
        self._track(self.mouse_buttons_down, key, event)

    def keyboard_event(self, key, event, mods) -> None:
        """Key pressed, released or held."""
        self._track(self.keys_down, key, event)

    def use_hdpi_render_target(self) -> None:
        """Tell the renderer the target is an HDPI display."""
        self.use_hdpi = True