"""On-screen text display: a list of anchored, coloured lines of text."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Iterator, Optional

from cgl.color import Color

__all__ = ["OSDLine", "OSDText", "DrawLine"]


@dataclass
class OSDLine:
    """One line of on-screen text.

    ``x`` and ``y`` are the anchor in screen space, where both axes run
    from -1 to 1 (left to right, bottom to top).
    """

    id: int
    x: float
    y: float
    text: str = ""
    size: int = 16
    color: Color = Color.WHITE


DrawLine = Callable[[OSDLine, float, float], None]


def _check_size(size) -> int:
    size = int(size)
    if size < 0:
        raise ValueError(f"font size must not be negative, got {size}")
    return size


class OSDText:
    """A collection of text lines drawn on top of a scene.

    Drawing itself is done by the ``draw`` attribute, a callable given each
    line together with the horizontal and vertical pixel-to-screen scale
    factors set by :meth:`resize`. It starts as ``None``, in which case
    :meth:`render` only reports the lines. Lines are drawn in the order they
    were added.
    """

    def __init__(self, use_hdpi: bool = False):
        self.use_hdpi = bool(use_hdpi)
        self.draw: Optional[DrawLine] = None
        self.scale: Optional[tuple[float, float]] = None
        self._lines: list[OSDLine] = []
        self._next_id = 0

    def render(self) -> list[OSDLine]:
        """Draw every line and return copies of the lines drawn, in order.

        Raises RuntimeError if a draw callable is set but :meth:`resize`
        has not been called yet.
        """
        snapshot = [replace(line) for line in self._lines]
        if self.draw is not None:
            if self.scale is None:
                raise RuntimeError("resize must be called before rendering")
            sx, sy = self.scale
            for line in snapshot:
                self.draw(replace(line), sx, sy)
        return snapshot

    def clear(self) -> None:
        """Remove all lines."""
        self._lines.clear()

    def resize(self, w, h) -> None:
        """Update the scale factors after the drawing area changed size."""
        if w <= 0 or h <= 0:
            raise ValueError("width and height must be positive")
        self.scale = (2.0 / w, 2.0 / h)

    def add_line(self, x, y, text="", size=16, color=Color.WHITE) -> int:
        """Add a line and return its id; sizes are doubled on HDPI displays."""
        size = _check_size(size)
        if self.use_hdpi:
            size *= 2
        line = OSDLine(self._next_id, float(x), float(y), str(text), size, color)
        self._next_id += 1
        self._lines.append(line)
        return line.id

    def _find(self, line_id) -> Optional[OSDLine]:
        return next((line for line in self._lines if line.id == line_id), None)

    def del_line(self, line_id) -> None:
        """Remove a line; an unknown id is ignored."""
        line = self._find(line_id)
        if line is not None:
            self._lines.remove(line)

    def set_anchor(self, line_id, x, y) -> None:
        """Move a line's anchor; an unknown id is ignored."""
        line = self._find(line_id)
        if line is not None:
            line.x = float(x)
            line.y = float(y)

    def set_text(self, line_id, text) -> None:
        """Replace a line's text; an unknown id is ignored."""
        line = self._find(line_id)
        if line is not None:
            line.text = str(text)

    def set_size(self, line_id, size) -> None:
        """Change a line's font size; an unknown id is ignored."""
        size = _check_size(size)
        line = self._find(line_id)
        if line is not None:
            line.size = size

    def set_color(self, line_id, color) -> None:
        """Change a line's colour; an unknown id is ignored."""
        line = self._find(line_id)
        if line is not None:
            line.color = color

    def __iter__(self) -> Iterator[OSDLine]:
        return iter(list(self._lines))

    def __len__(self) -> int:
        return len(self._lines)