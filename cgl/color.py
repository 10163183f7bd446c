"""RGB colours with components in the range [0, 1]."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

_HEX_RE = re.compile(r"\s*(?:0[xX])?([0-9a-fA-F]+)")
_UINT_MAX = 0xFFFFFFFF


def _fmt(value: float) -> str:
    return f"{value:g}"


@dataclass(frozen=True)
class Color:
    """An RGB colour."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    WHITE: ClassVar["Color"]
    BLACK: ClassVar["Color"]

    @classmethod
    def from_bytes(cls, data) -> "Color":
        """Build a colour from three 0-255 byte values."""
        if len(data) < 3:
            raise ValueError("a colour needs three byte values")
        inv = 1.0 / 255.0
        return cls(data[0] * inv, data[1] * inv, data[2] * inv)

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """Parse a hexadecimal colour such as ``#ff8000``.

        A leading ``#`` is ignored; parsing stops at the first non-hex character.
        """
        if text.startswith("#"):
            text = text[1:]
        match = _HEX_RE.match(text)
        if match is None:
            raise ValueError(f"not a hexadecimal colour: {text!r}")
        rgb = min(int(match.group(1), 16), _UINT_MAX)
        return cls(
            ((rgb & 0xFF0000) >> 16) / 255.0,
            ((rgb & 0x00FF00) >> 8) / 255.0,
            (rgb & 0x0000FF) / 255.0,
        )

    def to_hex(self) -> str:
        """Hex digits of each clamped channel, written without zero padding."""
        channels = (
            int(max(0.0, min(255.0, 255.0 * value)))
            for value in (self.r, self.g, self.b)
        )
        return "".join(f"{channel:x}" for channel in channels)

    def __str__(self) -> str:
        return f"(r={_fmt(self.r)} g={_fmt(self.g)} b={_fmt(self.b)})"


Color.WHITE = Color(1.0, 1.0, 1.0)
Color.BLACK = Color(0.0, 0.0, 0.0)