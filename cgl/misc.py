"""Numeric constants, input codes and small helpers shared across the library."""

from __future__ import annotations

import math
import os
from enum import IntEnum, IntFlag

PI = 3.14159265358979323
EPS_D = 0.00000000001
EPS_F = 0.00001
INF_D = math.inf
INF_F = math.inf

__all__ = [
    "PI",
    "EPS_D",
    "EPS_F",
    "INF_D",
    "INF_F",
    "MouseButton",
    "Key",
    "EventType",
    "Modifier",
    "radians",
    "degrees",
    "clamp",
    "resolve_path",
]


class MouseButton(IntEnum):
    """Mouse buttons reported in mouse events."""

    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


class Key(IntEnum):
    """Non-character keyboard keys; letters use their ASCII codes."""

    ENTER = 257
    TAB = 258
    BACKSPACE = 259
    INSERT = 260
    DELETE = 261
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265
    PAGE_UP = 266
    PAGE_DOWN = 267
    PRINT_SCREEN = 283


class EventType(IntEnum):
    """Kinds of key and button events."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class Modifier(IntFlag):
    """Modifier keys held down during an event."""

    SHIFT = 0x0001
    CTRL = 0x0002
    ALT = 0x0004
    SUPER = 0x0008


def radians(deg):
    """Convert degrees to radians."""
    return deg * (PI / 180)


def degrees(rad):
    """Convert radians to degrees."""
    return rad * (180 / PI)


def clamp(x, lo, hi):
    """Clamp ``x`` into the closed range ``[lo, hi]``."""
    return min(max(x, lo), hi)


def resolve_path(filename) -> str:
    """Return the absolute, symlink-free path of an existing file.

    Raises FileNotFoundError if the path does not exist.
    """
    path = os.fspath(filename)
    if not os.path.exists(path):
        raise FileNotFoundError(f"no such file or directory: {path!r}")
    return os.path.realpath(path)