"""Colors the engine recognizes."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Text colors."""

    UNDEFINED_COLOR = -1
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7
    CUSTOM = 8


COLOR_DEFAULT = Color.WHITE