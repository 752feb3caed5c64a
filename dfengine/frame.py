"""A single frame of a sprite."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .color import COLOR_DEFAULT, Color
from .display_manager import DM
from .vector import Vector


@dataclass
class Frame:
    """A ``width`` x ``height`` block of characters stored row by row in ``string``."""

    width: int = 0
    height: int = 0
    string: str = ""

    def draw(
        self,
        position: Vector,
        color: Color = COLOR_DEFAULT,
        transparency: Optional[str] = None,
    ) -> None:
        """Draw the frame centred at ``position``.

        Characters equal to ``transparency`` are skipped. Raises ValueError
        if the frame string is empty or shorter than width * height.
        """
        if not self.string:
            raise ValueError("frame string is empty")
        if len(self.string) < self.width * self.height:
            raise ValueError("frame string is shorter than width * height")
        x_offset = self.width // 2
        y_offset = self.height // 2
        for y in range(self.height):
            row = self.string[y * self.width:(y + 1) * self.width]
            for x, ch in enumerate(row):
                if transparency and ch == transparency:
                    continue
                DM.draw_ch(
                    Vector(position.x + x - x_offset, position.y + y - y_offset), ch, color
                )