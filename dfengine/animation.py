"""Animation state for a sprite: current frame and slowdown counter."""

from __future__ import annotations

from typing import Optional

from .box import Box
from .sprite import Sprite
from .vector import Vector

FROZEN = -1


class Animation:
    """Tracks which frame of a sprite to show and when to advance.

    A ``slowdown_count`` of -1 freezes the animation.
    """

    def __init__(self, sprite: Optional[Sprite] = None, name: str = "") -> None:
        self._sprite: Optional[Sprite] = None
        self._index = 0
        self.slowdown_count = 0
        self.name = name
        if sprite is not None:
            self.sprite = sprite

    @property
    def sprite(self) -> Optional[Sprite]:
        """The associated sprite; setting it resets to the first frame."""
        return self._sprite

    @sprite.setter
    def sprite(self, new_sprite: Optional[Sprite]) -> None:
        self._sprite = new_sprite
        self._index = 0

    @property
    def index(self) -> int:
        """Index of the frame to display.

        Values outside the sprite's frames, or with no sprite, are ignored.
        """
        return self._index

    @index.setter
    def index(self, new_index: int) -> None:
        if self._sprite is not None and 0 <= new_index < self._sprite.frame_count:
            self._index = new_index

    def draw(self, position: Vector) -> None:
        """Draw the current frame centred at ``position`` and advance the animation.

        Raises ValueError if no sprite is associated.
        """
        sprite = self._sprite
        if sprite is None:
            raise ValueError("animation has no sprite")
        sprite.draw(self._index, position, sprite.transparency)
        if self.slowdown_count == FROZEN:
            return
        self.slowdown_count += 1
        if self.slowdown_count >= sprite.slowdown:
            self.slowdown_count = 0
            next_index = self._index + 1
            if next_index >= sprite.frame_count:
                next_index = 0
            self.index = next_index

    def bounding_box(self) -> Box:
        """Return the box around the sprite centred at (0, 0).

        Without a sprite, a unit box centred at (0, 0) is returned.
        """
        if self._sprite is None:
            return Box(Vector(-0.5, -0.5), 0.99, 0.99)
        width, height = self._sprite.width, self._sprite.height
        return Box(Vector(-width / 2.0, -height / 2.0), width, height)

    def __repr__(self) -> str:
        return (
            f"Animation(name={self.name!r}, sprite={self._sprite!r}, "
            f"index={self._index}, slowdown_count={self.slowdown_count})"
        )