"""Sprites: sequences of character frames with shared attributes."""

from __future__ import annotations

from typing import Optional

from .color import COLOR_DEFAULT, Color
from .frame import Frame
from .vector import Vector


class SpriteFullError(Exception):
    """Raised when adding a frame to a sprite that holds its maximum."""


class Sprite:
    """A labelled sequence of at most ``max_frames`` frames.

    ``slowdown`` is the animation slowdown in multiples of the game loop time
    (1 means no slowdown). ``transparency`` is the character that is not
    drawn, or None for none.
    """

    def __init__(
        self,
        max_frames: int,
        *,
        width: int = 0,
        height: int = 0,
        color: Color = COLOR_DEFAULT,
        slowdown: int = 1,
        transparency: Optional[str] = None,
        label: str = "",
    ) -> None:
        self.max_frames = max_frames
        self.width = width
        self.height = height
        self.color = color
        self.slowdown = slowdown
        self.transparency = transparency
        self.label = label
        self._frames: list[Frame] = []

    @property
    def frame_count(self) -> int:
        """Number of frames the sprite holds."""
        return len(self._frames)

    @property
    def frames(self) -> tuple[Frame, ...]:
        """The sprite's frames in order."""
        return tuple(self._frames)

    def add_frame(self, frame: Frame) -> None:
        """Append ``frame``; raise SpriteFullError if the sprite is full."""
        if len(self._frames) >= self.max_frames:
            raise SpriteFullError(f"sprite holds at most {self.max_frames} frames")
        self._frames.append(frame)

    def get_frame(self, frame_number: int) -> Frame:
        """Return the indicated frame, or an empty frame if out of range."""
        if not 0 <= frame_number < len(self._frames):
            return Frame()
        return self._frames[frame_number]

    def draw(
        self,
        frame_number: int,
        position: Vector,
        transparency: Optional[str] = None,
    ) -> None:
        """Draw the indicated frame centred at ``position`` in the sprite's color.

        Without ``transparency`` the sprite's own transparency character is
        used. Raises IndexError for a frame number out of range.
        """
        if not 0 <= frame_number < len(self._frames):
            raise IndexError(f"invalid frame number: {frame_number}")
        chosen = transparency if transparency is not None else self.transparency
        self._frames[frame_number].draw(position, self.color, chosen)

    def __repr__(self) -> str:
        return (
            f"Sprite(label={self.label!r}, frames={self.frame_count}/{self.max_frames}, "
            f"width={self.width}, height={self.height})"
        )