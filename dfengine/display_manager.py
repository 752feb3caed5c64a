"""Text-cell display in a graphics window."""

from __future__ import annotations

import os
from enum import Enum
from typing import Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from .color import COLOR_DEFAULT, Color  # noqa: E402
from .manager import Manager, ManagerError  # noqa: E402
from .vector import Vector  # noqa: E402

WINDOW_HORIZONTAL_PIXELS_DEFAULT = 1024
WINDOW_VERTICAL_PIXELS_DEFAULT = 768
WINDOW_HORIZONTAL_CHARS_DEFAULT = 80
WINDOW_VERTICAL_CHARS_DEFAULT = 24
WINDOW_TITLE_DEFAULT = "Dragonfly"
FONT_FILE_DEFAULT = "df-font.ttf"

_RGB = {
    Color.BLACK: (0, 0, 0),
    Color.RED: (255, 0, 0),
    Color.GREEN: (0, 255, 0),
    Color.YELLOW: (255, 255, 0),
    Color.BLUE: (0, 0, 255),
    Color.MAGENTA: (255, 0, 255),
    Color.CYAN: (0, 255, 255),
    Color.WHITE: (255, 255, 255),
}
_WHITE = _RGB[Color.WHITE]


class DisplayError(ManagerError):
    """Raised when the display cannot be opened or drawn to."""


class Justification(Enum):
    """String justifications."""

    LEFT_JUSTIFIED = 0
    CENTER_JUSTIFIED = 1
    RIGHT_JUSTIFIED = 2


class DisplayManager(Manager):
    """Draws characters on a grid of text cells in a window."""

    def __init__(
        self,
        *,
        horizontal_pixels: int = WINDOW_HORIZONTAL_PIXELS_DEFAULT,
        vertical_pixels: int = WINDOW_VERTICAL_PIXELS_DEFAULT,
        horizontal_chars: int = WINDOW_HORIZONTAL_CHARS_DEFAULT,
        vertical_chars: int = WINDOW_VERTICAL_CHARS_DEFAULT,
        font_file: Optional[str] = FONT_FILE_DEFAULT,
        title: str = WINDOW_TITLE_DEFAULT,
    ) -> None:
        super().__init__("DisplayManager")
        self._horizontal_pixels = horizontal_pixels
        self._vertical_pixels = vertical_pixels
        self._horizontal_chars = horizontal_chars
        self._vertical_chars = vertical_chars
        self.font_file = font_file
        self.title = title
        self._background = Color.BLACK
        self._window: Optional[pygame.Surface] = None
        self._font: Optional[pygame.font.Font] = None

    @property
    def horizontal(self) -> int:
        """Window width in characters."""
        return self._horizontal_chars

    @property
    def vertical(self) -> int:
        """Window height in characters."""
        return self._vertical_chars

    @property
    def horizontal_pixels(self) -> int:
        return self._horizontal_pixels

    @property
    def vertical_pixels(self) -> int:
        return self._vertical_pixels

    @property
    def window(self) -> Optional[pygame.Surface]:
        """The window surface, or None when not started."""
        return self._window

    @property
    def background_color(self) -> Color:
        return self._background

    def start_up(self) -> None:
        """Open the window and load the font; raise DisplayError on failure."""
        if self._window is not None:
            return
        pygame.display.init()
        pygame.font.init()
        try:
            window = pygame.display.set_mode((self._horizontal_pixels, self._vertical_pixels))
        except pygame.error as exc:
            raise DisplayError(f"unable to create window: {exc}") from exc
        pygame.display.set_caption(self.title)
        pygame.mouse.set_visible(False)
        size = int(min(self.char_width(), self.char_height()) * 2)
        try:
            font = pygame.font.Font(self.font_file, size)
        except (OSError, pygame.error) as exc:
            pygame.display.quit()
            raise DisplayError(f"error loading font {self.font_file!r}: {exc}") from exc
        font.set_bold(True)
        self._window = window
        self._font = font
        super().start_up()

    def shut_down(self) -> None:
        """Close the window."""
        if self._window is not None:
            pygame.display.quit()
            self._window = None
            self._font = None
        super().shut_down()

    def _require_window(self) -> pygame.Surface:
        if self._window is None:
            raise DisplayError("no window to draw to")
        return self._window

    def draw_ch(self, world_pos: Vector, ch: str, color: Color = COLOR_DEFAULT) -> None:
        """Draw character ``ch`` in the cell at ``world_pos`` with ``color``."""
        window = self._require_window()
        assert self._font is not None
        pixel = self.spaces_to_pixels(world_pos)
        width, height = self.char_width(), self.char_height()
        cell = pygame.Rect(
            int(pixel.x - width / 10), int(pixel.y + height / 5), int(width), int(height)
        )
        window.fill(_RGB[self._background], cell)
        text = self._font.render(ch, True, _RGB.get(color, _WHITE) if color != Color.BLACK else _WHITE)
        window.blit(text, (int(pixel.x), int(pixel.y)))

    def draw_string(
        self,
        world_pos: Vector,
        text: str,
        justification: Justification = Justification.LEFT_JUSTIFIED,
        color: Color = COLOR_DEFAULT,
    ) -> None:
        """Draw ``text`` starting, centred or ending at ``world_pos``."""
        start_x = world_pos.x
        if justification is Justification.CENTER_JUSTIFIED:
            start_x -= len(text) // 2
        elif justification is Justification.RIGHT_JUSTIFIED:
            start_x -= len(text)
        for offset, ch in enumerate(text):
            self.draw_ch(Vector(start_x + offset, world_pos.y), ch, color)

    def swap_buffers(self) -> None:
        """Show what was drawn and clear the drawing buffer."""
        window = self._require_window()
        pygame.display.flip()
        window.fill(_RGB[self._background])

    def char_height(self) -> float:
        """Height of a character cell in pixels."""
        return float(self._vertical_pixels // self._vertical_chars)

    def char_width(self) -> float:
        """Width of a character cell in pixels."""
        return float(self._horizontal_pixels // self._horizontal_chars)

    def spaces_to_pixels(self, spaces: Vector) -> Vector:
        """Convert character cell coordinates to pixel coordinates."""
        return Vector(spaces.x * self.char_width(), spaces.y * self.char_height())

    def pixels_to_spaces(self, pixels: Vector) -> Vector:
        """Convert pixel coordinates to character cell coordinates."""
        return Vector(pixels.x / self.char_width(), pixels.y / self.char_height())

    def set_background_color(self, color: Color) -> None:
        """Set the background color; raise ValueError for colors without one."""
        if color not in _RGB:
            raise ValueError(f"unsupported background color: {color!r}")
        self._background = Color(color)


DM = DisplayManager()