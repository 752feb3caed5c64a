import pygame
import pytest

from dfengine.color import Color
from dfengine.display_manager import (
    WINDOW_HORIZONTAL_CHARS_DEFAULT,
    WINDOW_VERTICAL_CHARS_DEFAULT,
    DisplayError,
    DisplayManager,
    Justification,
)
from dfengine.vector import Vector


@pytest.fixture
def dm(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    manager = DisplayManager(font_file=None)
    manager.start_up()
    yield manager
    manager.shut_down()


def _snapshot(manager):
    return pygame.image.tostring(manager.window, "RGB")


def test_defaults():
    manager = DisplayManager()
    assert manager.horizontal == WINDOW_HORIZONTAL_CHARS_DEFAULT
    assert manager.vertical == WINDOW_VERTICAL_CHARS_DEFAULT
    assert manager.char_width() == 12.0
    assert manager.char_height() == 32.0


def test_start_up_opens_window(dm):
    assert dm.is_started is True
    assert dm.window.get_size() == (dm.horizontal_pixels, dm.vertical_pixels)


def test_shut_down_closes_window(dm):
    dm.shut_down()
    assert dm.window is None
    assert dm.is_started is False


def test_missing_font_raises(monkeypatch, tmp_path):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    manager = DisplayManager(font_file=str(tmp_path / "missing.ttf"))
    with pytest.raises(DisplayError):
        manager.start_up()
    assert manager.is_started is False


def test_draw_without_window_raises():
    manager = DisplayManager()
    with pytest.raises(DisplayError):
        manager.draw_ch(Vector(1, 1), "A", Color.RED)
    with pytest.raises(DisplayError):
        manager.swap_buffers()


def test_spaces_pixels_round_trip():
    manager = DisplayManager()
    v = Vector(10, 5)
    assert manager.pixels_to_spaces(manager.spaces_to_pixels(v)) == v


def test_draw_ch_renders_in_color(dm):
    pos = Vector(10, 5)
    dm.draw_ch(pos, "A", Color.RED)
    origin = dm.spaces_to_pixels(pos)
    width, height = dm.window.get_size()
    x0 = max(int(origin.x) - 2, 0)
    y0 = max(int(origin.y) - 2, 0)
    x1 = min(x0 + int(dm.char_width() * 3), width)
    y1 = min(y0 + int(dm.char_height() * 2), height)
    colours = {
        tuple(dm.window.get_at((x, y)))[:3]
        for x in range(x0, x1)
        for y in range(y0, y1)
    }
    assert (255, 0, 0) in colours


def test_background_fills_cell(dm):
    dm.set_background_color(Color.BLUE)
    pos = Vector(10, 5)
    dm.draw_ch(pos, " ", Color.RED)
    pixel = dm.spaces_to_pixels(pos)
    inside = (int(pixel.x + dm.char_width() / 2), int(pixel.y + dm.char_height() / 2))
    assert tuple(dm.window.get_at(inside))[:3] == (0, 0, 255)
    assert dm.background_color == Color.BLUE


def test_swap_buffers_clears(dm):
    empty = _snapshot(dm)
    dm.draw_ch(Vector(3, 3), "X", Color.GREEN)
    assert _snapshot(dm) != empty
    dm.swap_buffers()
    assert _snapshot(dm) == empty


def test_invalid_background_color(dm):
    with pytest.raises(ValueError):
        dm.set_background_color(Color.CUSTOM)
    assert dm.background_color == Color.BLACK


@pytest.mark.parametrize(
    "justification, x",
    [(Justification.RIGHT_JUSTIFIED, 10), (Justification.CENTER_JUSTIFIED, 9)],
)
def test_justification_matches_left_start(dm, justification, x):
    dm.draw_string(Vector(8, 5), "XX", Justification.LEFT_JUSTIFIED, Color.YELLOW)
    expected = _snapshot(dm)
    dm.swap_buffers()
    dm.draw_string(Vector(x, 5), "XX", justification, Color.YELLOW)
    assert _snapshot(dm) == expected


def test_draw_string_equals_individual_chars(dm):
    dm.draw_string(Vector(2, 2), "Hi", Justification.LEFT_JUSTIFIED, Color.CYAN)
    expected = _snapshot(dm)
    dm.swap_buffers()
    dm.draw_ch(Vector(2, 2), "H", Color.CYAN)
    dm.draw_ch(Vector(3, 2), "i", Color.CYAN)
    assert _snapshot(dm) == expected