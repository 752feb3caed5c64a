import pygame
import pytest

from dfengine.color import Color
from dfengine.display_manager import DM, Justification
from dfengine.frame import Frame
from dfengine.vector import Vector


@pytest.fixture
def display(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    DM.font_file = None
    DM.start_up()
    yield DM
    DM.shut_down()


def _snapshot(manager):
    return pygame.image.tostring(manager.window, "RGB")


def test_frame_attributes():
    frame = Frame(10, 10, "**********\n*        *\n*  **    *\n*  **    *\n**********")
    assert frame.width == 10
    assert frame.height == 10


def test_empty_frame_defaults():
    frame = Frame()
    assert (frame.width, frame.height, frame.string) == (0, 0, "")


def test_draw_empty_frame_raises(display):
    with pytest.raises(ValueError):
        Frame().draw(Vector(1, 1), Color.RED)


def test_draw_short_string_raises(display):
    with pytest.raises(ValueError):
        Frame(3, 2, "abc").draw(Vector(5, 5), Color.RED)


def test_single_char_frame_matches_draw_ch(display):
    Frame(1, 1, "X").draw(Vector(10, 5), Color.RED)
    drawn = _snapshot(display)
    display.swap_buffers()
    display.draw_ch(Vector(10, 5), "X", Color.RED)
    assert _snapshot(display) == drawn


def test_frame_is_centred(display):
    Frame(3, 1, "XYZ").draw(Vector(10, 5), Color.GREEN)
    drawn = _snapshot(display)
    display.swap_buffers()
    display.draw_string(Vector(9, 5), "XYZ", Justification.LEFT_JUSTIFIED, Color.GREEN)
    assert _snapshot(display) == drawn


def test_multi_row_frame_uses_rows(display):
    Frame(2, 2, "abcd").draw(Vector(6, 6), Color.CYAN)
    drawn = _snapshot(display)
    display.swap_buffers()
    display.draw_string(Vector(5, 5), "ab", Justification.LEFT_JUSTIFIED, Color.CYAN)
    display.draw_string(Vector(5, 6), "cd", Justification.LEFT_JUSTIFIED, Color.CYAN)
    assert _snapshot(display) == drawn


def test_transparent_characters_skipped(display):
    Frame(3, 1, "X.X").draw(Vector(10, 5), Color.RED, ".")
    drawn = _snapshot(display)
    display.swap_buffers()
    display.draw_ch(Vector(9, 5), "X", Color.RED)
    display.draw_ch(Vector(11, 5), "X", Color.RED)
    assert _snapshot(display) == drawn