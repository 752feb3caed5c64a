import pytest

from dfengine.color import Color


def test_lookup_by_value_round_trips():
    assert [Color(c.value) for c in Color] == list(Color)


def test_lookup_by_name_matches_value():
    assert Color["BLACK"] is Color(0)
    assert Color["RED"] is Color(1)
    assert Color["WHITE"] is Color(7)
    assert Color["CUSTOM"] is Color(8)


def test_undefined_color_value():
    assert Color(-1) is Color.UNDEFINED_COLOR


def test_defined_colors_are_consecutive_from_black():
    assert [Color(i) for i in range(9)] == [
        Color.BLACK,
        Color.RED,
        Color.GREEN,
        Color.YELLOW,
        Color.BLUE,
        Color.MAGENTA,
        Color.CYAN,
        Color.WHITE,
        Color.CUSTOM,
    ]


def test_unknown_value_is_rejected():
    with pytest.raises(ValueError):
        Color(len(Color) + 5)