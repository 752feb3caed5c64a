from dfengine.shapes import Circle, Line
from dfengine.vector import Vector


def test_line_defaults_to_origin():
    line = Line()
    assert line.p1 == Vector(0, 0)
    assert line.p2 == Vector(0, 0)


def test_line_endpoints_can_be_set():
    line = Line(Vector(1, 2), Vector(3, 4))
    line.p2 = Vector(7, 8)
    assert line.p1 == Vector(1, 2)
    assert line.p2 == Vector(7, 8)


def test_line_string():
    assert str(Line(Vector(1, 2), Vector(3, 4))) == "Line: P1(1, 2) - P2(3, 4)"


def test_circle_defaults():
    circle = Circle()
    assert circle.center == Vector(0, 0)
    assert circle.radius == 0


def test_circle_string():
    circle = Circle(Vector(1, 2), 2.5)
    assert str(circle) == "Circle: Center(1, 2), Radius: 2.5"


def test_circle_string_follows_radius_changes():
    circle = Circle(Vector(0, 0), 1)
    circle.radius = 3
    assert str(circle).endswith("Radius: 3")