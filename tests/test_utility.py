from types import SimpleNamespace

import pytest

from dfengine.box import Box
from dfengine.utility import (
    box_contains_box,
    box_contains_position,
    box_intersects_box,
    distance,
    positions_intersect,
    value_in_range,
    world_box,
)
from dfengine.vector import Vector


def test_box_intersections():
    assert box_intersects_box(Box(Vector(0, 0), 5, 5), Box(Vector(2, 2), 5, 5))


def test_box_non_intersection():
    assert not box_intersects_box(Box(Vector(0, 0), 5, 5), Box(Vector(10, 10), 5, 5))


def test_touching_boxes_intersect():
    assert box_intersects_box(Box(Vector(0, 0), 5, 5), Box(Vector(5, 0), 5, 5))


def test_box_intersection_is_symmetric():
    a = Box(Vector(0, 0), 3, 8)
    b = Box(Vector(2, -4), 6, 5)
    assert box_intersects_box(a, b) == box_intersects_box(b, a)


def test_positions_intersect_within_one_unit():
    assert positions_intersect(Vector(3, 3), Vector(4, 2))
    assert positions_intersect(Vector(3, 3), Vector(3, 3))
    assert not positions_intersect(Vector(3, 3), Vector(5, 3))


def test_value_in_range_is_inclusive():
    assert value_in_range(1, 1, 4)
    assert value_in_range(4, 1, 4)
    assert not value_in_range(4.5, 1, 4)


def test_world_box_translates_relative_box():
    obj = SimpleNamespace(box=Box(Vector(-1, -2), 3, 4), position=Vector(10, 20))
    box = world_box(obj)
    assert box.corner == obj.box.corner + obj.position
    assert (box.horizontal, box.vertical) == (3, 4)


def test_world_box_at_explicit_position():
    obj = SimpleNamespace(box=Box(Vector(0, 0), 2, 2), position=Vector(10, 20))
    where = Vector(5, 6)
    assert world_box(obj, where).corner == where
    assert obj.box.corner == Vector(0, 0)


def test_box_contains_position():
    box = Box(Vector(0, 0), 5, 5)
    assert box_contains_position(box, Vector(5, 5))
    assert box_contains_position(box, Vector(2, 3))
    assert not box_contains_position(box, Vector(6, 1))


def test_box_contains_box():
    outer = Box(Vector(0, 0), 10, 10)
    assert box_contains_box(outer, Box(Vector(2, 2), 3, 3))
    assert box_contains_box(outer, outer)
    assert not box_contains_box(outer, Box(Vector(8, 8), 5, 5))


def test_distance():
    assert distance(Vector(0, 0), Vector(3, 4)) == pytest.approx(5)


def test_distance_invariants():
    p = Vector(1.5, -2)
    q = Vector(-4, 7)
    assert distance(p, p) == 0
    assert distance(p, q) == pytest.approx(distance(q, p))
    assert distance(p, q) == pytest.approx((q - p).magnitude())