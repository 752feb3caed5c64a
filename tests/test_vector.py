import pytest

from dfengine.vector import Vector


def test_default_is_origin():
    v = Vector()
    assert v.x == 0
    assert v.y == 0


def test_components_and_magnitude():
    v = Vector(3, 4)
    assert v.x == 3
    assert v.y == 4
    assert v.magnitude() == 5


def test_addition():
    total = Vector(5, 12) + Vector(1, 2)
    assert total == Vector(6, 14)


def test_subtraction_undoes_addition():
    a = Vector(2.5, -7)
    b = Vector(-1, 4)
    assert (a + b) - b == a


def test_normalized_has_unit_length():
    v = Vector(5, 12).normalized()
    assert v.magnitude() == pytest.approx(1.0)


def test_normalized_keeps_direction():
    v = Vector(5, 12)
    n = v.normalized()
    assert n.x * v.y == pytest.approx(n.y * v.x)
    assert n.x > 0 and n.y > 0


def test_normalizing_zero_vector_leaves_it_unchanged():
    assert Vector().normalized() == Vector()


def test_scale_multiplies_length():
    v = Vector(3, 4)
    assert v.scale(2).magnitude() == pytest.approx(2 * v.magnitude())
    assert v.scale(1) == v


def test_scale_does_not_mutate():
    v = Vector(3, 4)
    v.scale(10)
    assert v == Vector(3, 4)


def test_vector_is_immutable():
    v = Vector(1, 2)
    with pytest.raises(AttributeError):
        v.x = 5  # type: ignore[misc]
    assert v.x == 1
    assert v == Vector(1, 2)