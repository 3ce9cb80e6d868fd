import pytest

from towerdef.geometry import Point


def test_equality_ignores_tag():
    assert Point(1, 2, 7) == Point(1, 2, 0)
    assert Point(1, 2) != Point(2, 1)


def test_add_then_subtract_round_trips():
    a = Point(12, -5)
    b = Point(-3, 40)
    assert (a + b) - b == a
    assert (a - b) + b == a


def test_arithmetic_resets_tag():
    assert (Point(1, 2, 5) + Point(0, 0, 5)).c == 0
    assert (Point(1, 2, 5) - Point(0, 0, 5)).c == 0


def test_multiply_identity_and_zero():
    p = Point(9, -4)
    assert p * 1 == p
    assert p * 0 == Point(0, 0)
    assert p * 2 == p + p


def test_distance_properties():
    a = Point(3, 4)
    b = Point(-2, 10)
    assert a.distance(a) == 0
    assert a.distance(b) == pytest.approx(b.distance(a))
    assert Point(0, 0).distance(Point(3, 4)) == pytest.approx(5.0)


def test_normalized_keeps_zero_components():
    result = Point(0, 5).normalized(5, 3)
    assert result.x == 0
    assert result.y == 3


def test_normalized_negative_axis():
    assert Point(-7, 0).normalized(7, 2) == Point(-2, 0)


def test_normalized_truncates_toward_zero():
    result = Point(-1, 1).normalized(3, 2)
    assert result == Point(0, 0)