import pytest

from compgeom.geometry import (
    Point,
    angle_between,
    collinear,
    coplanar,
    cross2d,
    distance,
    distance_to_line,
    left,
    left_or_between,
    polar_angle,
    right,
    signed_volume,
)

A, B, C = Point(0, 0), Point(1, 0), Point(0, 1)


def test_sub():
    assert Point(3, 4, 5) - Point(1, 1, 1) == Point(2, 3, 4)


def test_orientation():
    assert left(A, B, C)
    assert not right(A, B, C)
    assert right(A, C, B)
    assert cross2d(A, B, C) == -cross2d(A, C, B)


def test_collinear_and_between():
    mid = Point(0.5, 0)
    assert collinear(A, B, mid)
    assert left_or_between(A, B, mid)
    assert not left_or_between(A, B, Point(2, 0))
    assert not left_or_between(A, B, Point(0.5, -1))


def test_polar_angle():
    assert polar_angle(Point(1, 1), A) == pytest.approx(45)
    assert polar_angle(Point(0, -1), A) > polar_angle(Point(-1, 0), A)


def test_angle_between():
    assert angle_between(B, C) == pytest.approx(90)
    with pytest.raises(ValueError):
        angle_between(A, B)


def test_distance():
    assert distance(Point(0, 0), Point(3, 4)) == pytest.approx(5)
    assert distance_to_line(A, Point(2, 0), Point(1, 3)) == pytest.approx(
        distance(Point(1, 0), Point(1, 3))
    )


def test_volume():
    d = Point(0, 0, 1)
    assert signed_volume(A, B, C, d) == pytest.approx(-signed_volume(B, A, C, d))
    assert not coplanar(A, B, C, d)
    assert coplanar(A, B, C, Point(2, 3))