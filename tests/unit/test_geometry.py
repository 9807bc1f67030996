# tests/unit/test_geometry.py

import math

import pytest

from ammann_beenker.geometry import (
    Point,
    distance,
    point_at_angle_and_distance,
    rotate_point_about_center,
)
from tests.test_utils import ORIGIN, assert_point_close


@pytest.mark.parametrize(
    "origin, angle, dist, expected",
    [
        ((0.0, 0.0), 0.0, 1.0, (1.0, 0.0)),
        ((0.0, 0.0), math.pi / 2, 2.0, (0.0, 2.0)),
        ((0.0, 0.0), math.pi, 3.0, (-3.0, 0.0)),
        ((10.0, -5.0), 3 * math.pi / 2, 4.0, (10.0, -9.0)),
        ((1.0, 1.0), math.pi / 4, math.sqrt(2), (2.0, 2.0)),
        # unnormalized angle behaves like its wrapped value
        ((0.0, 0.0), 5 * math.pi, 1.0, (-1.0, 0.0)),
        # zero distance stays on the origin
        ((7.0, 8.0), 1.234, 0.0, (7.0, 8.0)),
    ],
)
def test_point_at_angle_and_distance(origin, angle, dist, expected) -> None:
    result = point_at_angle_and_distance(Point(*origin), angle, dist)
    assert_point_close(result, expected)


@pytest.mark.parametrize(
    "point, center, angle, expected",
    [
        ((1.0, 0.0), (0.0, 0.0), math.pi / 2, (0.0, 1.0)),
        ((2.0, 1.0), (1.0, 1.0), math.pi, (0.0, 1.0)),
        ((3.0, 4.0), (3.0, 4.0), 1.0, (3.0, 4.0)),
        ((1.0, 0.0), (0.0, 0.0), -math.pi / 2, (0.0, -1.0)),
        ((5.0, 5.0), (2.0, 2.0), 2 * math.pi, (5.0, 5.0)),
    ],
)
def test_rotate_point_about_center(point, center, angle, expected) -> None:
    result = rotate_point_about_center(Point(*point), Point(*center), angle)
    assert_point_close(result, expected)


def test_rotation_preserves_distance_to_center() -> None:
    center = Point(3.0, -2.0)
    point = Point(7.5, 1.25)
    for k in range(8):
        rotated = rotate_point_about_center(point, center, k * 0.7)
        assert distance(rotated, center) == pytest.approx(distance(point, center))


def test_distance() -> None:
    assert distance(ORIGIN, Point(3.0, 4.0)) == 5.0
    assert distance(Point(1.0, 1.0), Point(1.0, 1.0)) == 0.0


def test_point_is_immutable_value() -> None:
    p = Point(1.0, 2.0)
    assert p == Point(1.0, 2.0)
    assert hash(p) == hash(Point(1.0, 2.0))
    with pytest.raises(AttributeError):
        p.x = 5.0  # type: ignore[misc]
