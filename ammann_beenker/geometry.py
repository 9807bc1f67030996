"""Planar point primitives.

All tile math works on :class:`Point` values. Functions here are pure and
total over finite floats; nothing in this module validates or normalizes
angles (radians, counter-clockwise, unbounded).
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """Immutable 2D coordinate.

    Attributes:
        x: Horizontal coordinate (grows to the right).
        y: Vertical coordinate (grows downward in image space).
    """

    x: float
    y: float


def point_at_angle_and_distance(origin: Point, angle: float, distance: float) -> Point:
    """Return the point ``distance`` away from ``origin`` in direction ``angle``."""
    return Point(
        origin.x + distance * math.cos(angle),
        origin.y + distance * math.sin(angle),
    )


def rotate_point_about_center(point: Point, center: Point, angle: float) -> Point:
    """Rotate ``point`` counter-clockwise about ``center`` by ``angle`` radians."""
    tx = point.x - center.x
    ty = point.y - center.y
    cos_theta = math.cos(angle)
    sin_theta = math.sin(angle)
    rx = cos_theta * tx - sin_theta * ty
    ry = sin_theta * tx + cos_theta * ty
    return Point(rx + center.x, ry + center.y)


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(a.x - b.x, a.y - b.y)
