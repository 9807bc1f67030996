"""Prototile value objects and vertex computation.

The tiling is built from two prototiles, :class:`Rhombus` and
:class:`Square`. Both are frozen dataclasses sharing the same fields; the
closed union :data:`Tile` is dispatched on with ``isinstance``.

Notes:

* ``angle`` is stored in radians and never normalized. Repeated substitution
  accumulates angles well past ``2*pi``.
* ``size`` means different radii per variant: a Rhombus places its vertices
  at distance ``size`` from the center, a Square at ``size / SQRT_2``.
* The Rhombus vertex fan uses 45 degree steps, which renders as a rotated
  square. The label refers to the tile's role in the substitution grammar.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from ammann_beenker.geometry import Point, point_at_angle_and_distance
from ammann_beenker.types import Color, TileKind

SQRT_2 = 1.4142135623730950
RHOMBUS_ANGLE = math.pi / 4.0
SQUARE_SIZE_RATIO = 1.0 / SQRT_2

Vertices = Tuple[Point, Point, Point, Point]


@dataclass(frozen=True)
class Rhombus:
    """Rhombus prototile.

    Attributes:
        center: Tile center.
        size: Center-to-vertex distance.
        angle: Orientation of the first vertex in radians.
        color: Fill color assigned at creation (empty for seeds).
    """

    center: Point
    size: float
    angle: float
    color: Color = ""


@dataclass(frozen=True)
class Square:
    """Square prototile.

    Attributes:
        center: Tile center.
        size: Edge length; vertices sit at ``size / SQRT_2`` from the center.
        angle: Orientation of the first vertex in radians.
        color: Fill color assigned at creation (empty for seeds).
    """

    center: Point
    size: float
    angle: float
    color: Color = ""


Tile = Rhombus | Square


def tile_kind(tile: Tile) -> TileKind:
    """Return the :class:`TileKind` tag of ``tile``."""
    if isinstance(tile, Rhombus):
        return TileKind.RHOMBUS
    return TileKind.SQUARE


def _vertex_fan(center: Point, angle: float, step: float, radius: float) -> Vertices:
    angle1 = angle
    angle2 = angle1 + step
    angle3 = angle2 + step
    angle4 = angle3 + step
    return (
        point_at_angle_and_distance(center, angle1, radius),
        point_at_angle_and_distance(center, angle2, radius),
        point_at_angle_and_distance(center, angle3, radius),
        point_at_angle_and_distance(center, angle4, radius),
    )


def vertices(tile: Tile) -> Vertices:
    """Return the four polygon vertices of ``tile`` in rotational order.

    The polygon is open: the first vertex is not repeated at the end.
    """
    if isinstance(tile, Rhombus):
        return _vertex_fan(tile.center, tile.angle, RHOMBUS_ANGLE, tile.size)
    return _vertex_fan(tile.center, tile.angle, math.pi / 2.0, tile.size / SQRT_2)
