"""Ammann–Beenker substitution rule.

:func:`subdivide` replaces one tile with its fixed, ordered set of children:

* Rhombus -> ``[Rhombus, Rhombus, Square]``. The rhombi shrink by ``SQRT_2``;
  the square shrinks by ``SQRT_2`` twice.
* Square -> four Rhombus tiles, one per quarter turn, each grown by
  ``SQRT_2``.

Children are colored at construction through a pluggable ``ColorFn``
(default :func:`ammann_beenker.color.gradient_color`), so color depends only
on where a child lands, never on its ancestry.
"""

import math
from typing import Tuple

from ammann_beenker.color import gradient_color
from ammann_beenker.geometry import Point, point_at_angle_and_distance
from ammann_beenker.tiles import (
    RHOMBUS_ANGLE,
    SQRT_2,
    SQUARE_SIZE_RATIO,
    Rhombus,
    Square,
    Tile,
)
from ammann_beenker.types import ColorFn


def _subdivide_rhombus(
    tile: Rhombus, img_center: Point, img_size: float, color_fn: ColorFn
) -> Tuple[Tile, ...]:
    new_size = tile.size / SQRT_2
    offset = tile.size / 2.0

    new_center1 = point_at_angle_and_distance(tile.center, tile.angle, offset)
    new_center2 = point_at_angle_and_distance(tile.center, tile.angle + math.pi, offset)
    square_center = point_at_angle_and_distance(
        tile.center, tile.angle + RHOMBUS_ANGLE, offset
    )

    return (
        Rhombus(
            center=new_center1,
            size=new_size,
            angle=tile.angle + RHOMBUS_ANGLE,
            color=color_fn(new_center1, img_center, img_size),
        ),
        Rhombus(
            center=new_center2,
            size=new_size,
            angle=tile.angle + RHOMBUS_ANGLE + math.pi,
            color=color_fn(new_center2, img_center, img_size),
        ),
        Square(
            center=square_center,
            size=new_size * SQUARE_SIZE_RATIO,
            angle=tile.angle,
            color=color_fn(square_center, img_center, img_size),
        ),
    )


def _subdivide_square(
    tile: Square, img_center: Point, img_size: float, color_fn: ColorFn
) -> Tuple[Tile, ...]:
    new_size = tile.size * SQRT_2
    offset = tile.size / SQRT_2

    angles = (
        tile.angle,
        tile.angle + math.pi / 2.0,
        tile.angle + math.pi,
        tile.angle + 3.0 * math.pi / 2.0,
    )
    children = []
    for angle in angles:
        center = point_at_angle_and_distance(tile.center, angle, offset)
        children.append(
            Rhombus(
                center=center,
                size=new_size,
                angle=angle,
                color=color_fn(center, img_center, img_size),
            )
        )
    return tuple(children)


def subdivide(
    tile: Tile,
    img_center: Point,
    img_size: float,
    color_fn: ColorFn = gradient_color,
) -> Tuple[Tile, ...]:
    """Apply one inflation step to ``tile``.

    Args:
        tile (Tile): Parent tile; left untouched.
        img_center (Point): Reference point for coloring.
        img_size (float): Image extent used to normalize color distance.
        color_fn (ColorFn): Color assigned to each child from its center.

    Returns:
        Tuple[Tile, ...]: Three children for a Rhombus, four for a Square,
            in substitution order.
    """
    if isinstance(tile, Rhombus):
        return _subdivide_rhombus(tile, img_center, img_size, color_fn)
    return _subdivide_square(tile, img_center, img_size, color_fn)
