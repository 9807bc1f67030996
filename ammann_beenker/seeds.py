"""Default seed tiles.

The tiling starts from one Rhombus and one Square sharing the image center.
The Square is turned a quarter of a right angle and sized so its half
diagonal matches half the Rhombus radius.
"""

from typing import Tuple

from ammann_beenker.geometry import Point
from ammann_beenker.tiles import RHOMBUS_ANGLE, SQUARE_SIZE_RATIO, Rhombus, Square, Tile


def initial_tiles(center: Point, initial_size: float) -> Tuple[Tile, ...]:
    """Return the uncolored ``(Rhombus, Square)`` seed pair around ``center``."""
    return (
        Rhombus(center=center, size=initial_size, angle=0.0),
        Square(
            center=center,
            size=initial_size * SQUARE_SIZE_RATIO,
            angle=RHOMBUS_ANGLE,
        ),
    )
