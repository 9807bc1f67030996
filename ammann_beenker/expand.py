"""Recursive expansion of seed tiles into the final tile set.

:func:`expand` applies :func:`ammann_beenker.subdivide.subdivide` ``depth``
times and flattens the result depth-first, in substitution-child order. The
order is reproducible and only affects stacking when rendered.

Output grows by a factor of roughly 3 to 4 per level; bounding ``depth`` is
the caller's job (see :data:`ammann_beenker.config.MAX_DEPTH`).
"""

import logging
from typing import Iterable

from pyrsistent import pvector
from pyrsistent.typing import PVector

from ammann_beenker.color import gradient_color
from ammann_beenker.geometry import Point
from ammann_beenker.subdivide import subdivide
from ammann_beenker.tiles import Rhombus, Tile, tile_kind
from ammann_beenker.types import ColorFn

logger = logging.getLogger(__name__)


def expand(
    tile: Tile,
    depth: int,
    img_center: Point,
    img_size: float,
    color_fn: ColorFn = gradient_color,
) -> PVector[Tile]:
    """Expand ``tile`` through ``depth`` substitution rounds.

    Args:
        tile (Tile): Root tile.
        depth (int): Number of substitution rounds; ``0`` returns ``[tile]``.
        img_center (Point): Reference point for coloring.
        img_size (float): Image extent used to normalize color distance.
        color_fn (ColorFn): Color function forwarded to ``subdivide``.

    Returns:
        PVector[Tile]: Terminal tiles in pre-order, depth-first order.

    Raises:
        ValueError: If ``depth`` is negative.
    """
    if depth < 0:
        raise ValueError(f"Depth must be non-negative, got {depth}")
    if depth == 0:
        return pvector([tile])
    result: PVector[Tile] = pvector()
    for child in subdivide(tile, img_center, img_size, color_fn):
        result = result.extend(expand(child, depth - 1, img_center, img_size, color_fn))
    return result


def expand_all(
    tiles: Iterable[Tile],
    depth: int,
    img_center: Point,
    img_size: float,
    color_fn: ColorFn = gradient_color,
) -> PVector[Tile]:
    """Expand several seeds and concatenate their results in seed order."""
    result: PVector[Tile] = pvector()
    for tile in tiles:
        expanded = expand(tile, depth, img_center, img_size, color_fn)
        logger.debug(
            "Expanded %s seed to %d tiles at depth %d",
            tile_kind(tile),
            len(expanded),
            depth,
        )
        result = result.extend(expanded)
    return result


def expected_tile_count(tile: Tile, depth: int) -> int:
    """Number of tiles :func:`expand` yields for ``tile`` at ``depth``.

    Follows the substitution matrix: a Rhombus yields two rhombi and a
    square, a Square yields four rhombi.
    """
    if depth < 0:
        raise ValueError(f"Depth must be non-negative, got {depth}")
    rhombi, squares = (1, 0) if isinstance(tile, Rhombus) else (0, 1)
    for _ in range(depth):
        rhombi, squares = 2 * rhombi + 4 * squares, rhombi
    return rhombi + squares
