"""Tiling pipeline.

Wires seeds, expansion and rendering together for a :class:`TilingConfig`:

1. :func:`generate_tiles` builds the seed pair and expands both seeds.
2. A renderer from :data:`RENDERER_REGISTRY` turns the tiles into an image.
3. :func:`write_tiling` saves the image to ``config.output``.

Only :func:`write_tiling` touches the file system.
"""

import logging
from typing import Callable, Dict, Iterable

from pyrsistent.typing import PVector

from ammann_beenker.color import gradient_color
from ammann_beenker.config import TilingConfig
from ammann_beenker.expand import expand_all
from ammann_beenker.renderer.raster import render_image
from ammann_beenker.renderer.svg import render_svg
from ammann_beenker.seeds import initial_tiles
from ammann_beenker.tiles import Tile
from ammann_beenker.types import ColorFn, OutputFormat

logger = logging.getLogger(__name__)

WriteFn = Callable[[Iterable[Tile], TilingConfig], None]


def generate_tiles(
    config: TilingConfig, color_fn: ColorFn = gradient_color
) -> PVector[Tile]:
    """Expand the default seed pair for ``config``."""
    seeds = initial_tiles(config.center, config.initial_size)
    tiles = expand_all(seeds, config.depth, config.center, config.img_size, color_fn)
    logger.debug("Generated %d tiles at depth %d", len(tiles), config.depth)
    return tiles


def _write_svg(tiles: Iterable[Tile], config: TilingConfig) -> None:
    svg_data = render_svg(tiles, config.width, config.height)
    with open(config.output, "w", encoding="utf-8") as f:
        f.write(svg_data)


def _write_png(tiles: Iterable[Tile], config: TilingConfig) -> None:
    img = render_image(tiles, config.width, config.height)
    img.save(config.output, format="PNG")


RENDERER_REGISTRY: Dict[OutputFormat, WriteFn] = {
    OutputFormat.SVG: _write_svg,
    OutputFormat.PNG: _write_png,
}


def write_tiling(config: TilingConfig, color_fn: ColorFn = gradient_color) -> int:
    """Generate and save the tiling described by ``config``.

    Returns:
        int: Number of tiles written.
    """
    config.validate()
    tiles = generate_tiles(config, color_fn)
    RENDERER_REGISTRY[config.format](tiles, config)
    logger.info("Wrote %d tiles to %s", len(tiles), config.output)
    return len(tiles)
