from typing import Iterable, Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image, ImageDraw

from ammann_beenker.color import color_to_rgb
from ammann_beenker.renderer.svg import to_drawable_polygon
from ammann_beenker.tiles import Tile

# Type aliases for clarity
UInt8Array = npt.NDArray[np.uint8]
RGBA = Tuple[int, int, int, int]

DEFAULT_BACKGROUND: RGBA = (255, 255, 255, 255)


def render_image(
    tiles: Iterable[Tile],
    width: float,
    height: float,
    background: RGBA = DEFAULT_BACKGROUND,
) -> Image.Image:
    """
    Rasterizes tiles onto an RGBA image, drawing polygons in tile order.
    """
    img = Image.new("RGBA", (round(width), round(height)), background)
    draw = ImageDraw.Draw(img)
    for tile in tiles:
        polygon = to_drawable_polygon(tile)
        draw.polygon(
            [(p.x, p.y) for p in polygon.points],
            fill=color_to_rgb(polygon.fill),
            outline=polygon.stroke,
            width=polygon.stroke_width,
        )
    return img


def render_array(
    tiles: Iterable[Tile],
    width: float,
    height: float,
    background: RGBA = DEFAULT_BACKGROUND,
) -> UInt8Array:
    """
    Same as :func:`render_image` but returns an ``(H, W, 4)`` uint8 array.
    """
    img = render_image(tiles, width, height, background=background)
    return np.array(img, dtype=np.uint8)


class RasterRenderer:
    width: float
    height: float
    background: RGBA

    def __init__(
        self,
        width: float,
        height: float,
        background: RGBA = DEFAULT_BACKGROUND,
    ):
        self.width = width
        self.height = height
        self.background = background

    def render(self, tiles: Iterable[Tile]) -> Image.Image:
        return render_image(
            tiles, width=self.width, height=self.height, background=self.background
        )

    def render_array(self, tiles: Iterable[Tile]) -> UInt8Array:
        return render_array(
            tiles, width=self.width, height=self.height, background=self.background
        )
