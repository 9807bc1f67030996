from dataclasses import dataclass
from typing import Iterable, Tuple

from ammann_beenker.color import format_number
from ammann_beenker.geometry import Point
from ammann_beenker.tiles import Tile, vertices
from ammann_beenker.types import Color


DEFAULT_STROKE = "black"
DEFAULT_STROKE_WIDTH = 1
SVG_NAMESPACE = "http://www.w3.org/2000/svg"


@dataclass(frozen=True)
class DrawablePolygon:
    points: Tuple[Point, ...]
    fill: Color
    stroke: Color = DEFAULT_STROKE
    stroke_width: int = DEFAULT_STROKE_WIDTH


def to_drawable_polygon(tile: Tile) -> DrawablePolygon:
    """
    Pair the tile's vertices with its stored color and the fixed stroke.
    """
    return DrawablePolygon(points=vertices(tile), fill=tile.color)


def format_points(points: Iterable[Point]) -> str:
    return " ".join(f"{format_number(p.x)},{format_number(p.y)}" for p in points)


def polygon_to_svg(polygon: DrawablePolygon) -> str:
    return (
        f'<polygon points="{format_points(polygon.points)}" '
        f'fill="{polygon.fill}" stroke="{polygon.stroke}" '
        f'stroke-width="{polygon.stroke_width}" />'
    )


def render_svg(tiles: Iterable[Tile], width: float, height: float) -> str:
    """
    Renders tiles as a single SVG document, one polygon per tile in order.
    """
    content = "".join(polygon_to_svg(to_drawable_polygon(tile)) for tile in tiles)
    return (
        f'<svg width="{format_number(width)}" height="{format_number(height)}" '
        f'xmlns="{SVG_NAMESPACE}">{content}</svg>'
    )


class SvgRenderer:
    width: float
    height: float

    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height

    def render(self, tiles: Iterable[Tile]) -> str:
        return render_svg(tiles, width=self.width, height=self.height)
