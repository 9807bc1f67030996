"""Position-keyed tile coloring.

:func:`gradient_color` is the default ``ColorFn``: hue grows linearly with
distance from the image center and is left unclamped, so tiles beyond half
the image size get hues above 360. The helpers below turn those CSS-style
strings into RGB for the raster renderer.
"""

import colorsys
import math
import re
from typing import Tuple

import numpy as np

from ammann_beenker.geometry import Point, distance
from ammann_beenker.types import Color

SATURATION = 50
LIGHTNESS = 50

_HSL_RE = re.compile(
    r"^hsl\(\s*(-?(?:inf|NaN|[0-9.]+(?:e[-+]?[0-9]+)?))\s*,\s*([0-9.]+)%\s*,\s*([0-9.]+)%\s*\)$"
)


def format_number(value: float) -> str:
    """Shortest positional decimal for ``value`` (``0.0`` renders as ``0``).

    Non-finite values print as ``inf``, ``-inf`` and ``NaN``.
    """
    if math.isnan(value):
        return "NaN"
    return np.format_float_positional(value, trim="-")


def gradient_color(center: Point, img_center: Point, img_size: float) -> Color:
    """Map the distance from ``img_center`` onto an HSL hue.

    Distance is normalized by ``img_size / 2`` and scaled to degrees. Division
    follows IEEE rules: an ``img_size`` of zero yields an ``inf`` hue, or
    ``NaN`` at the image center.
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        ratio = np.float64(distance(center, img_center)) / (np.float64(img_size) / 2.0)
        hue = ratio * 360.0
    return f"hsl({format_number(hue)}, {SATURATION}%, {LIGHTNESS}%)"


def parse_hsl(color: Color) -> Tuple[float, float, float]:
    """Split an ``hsl(h, s%, l%)`` string into ``(hue, saturation, lightness)``.

    Raises:
        ValueError: If ``color`` is not an HSL color string.
    """
    match = _HSL_RE.match(color.strip())
    if match is None:
        raise ValueError(f"Not an hsl() color: {color!r}")
    hue, saturation, lightness = (float(group) for group in match.groups())
    return hue, saturation, lightness


def color_to_rgb(color: Color) -> Tuple[int, int, int]:
    """Convert a tile color to an 8-bit RGB triple.

    Seed tiles carry an empty color and map to white. Hues are wrapped into
    ``[0, 360)`` here only; the color strings themselves stay unwrapped.
    """
    if not color:
        return 255, 255, 255
    hue, saturation, lightness = parse_hsl(color)
    r, g, b = colorsys.hls_to_rgb(
        (hue % 360.0) / 360.0, lightness / 100.0, saturation / 100.0
    )
    return round(r * 255), round(g * 255), round(b * 255)
