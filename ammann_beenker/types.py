"""Common type aliases and enumerations.

``ColorFn`` is the extension point used by the substitution engine to color
freshly generated tiles (see :func:`ammann_beenker.color.gradient_color`).
"""

from enum import StrEnum, auto
from typing import Callable, TYPE_CHECKING


# Forward declaration to avoid circular imports:
if TYPE_CHECKING:
    from ammann_beenker.geometry import Point

Color = str

ColorFn = Callable[["Point", "Point", float], Color]


class TileKind(StrEnum):
    """Prototile variants of the substitution grammar."""

    RHOMBUS = auto()
    SQUARE = auto()


class OutputFormat(StrEnum):
    """Supported image containers."""

    SVG = auto()
    PNG = auto()
