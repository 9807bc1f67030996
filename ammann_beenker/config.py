"""Generation settings.

:class:`TilingConfig` gathers everything needed to produce an image: canvas
size, recursion depth and output target. Geometry parameters derive from the
canvas: seeds sit at the canvas center with a radius of a quarter of the
width, and colors are normalized by the width.
"""

from __future__ import annotations

import argparse
import math
import os
from dataclasses import dataclass
from typing import Optional

from ammann_beenker.geometry import Point
from ammann_beenker.types import OutputFormat

DEFAULT_WIDTH = 800.0
DEFAULT_HEIGHT = 800.0
DEFAULT_DEPTH = 5
DEFAULT_OUTPUT = "amman_beenker_tiling2.svg"

# Two seeds at depth 10 already yield well over a million tiles.
MAX_DEPTH = 10


@dataclass(frozen=True)
class TilingConfig:
    """Immutable generation settings.

    Attributes:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        depth: Number of substitution rounds applied to each seed.
        output: Destination file path.
        format: Container written to ``output``.
    """

    width: float = DEFAULT_WIDTH
    height: float = DEFAULT_HEIGHT
    depth: int = DEFAULT_DEPTH
    output: str = DEFAULT_OUTPUT
    format: OutputFormat = OutputFormat.SVG

    @property
    def center(self) -> Point:
        return Point(self.width / 2.0, self.height / 2.0)

    @property
    def initial_size(self) -> float:
        return self.width / 4.0

    @property
    def img_size(self) -> float:
        return self.width

    def validate(self) -> TilingConfig:
        """Return ``self`` if usable.

        Raises:
            ValueError: On a non-finite or non-positive canvas, a depth outside
                ``[0, MAX_DEPTH]`` or an unknown format.
        """
        if not (math.isfinite(self.width) and math.isfinite(self.height)):
            raise ValueError(
                f"Canvas must be finite, got {self.width}x{self.height}"
            )
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Canvas must be positive, got {self.width}x{self.height}"
            )
        if not 0 <= self.depth <= MAX_DEPTH:
            raise ValueError(f"Depth must be in [0, {MAX_DEPTH}], got {self.depth}")
        if self.format not in tuple(OutputFormat):
            raise ValueError(f"Unknown output format: {self.format}")
        return self

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> TilingConfig:
        """Build a validated config from parsed command line arguments.

        The format falls back to the output file extension, then to SVG.
        """
        fmt: Optional[str] = getattr(args, "format", None)
        if fmt is None:
            ext = os.path.splitext(args.output)[1].lstrip(".").lower()
            fmt = ext if ext in tuple(OutputFormat) else OutputFormat.SVG
        try:
            output_format = OutputFormat(fmt)
        except ValueError:
            raise ValueError(f"Unknown output format: {fmt}") from None
        return cls(
            width=args.width,
            height=args.height,
            depth=args.depth,
            output=args.output,
            format=output_format,
        ).validate()
