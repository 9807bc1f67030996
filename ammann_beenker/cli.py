"""Command line entry point.

    ammann-beenker --depth 4 --output tiling.png
"""

import argparse
import logging
import sys
from typing import List, Optional

from ammann_beenker.config import (
    DEFAULT_DEPTH,
    DEFAULT_HEIGHT,
    DEFAULT_OUTPUT,
    DEFAULT_WIDTH,
    MAX_DEPTH,
    TilingConfig,
)
from ammann_beenker.tiling import write_tiling
from ammann_beenker.types import OutputFormat

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ammann-beenker",
        description="Render an Ammann-Beenker tiling by recursive substitution.",
    )
    parser.add_argument("--width", type=float, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=float, default=DEFAULT_HEIGHT)
    parser.add_argument(
        "--depth",
        type=int,
        default=DEFAULT_DEPTH,
        help=f"substitution rounds (0..{MAX_DEPTH})",
    )
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT)
    parser.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=None,
        help="image container (default: from output extension)",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        config = TilingConfig.from_args(args)
    except ValueError as e:
        logger.debug("Invalid configuration: %s", e)
        parser.error(str(e))
    write_tiling(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
