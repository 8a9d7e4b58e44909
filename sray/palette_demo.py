"""Small demonstration harness rendering the default color catalog."""
from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from .canvas import Canvas
from .color import DEFAULT_COLORS, Color
from .config import RenderSettings, load_render_config
from .export import export_ppm

LOGGER = logging.getLogger(__name__)


def render_palette(width: int, height: int, colors: Optional[Sequence[Color]] = None) -> Canvas:
    """Paint one vertical swatch per color, left to right."""

    swatches: List[Color] = list(DEFAULT_COLORS.values() if colors is None else colors)
    canvas = Canvas(width, height)
    if not swatches:
        return canvas
    for x in range(width):
        color = swatches[x * len(swatches) // width]
        for y in range(height):
            canvas.write_pixel(x, y, color)
    return canvas


def create_parser(defaults: Optional[RenderSettings] = None) -> argparse.ArgumentParser:
    defaults = defaults or RenderSettings()
    parser = argparse.ArgumentParser(description="Render the default color catalog to a plain PPM image")
    parser.add_argument("--width", type=int, default=defaults.width, help="Canvas width in pixels")
    parser.add_argument("--height", type=int, default=defaults.height, help="Canvas height in pixels")
    parser.add_argument("--output", default=defaults.output_path, help="Destination PPM file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = create_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(asctime)s] %(levelname)s %(message)s",
    )
    try:
        defaults = load_render_config()
    except ValueError as exc:
        LOGGER.error("Invalid render configuration in environment: %s", exc)
        return 2
    args = create_parser(defaults).parse_args(argv)
    if args.width < 0 or args.height < 0:
        LOGGER.error("Canvas size must be non-negative, got %dx%d", args.width, args.height)
        return 2
    canvas = render_palette(args.width, args.height)
    export_ppm(canvas, args.output)
    return 0


if __name__ == "__main__":  # pragma: no cover - exercised via ``python -m`` execution
    raise SystemExit(main())
