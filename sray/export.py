"""Persist serialized canvases to disk."""
from __future__ import annotations

import logging

from .canvas import Canvas

LOGGER = logging.getLogger(__name__)


def export_ppm(canvas: Canvas, filepath: str) -> str:
    """Write ``canvas`` as a plain PPM file and return the written text."""

    text = canvas.to_ppm()
    # Disable newline translation so the file matches to_ppm() byte for byte.
    with open(filepath, "w", encoding="utf-8", newline="") as handle:
        handle.write(text)
    LOGGER.info("Wrote %dx%d canvas to %s", canvas.width, canvas.height, filepath)
    return text
