"""Fixed-size pixel buffer with plain PPM (P3) serialization."""
from __future__ import annotations

import logging
import operator
from typing import List, Optional

import numpy as np

from .color import BLACK, Color

LOGGER = logging.getLogger(__name__)

PPM_MAGIC = "P3"
PPM_MAX_VALUE = 255
PIXELS_PER_LINE = 5


class Canvas:
    """Dense grid of colors addressed by ``(x, y)``.

    ``(0, 0)`` is the upper left corner; ``x`` selects the pixel within a
    row, ``y`` selects the row. Reads outside the canvas return ``None`` and
    writes outside the canvas are clipped, i.e. silently ignored. Sizes and
    coordinates must be integers.
    """

    def __init__(self, width: int, height: int) -> None:
        width = operator.index(width)
        height = operator.index(height)
        if width < 0 or height < 0:
            raise ValueError(f"Canvas size must be non-negative, got {width}x{height}")
        self._width = width
        self._height = height
        self._pixels: List[Color] = [BLACK] * (self._width * self._height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _contains(self, x: int, y: int) -> bool:
        # Coordinates must be integers; floats raise TypeError even when out of range.
        x = operator.index(x)
        y = operator.index(y)
        return 0 <= x < self._width and 0 <= y < self._height

    def pixel_at(self, x: int, y: int) -> Optional[Color]:
        if not self._contains(x, y):
            return None
        return self._pixels[x + y * self._width]

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        if self._contains(x, y):
            self._pixels[x + y * self._width] = color

    def to_array(self) -> np.ndarray:
        """Return the pixels as a ``(height, width, 3)`` float array."""

        data = np.array(
            [(pixel.r, pixel.g, pixel.b) for pixel in self._pixels],
            dtype=np.float64,
        )
        return data.reshape(self._height, self._width, 3)

    def to_ppm(self) -> str:
        """Serialize the canvas into the plain PPM format.

        The header holds the magic number, the size and the maximum channel
        value. Each pixel follows as an ``R G B`` triplet in row-major order,
        five triplets per line. Channels are scaled by 255, rounded up and
        clamped to ``[0, 255]``.
        """

        channels = _quantize(self.to_array().reshape(-1, 3))
        lines = [f"{PPM_MAGIC}\n{self._width} {self._height}\n{PPM_MAX_VALUE}"]
        for start in range(0, len(channels), PIXELS_PER_LINE):
            chunk = channels[start : start + PIXELS_PER_LINE]
            lines.append(" ".join(" ".join(str(value) for value in triplet) for triplet in chunk))
        LOGGER.debug("Serialized %dx%d canvas to PPM", self._width, self._height)
        return "\n".join(lines) + "\n"

    to_text_image = to_ppm


# //1.- Scale, round up and clamp channels; nan maps to 0 and infinities saturate.
def _quantize(channels: np.ndarray) -> List[List[int]]:
    with np.errstate(over="ignore", invalid="ignore"):
        scaled = np.ceil(channels * PPM_MAX_VALUE)
    scaled = np.nan_to_num(scaled, nan=0.0, posinf=PPM_MAX_VALUE, neginf=0.0)
    return np.clip(scaled, 0, PPM_MAX_VALUE).astype(np.int64).tolist()
