"""Linear RGB colors and a catalog of named reference colors.

Components are not clamped: blending may push them outside ``[0, 1]``.
Clamping only happens when a canvas is serialized.
"""
from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from types import MappingProxyType
from typing import Mapping, Union

from .misc import equal


@dataclass(frozen=True, eq=False)
class Color:
    """Immutable red, green and blue triple."""

    r: float
    g: float
    b: float

    def __add__(self, other: "Color") -> "Color":
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other: "Color") -> "Color":
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r - other.r, self.g - other.g, self.b - other.b)

    def __mul__(self, other: Union["Color", float]) -> "Color":
        """Scale by a scalar, or blend with another color (Hadamard product)."""

        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        if not isinstance(other, Real):
            return NotImplemented
        return Color(self.r * other, self.g * other, self.b * other)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return equal(self.r, other.r) and equal(self.g, other.g) and equal(self.b, other.b)


BLACK = Color(0.0, 0.0, 0.0)
RED = Color(1.0, 0.0, 0.0)
ROSE = Color(1.0, 0.0, 0.5)
MAGENTA = Color(1.0, 0.0, 1.0)
VIOLET = Color(0.5, 0.0, 1.0)
BLUE = Color(0.0, 0.0, 1.0)
AZURE = Color(0.0, 0.5, 1.0)
CYAN = Color(0.0, 1.0, 1.0)
SPRING_GREEN = Color(0.0, 1.0, 0.5)
GREEN = Color(0.0, 1.0, 0.0)
CHARTREUSE = Color(0.5, 1.0, 0.0)
YELLOW = Color(1.0, 1.0, 0.0)
ORANGE = Color(1.0, 0.5, 0.0)

DEFAULT_COLORS: Mapping[str, Color] = MappingProxyType(
    {
        "black": BLACK,
        "red": RED,
        "rose": ROSE,
        "magenta": MAGENTA,
        "violet": VIOLET,
        "blue": BLUE,
        "azure": AZURE,
        "cyan": CYAN,
        "spring_green": SPRING_GREEN,
        "green": GREEN,
        "chartreuse": CHARTREUSE,
        "yellow": YELLOW,
        "orange": ORANGE,
    }
)


def default_color(name: str) -> Color:
    """Look up a catalog color, e.g. ``"spring-green"`` or ``"Spring Green"``."""

    key = name.strip().lower().replace("-", "_").replace(" ", "_")
    try:
        return DEFAULT_COLORS[key]
    except KeyError:
        raise KeyError(f"Unknown default color: {name!r}") from None
