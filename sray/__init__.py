"""Sray: the geometric and pixel-buffer core of a small ray tracer.

The package uses a left-handed coordinate system: the x, y and z axes point
right, up and forward respectively.
"""

from .misc import EPSILON, equal
from .vector import Point3, Vector3
from .color import (
    AZURE,
    BLACK,
    BLUE,
    CHARTREUSE,
    CYAN,
    DEFAULT_COLORS,
    GREEN,
    MAGENTA,
    ORANGE,
    RED,
    ROSE,
    SPRING_GREEN,
    VIOLET,
    YELLOW,
    Color,
    default_color,
)
from .canvas import Canvas
from .config import RenderSettings, load_render_config
from .export import export_ppm

__all__ = [
    "EPSILON",
    "equal",
    "Point3",
    "Vector3",
    "Color",
    "DEFAULT_COLORS",
    "default_color",
    "BLACK",
    "RED",
    "ROSE",
    "MAGENTA",
    "VIOLET",
    "BLUE",
    "AZURE",
    "CYAN",
    "SPRING_GREEN",
    "GREEN",
    "CHARTREUSE",
    "YELLOW",
    "ORANGE",
    "Canvas",
    "RenderSettings",
    "load_render_config",
    "export_ppm",
]
