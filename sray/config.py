"""Configuration helpers for rendering runs."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Optional, Union

DEFAULT_WIDTH = 64
DEFAULT_HEIGHT = 32
DEFAULT_OUTPUT_PATH = "palette.ppm"


# //1.- Define dataclass to encapsulate canvas size and output destination.
@dataclass(frozen=True)
class RenderSettings:
    """Canvas dimensions and the file a rendered image is written to."""

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    output_path: str = DEFAULT_OUTPUT_PATH

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Canvas size must be non-negative, got {self.width}x{self.height}")

    # //2.- Build settings from a mapping, falling back to defaults for missing keys.
    @classmethod
    def from_mapping(cls, payload: Optional[Dict[str, Union[int, str]]] = None) -> "RenderSettings":
        if not payload:
            return cls()
        return cls(
            width=int(payload.get("width", DEFAULT_WIDTH)),
            height=int(payload.get("height", DEFAULT_HEIGHT)),
            output_path=str(payload.get("output_path", DEFAULT_OUTPUT_PATH)),
        )

    # //3.- Allow overriding settings through environment variables.
    @classmethod
    def from_environment(cls, prefix: str = "SRAY") -> "RenderSettings":
        width = os.getenv(f"{prefix}_CANVAS_WIDTH")
        height = os.getenv(f"{prefix}_CANVAS_HEIGHT")
        output_path = os.getenv(f"{prefix}_OUTPUT_PATH")
        mapping: Dict[str, Union[int, str]] = {}
        if width is not None:
            mapping["width"] = int(width)
        if height is not None:
            mapping["height"] = int(height)
        if output_path:
            mapping["output_path"] = output_path
        return cls.from_mapping(mapping)


# //4.- Provide canonical configuration accessor used by entry points.
def load_render_config(
    mapping: Optional[Dict[str, Union[int, str]]] = None,
    *,
    env_prefix: str = "SRAY",
) -> RenderSettings:
    if mapping is not None:
        return RenderSettings.from_mapping(mapping)
    return RenderSettings.from_environment(prefix=env_prefix)
