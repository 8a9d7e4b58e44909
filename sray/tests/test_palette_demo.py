"""Tests for the palette rendering demo."""
from __future__ import annotations

from pathlib import Path

import pytest

from sray.color import BLACK, DEFAULT_COLORS, ORANGE, RED, Color
from sray.palette_demo import main, render_palette


def test_render_palette_assigns_one_swatch_per_color():
    colors = list(DEFAULT_COLORS.values())
    canvas = render_palette(len(colors) * 2, 3)
    for index, color in enumerate(colors):
        assert canvas.pixel_at(index * 2, 0) == color
        assert canvas.pixel_at(index * 2 + 1, 2) == color


def test_render_palette_with_custom_colors():
    canvas = render_palette(4, 1, colors=[RED, Color(0.0, 0.0, 1.0)])
    assert [canvas.pixel_at(x, 0) for x in range(4)] == [RED, RED, Color(0.0, 0.0, 1.0), Color(0.0, 0.0, 1.0)]


def test_render_palette_handles_empty_inputs():
    assert render_palette(3, 2, colors=[]).pixel_at(1, 1) == BLACK
    assert render_palette(0, 5).to_ppm() == "P3\n0 5\n255\n"


def test_main_writes_ppm(tmp_path: Path):
    output = tmp_path / "palette.ppm"
    assert main(["--width", "13", "--height", "2", "--output", str(output)]) == 0
    contents = output.read_text(encoding="utf-8")
    assert contents == render_palette(13, 2).to_ppm()
    assert contents.startswith("P3\n13 2\n255\n")
    assert render_palette(13, 2).pixel_at(12, 1) == ORANGE


def test_main_rejects_negative_sizes(tmp_path: Path):
    output = tmp_path / "palette.ppm"
    assert main(["--width", "-2", "--output", str(output)]) == 2
    assert not output.exists()


@pytest.mark.parametrize("value", ["-2", "abc"])
def test_main_rejects_invalid_environment(monkeypatch, tmp_path: Path, value):
    monkeypatch.setenv("SRAY_CANVAS_WIDTH", value)
    output = tmp_path / "palette.ppm"
    assert main(["--output", str(output)]) == 2
    assert not output.exists()


def test_main_uses_environment_defaults(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("SRAY_CANVAS_WIDTH", "3")
    monkeypatch.setenv("SRAY_CANVAS_HEIGHT", "1")
    output = tmp_path / "palette.ppm"
    assert main(["--output", str(output)]) == 0
    assert output.read_text(encoding="utf-8").startswith("P3\n3 1\n255\n")
