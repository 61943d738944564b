"""Tests for the SVG template renderer."""

from __future__ import annotations

import gzip
from pathlib import Path

import pytest

from svg_graph import RenderError
from svg_graph.render.renderer import TemplateRenderer, compress_svg, format_number, write_output


def test_renderer_instantiation() -> None:
    """Test that TemplateRenderer loads the bundled templates."""
    renderer = TemplateRenderer()
    assert renderer.env is not None
    assert renderer.env.get_template("pie.svg.j2") is not None


def test_render_string_escapes_markup() -> None:
    """Test values are escaped in string templates."""
    renderer = TemplateRenderer()
    result = renderer.render_string("<text>{{ title }}</text>", {"title": "<b>&"})
    assert result == "<text>&lt;b&gt;&amp;</text>"


def test_render_string_undefined_value() -> None:
    """Test an undefined template value raises RenderError."""
    renderer = TemplateRenderer()
    with pytest.raises(RenderError):
        renderer.render_string("{{ missing.value }}", {})


def test_render_missing_template() -> None:
    """Test a missing template raises RenderError naming the search path."""
    renderer = TemplateRenderer()
    with pytest.raises(RenderError, match="Template not found"):
        renderer.render("nope.svg.j2", {})


def test_custom_directory_overrides_bundled(tmp_path: Path) -> None:
    """Test a custom directory shadows bundled templates by name."""
    (tmp_path / "pie.svg.j2").write_text("custom {{ value }}", encoding="utf-8")
    renderer = TemplateRenderer(tmp_path)
    assert renderer.render("pie.svg.j2", {"value": 1}) == "custom 1"
    # Other bundled templates are still found
    assert renderer.env.get_template("heatmap.svg.j2") is not None


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (250, "250"),
        (121.2, "121.2"),
        (10.0, "10"),
        (1 / 3, "0.3333"),
        (-0.00001, "0"),
        ("abc", "abc"),
        (True, "True"),
    ],
)
def test_format_number(value, expected: str) -> None:
    """Test numbers are trimmed for SVG attributes."""
    assert format_number(value) == expected


def test_num_filter_in_templates() -> None:
    """Test the num filter is registered."""
    renderer = TemplateRenderer()
    assert renderer.render_string("{{ 2.50|num }}", {}) == "2.5"


def test_compress_svg_is_stable() -> None:
    """Test compression output is gzip and repeatable."""
    first = compress_svg("<svg/>")
    assert gzip.decompress(first) == b"<svg/>"
    assert compress_svg("<svg/>") == first


def test_write_output_text_and_bytes(tmp_path: Path) -> None:
    """Test documents are written as text or raw bytes."""
    text_path = tmp_path / "out" / "graph.svg"
    write_output(text_path, "<svg/>")
    assert text_path.read_text(encoding="utf-8") == "<svg/>"

    bytes_path = tmp_path / "graph.svgz"
    write_output(bytes_path, b"\x1f\x8b")
    assert bytes_path.read_bytes() == b"\x1f\x8b"
