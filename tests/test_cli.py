"""Tests for the svg-graph command line."""

from __future__ import annotations

import gzip
from pathlib import Path

import pytest
from typer.testing import CliRunner

from svg_graph import __version__
from svg_graph.cli.main import app

runner = CliRunner()

PIE_CHART = """
type: pie
config:
  fields: [Jan, Feb, Mar]
  key: 1
data:
  - title: Sales 2002
    data: [12, 45, 21]
"""

HEATMAP_CHART = """
type: heatmap
data:
  - title: CPU
    data:
      - [x, c, b]
      - [r1, 1, 2]
      - [r2, 3, 4]
"""


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path: Path) -> None:
    for name in ("SVG_GRAPH_TEMPLATES_DIR", "SVG_GRAPH_LOG_LEVEL", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("SVG_GRAPH_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.chdir(tmp_path)


def _chart(tmp_path: Path, text: str, name: str = "chart.yaml") -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_version() -> None:
    """Test the version command prints the package version."""
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert result.output.strip() == __version__


def test_types() -> None:
    """Test every graph type is listed."""
    result = runner.invoke(app, ["types"])
    assert result.exit_code == 0
    for name in ("pie", "heatmap", "line", "bar"):
        assert name in result.output


def test_options() -> None:
    """Test options lists a variant's defaults."""
    result = runner.invoke(app, ["options", "pie"])
    assert result.exit_code == 0
    assert "expand_greatest = 0" in result.output
    assert "shadow_offset = 15" in result.output


def test_render_to_file(tmp_path: Path) -> None:
    """Test rendering a pie chart file to an SVG file."""
    chart = _chart(tmp_path, PIE_CHART)
    out = tmp_path / "sales.svg"
    result = runner.invoke(app, ["render", str(chart), "-o", str(out)])

    assert result.exit_code == 0, result.output
    assert "Graph written to" in result.output
    svg = out.read_text(encoding="utf-8")
    assert svg.startswith("<?xml")
    assert "58%" in svg
    assert (tmp_path / "logs").is_dir()


def test_render_to_stdout(tmp_path: Path) -> None:
    """Test rendering without --output prints the document."""
    chart = _chart(tmp_path, PIE_CHART)
    result = runner.invoke(app, ["--log-level", "WARNING", "render", str(chart)])
    assert result.exit_code == 0, result.output
    assert result.output.startswith("<?xml")
    assert result.output.rstrip().endswith("</svg>")


def test_render_seeded_heatmap_repeats(tmp_path: Path) -> None:
    """Test a seed makes heatmap colours repeatable."""
    chart = _chart(tmp_path, HEATMAP_CHART)
    first = tmp_path / "first.svg"
    second = tmp_path / "second.svg"
    for out in (first, second):
        result = runner.invoke(app, ["render", str(chart), "-o", str(out), "--seed", "42"])
        assert result.exit_code == 0, result.output

    assert first.read_text(encoding="utf-8") == second.read_text(encoding="utf-8")
    assert 'style="fill:rgb(' in first.read_text(encoding="utf-8")


def test_render_compressed(tmp_path: Path) -> None:
    """Test --compress writes gzip bytes."""
    chart = _chart(tmp_path, PIE_CHART)
    out = tmp_path / "sales.svgz"
    result = runner.invoke(app, ["render", str(chart), "-o", str(out), "--compress"])
    assert result.exit_code == 0, result.output
    assert gzip.decompress(out.read_bytes()).startswith(b"<?xml")


def test_render_custom_template(tmp_path: Path) -> None:
    """Test --template draws with the given template file."""
    chart = _chart(tmp_path, PIE_CHART)
    template = tmp_path / "total.svg.j2"
    template.write_text("total={{ calc.total|num }}", encoding="utf-8")
    out = tmp_path / "total.txt"
    result = runner.invoke(
        app, ["render", str(chart), "-o", str(out), "--template", str(template)]
    )
    assert result.exit_code == 0, result.output
    assert out.read_text(encoding="utf-8") == "total=78"


def test_render_unknown_type(tmp_path: Path) -> None:
    """Test an unknown graph type is reported."""
    chart = _chart(tmp_path, "type: radar\ndata: []\n")
    result = runner.invoke(app, ["render", str(chart)])
    assert result.exit_code == 1
    assert "Unknown graph type 'radar'" in result.output


def test_render_missing_chart(tmp_path: Path) -> None:
    """Test a missing chart file is reported."""
    result = runner.invoke(app, ["render", str(tmp_path / "absent.yaml")])
    assert result.exit_code == 1
    assert "Chart file not found" in result.output


def test_render_too_many_data_sets(tmp_path: Path) -> None:
    """Test graph errors exit with status 1."""
    chart = _chart(
        tmp_path,
        PIE_CHART + "  - title: Sales 2003\n    data: [1, 2, 3]\n",
    )
    result = runner.invoke(app, ["render", str(chart)])
    assert result.exit_code == 1
    assert "accepts only 1" in result.output


def test_render_unknown_option(tmp_path: Path) -> None:
    """Test an option the variant lacks is reported."""
    chart = _chart(
        tmp_path,
        "type: heatmap\nconfig:\n  expanded: 1\ndata:\n  - data: [[x, c], [r1, 1]]\n",
    )
    result = runner.invoke(app, ["render", str(chart)])
    assert result.exit_code == 1
    assert "can not be used with HeatMap" in result.output


def test_render_non_numeric_option(tmp_path: Path) -> None:
    """Test a non-numeric option is reported without a traceback."""
    chart = _chart(tmp_path, PIE_CHART.replace("  key: 1", "  key: 1\n  width: wide"))
    result = runner.invoke(app, ["render", str(chart)])
    assert result.exit_code == 1
    assert "width must be a number" in result.output
    assert "Traceback" not in result.output
