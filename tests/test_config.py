"""Tests for environment-driven settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from svg_graph.core.config import get_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path: Path) -> None:
    for name in ("SVG_GRAPH_TEMPLATES_DIR", "SVG_GRAPH_LOG_LEVEL", "SVG_GRAPH_LOG_DIR", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_defaults() -> None:
    """Test settings without any environment."""
    settings = get_settings()
    assert settings.templates_dir is None
    assert settings.log_level == "INFO"
    assert settings.log_dir == Path("logs")


def test_environment_values(monkeypatch) -> None:
    """Test settings read SVG_GRAPH_* variables."""
    monkeypatch.setenv("SVG_GRAPH_TEMPLATES_DIR", "/srv/templates")
    monkeypatch.setenv("SVG_GRAPH_LOG_LEVEL", "debug")
    monkeypatch.setenv("SVG_GRAPH_LOG_DIR", "/var/log/graphs")
    settings = get_settings()
    assert settings.templates_dir == Path("/srv/templates")
    assert settings.log_level == "DEBUG"
    assert settings.log_dir == Path("/var/log/graphs")


def test_log_level_fallback(monkeypatch) -> None:
    """Test LOG_LEVEL is used when SVG_GRAPH_LOG_LEVEL is unset."""
    monkeypatch.setenv("LOG_LEVEL", "warning")
    assert get_settings().log_level == "WARNING"


def test_env_file(tmp_path: Path) -> None:
    """Test a .env file in the working directory is read."""
    (tmp_path / ".env").write_text(
        '# comment\nSVG_GRAPH_TEMPLATES_DIR="custom"\nnot a pair\nSVG_GRAPH_LOG_LEVEL=error\n',
        encoding="utf-8",
    )
    settings = get_settings()
    assert settings.templates_dir == Path("custom")
    assert settings.log_level == "ERROR"


def test_environment_beats_env_file(monkeypatch, tmp_path: Path) -> None:
    """Test process environment wins over the .env file."""
    (tmp_path / ".env").write_text("SVG_GRAPH_LOG_LEVEL=ERROR\n", encoding="utf-8")
    monkeypatch.setenv("SVG_GRAPH_LOG_LEVEL", "DEBUG")
    assert get_settings().log_level == "DEBUG"


def test_prefixed_name_beats_fallback(monkeypatch, tmp_path: Path) -> None:
    """Test SVG_GRAPH_LOG_LEVEL in .env wins over a LOG_LEVEL fallback."""
    (tmp_path / ".env").write_text("LOG_LEVEL=debug\nSVG_GRAPH_LOG_LEVEL=error\n", encoding="utf-8")
    monkeypatch.setenv("LOG_LEVEL", "warning")
    assert get_settings().log_level == "ERROR"


def test_fallback_read_from_env_file(tmp_path: Path) -> None:
    """Test LOG_LEVEL is also read from .env."""
    (tmp_path / ".env").write_text("LOG_LEVEL=debug\n", encoding="utf-8")
    assert get_settings().log_level == "DEBUG"
