from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass
class Settings:
    templates_dir: Path | None
    log_level: str
    log_dir: Path


def _read_env_file() -> dict[str, str]:
    """Parse ``KEY=value`` lines from ``./.env``.

    Blank lines, comments and lines without ``=`` are skipped; surrounding
    quotes are stripped from values.
    """
    env_path = Path.cwd() / ".env"
    if not env_path.exists():
        return {}
    try:
        lines = env_path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError):
        # An unreadable .env must not break CLI usage
        return {}

    env: dict[str, str] = {}
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        env[key.strip()] = value.strip().strip('"').strip("'")
    return env


def _get_env(names: list[str], env_file: dict[str, str]) -> str | None:
    # Each name is looked up in the process environment before .env
    for name in names:
        value = os.getenv(name) or env_file.get(name)
        if value:
            return value
    return None


def get_settings() -> Settings:
    env_file = _read_env_file()
    templates = _get_env(["SVG_GRAPH_TEMPLATES_DIR"], env_file)
    level = _get_env(["SVG_GRAPH_LOG_LEVEL", "LOG_LEVEL"], env_file)
    log_dir = _get_env(["SVG_GRAPH_LOG_DIR"], env_file)
    return Settings(
        templates_dir=Path(templates) if templates else None,
        log_level=(level or "INFO").upper(),
        log_dir=Path(log_dir) if log_dir else Path("logs"),
    )
