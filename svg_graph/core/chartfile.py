from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .errors import InvalidConfiguration


@dataclass(frozen=True)
class ChartSpec:
    type: str
    config: dict[str, Any] = field(default_factory=dict)
    datasets: list[dict[str, Any]] = field(default_factory=list)


def _load_yaml(path: Path) -> dict:
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_chart(path: str | Path) -> ChartSpec:
    """Read a chart description from a YAML (or JSON) file.

    The file holds ``type``, an optional ``config`` mapping and ``data``: a
    list of data sets, each a mapping with ``data`` and an optional ``title``.

    Raises:
        InvalidConfiguration: If the file is missing or malformed
    """
    cfg_path = Path(path)
    if not cfg_path.exists():
        raise InvalidConfiguration(f"Chart file not found: {cfg_path}")
    try:
        raw = _load_yaml(cfg_path)
    except yaml.YAMLError as e:
        raise InvalidConfiguration(f"Chart file {cfg_path} is not valid YAML: {e}") from e

    if not isinstance(raw, dict):
        raise InvalidConfiguration(f"Chart file {cfg_path} must contain a mapping")
    chart_type = raw.get("type")
    if not chart_type:
        raise InvalidConfiguration(f"Chart file {cfg_path} does not name a chart type")
    config = raw.get("config") or {}
    datasets = raw.get("data") or []
    if not isinstance(config, dict):
        raise InvalidConfiguration("'config' must be a mapping of option names to values")
    if not isinstance(datasets, list) or not all(isinstance(d, dict) for d in datasets):
        raise InvalidConfiguration("'data' must be a list of data sets")
    return ChartSpec(type=str(chart_type).lower(), config=config, datasets=datasets)
