from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class DataSet:
    """One call's worth of data added to a graph.

    Field-keyed graphs store ``values`` as ``{field: value}`` in field order.
    Coordinate-keyed graphs store a list of row mappings, each with an ``x``.
    """

    values: dict[str, Any] | list[dict[str, Any]]
    title: str | None = None
    axis_order: list[str] = field(default_factory=list)

    def value(self, name: str) -> Any:
        if isinstance(self.values, dict):
            return self.values.get(name)
        raise TypeError("Row data has no per-field values")
