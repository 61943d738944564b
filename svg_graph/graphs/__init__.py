"""Graph variants and the registry used to build them by name.

Usage:
    from svg_graph.graphs import Pie

    graph = Pie({"fields": ["Jan", "Feb", "Mar"], "key": 1})
    graph.add_data({"data": [12, 45, 21], "title": "Sales 2002"})
    svg = graph.burn()
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from .bar import Bar
from .base import FieldGraph, Graph
from .heatmap import GradientColorStrategy, HeatMap, RandomColorStrategy
from .line import Line
from .pie import Pie


class GraphType(str, Enum):
    PIE = "pie"
    HEATMAP = "heatmap"
    LINE = "line"
    BAR = "bar"


GRAPH_TYPES: dict[GraphType, type[Graph]] = {
    GraphType.PIE: Pie,
    GraphType.HEATMAP: HeatMap,
    GraphType.LINE: Line,
    GraphType.BAR: Bar,
}


def create_graph(kind: GraphType | str, config: Mapping[str, Any] | None = None, **kwargs: Any) -> Graph:
    """Build a graph variant by name.

    Raises:
        ValueError: If ``kind`` is not a known graph type
    """
    graph_type = kind if isinstance(kind, GraphType) else GraphType(kind.lower())
    return GRAPH_TYPES[graph_type](config, **kwargs)


__all__ = [
    "Bar",
    "FieldGraph",
    "GRAPH_TYPES",
    "GradientColorStrategy",
    "Graph",
    "GraphType",
    "HeatMap",
    "Line",
    "Pie",
    "RandomColorStrategy",
    "create_graph",
]
