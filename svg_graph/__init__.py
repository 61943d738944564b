"""SVG chart generators rendered through Jinja2 templates."""

from __future__ import annotations

__version__ = "0.1.0"

from .core.errors import (  # noqa: E402
    DegenerateData,
    GraphError,
    InvalidConfiguration,
    InvalidRow,
    MissingAxisOrder,
    MissingFields,
    NoData,
    RenderError,
    TooManyDataSets,
    UnknownOption,
)
from .graphs import Bar, GraphType, HeatMap, Line, Pie, create_graph  # noqa: E402

__all__ = [
    "__version__",
    "Bar",
    "DegenerateData",
    "GraphError",
    "GraphType",
    "HeatMap",
    "InvalidConfiguration",
    "InvalidRow",
    "Line",
    "MissingAxisOrder",
    "MissingFields",
    "NoData",
    "Pie",
    "RenderError",
    "TooManyDataSets",
    "UnknownOption",
    "create_graph",
]
