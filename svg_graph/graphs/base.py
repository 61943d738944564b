"""Base graph facade shared by every chart variant."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from ..core.errors import InvalidConfiguration, InvalidRow, MissingFields, NoData, TooManyDataSets
from ..core.logging_config import get_logger
from ..core.models import DataSet
from ..core.options import GraphConfig
from ..render.renderer import TemplateRenderer, compress_svg, compression_available

logger = get_logger(__name__)

# Options every variant understands
BASE_DEFAULTS: dict[str, Any] = {
    "width": 500,
    "height": 300,
    "style_sheet": "",
    "show_graph_title": 0,
    "graph_title": "Graph Title",
    "show_graph_subtitle": 0,
    "graph_subtitle": "Graph Sub Title",
    "key": 0,
    "compress": 0,
}


class Graph(ABC):
    """Abstract base class for SVG graph variants.

    Each variant supplies its option defaults, an optional validation and
    layout step, and the name of the template that draws it. The base class
    owns the config store, the data sets and the calculated values, and runs
    them through the template renderer on ``burn()``.

    Attributes:
        template_name: Template file drawn by the variant (must be set by subclass)
        max_data_sets: Upper bound on ``add_data`` calls, ``None`` for unbounded
    """

    template_name: str = ""  # Must be overridden by subclass
    max_data_sets: int | None = None

    def __init__(
        self,
        config: Mapping[str, Any] | None = None,
        *,
        renderer: TemplateRenderer | None = None,
    ):
        """Create a graph from the variant defaults and caller overrides.

        Args:
            config: Option overrides; every name must exist in ``defaults()``
            renderer: Template renderer to reuse across graphs (default: bundled templates)

        Raises:
            UnknownOption: If an override names an option the variant lacks
            InvalidConfiguration: If the variant's validation rejects the config
        """
        if not self.template_name:
            raise NotImplementedError(
                f"{self.__class__.__name__} must define template_name class attribute"
            )
        self.config = GraphConfig(self.defaults(), config, variant=self.__class__.__name__)
        self.data: list[DataSet] = []
        self.calc: dict[str, Any] = {}
        self.renderer = renderer or TemplateRenderer()
        self.validate()

    @classmethod
    @abstractmethod
    def defaults(cls) -> dict[str, Any]:
        """Return the variant's complete option set with default values."""
        pass

    def validate(self) -> None:
        """Check the config after overrides are applied."""
        check_number(self.config, "width", positive=True)
        check_number(self.config, "height", positive=True)

    def layout(self) -> dict[str, Any]:
        """Compute values derived from config and data before rendering."""
        return {}

    def template(self) -> str:
        return self.template_name

    def get(self, name: str) -> Any:
        return self.config.get(name)

    def set(self, name: str, value: Any) -> Any:
        return self.config.set(name, value)

    @abstractmethod
    def add_data(self, record: Mapping[str, Any]) -> bool:
        """Add one data set to the graph."""
        pass

    def clear_data(self) -> None:
        """Remove all data sets, keeping the config for reuse."""
        self.data = []
        self.calc = {}

    def _check_capacity(self) -> None:
        if self.max_data_sets is not None and len(self.data) >= self.max_data_sets:
            raise TooManyDataSets(
                f"{self.__class__.__name__} accepts only {self.max_data_sets} data set(s)"
            )

    def context(self) -> dict[str, Any]:
        """Values exposed to the template."""
        return {
            "config": self.config.as_dict(),
            "data": self.data,
            "calc": self.calc,
            "sin": math.sin,
            "cos": math.cos,
        }

    def burn(self, template_source: str | None = None) -> str | bytes:
        """Render the graph and return the SVG document.

        Args:
            template_source: Template text to draw with instead of the variant's own

        Returns:
            SVG text, or gzip-compressed bytes when the ``compress`` option is set

        Raises:
            NoData: If no data set has been added
            RenderError: If the template fails to render
        """
        if not self.data:
            raise NoData("No data available")

        self.calc = self.layout()
        if template_source is not None:
            document = self.renderer.render_string(template_source, self.context())
        else:
            document = self.renderer.render(self.template(), self.context())
        logger.debug(
            "Rendered graph",
            extra={"variant": self.__class__.__name__, "data_sets": len(self.data)},
        )

        if self.config.get("compress"):
            if compression_available():
                return compress_svg(document)
            logger.warning("gzip not available, returning uncompressed SVG")
            document += "<!-- gzip not available for SVGZ -->"
        return document


class FieldGraph(Graph):
    """Graph whose data is addressed by a declared, ordered list of fields."""

    @classmethod
    def defaults(cls) -> dict[str, Any]:
        return {**BASE_DEFAULTS, "fields": []}

    def validate(self) -> None:
        super().validate()
        fields = self.config.get("fields")
        if not isinstance(fields, (list, tuple)) or not fields:
            raise InvalidConfiguration("fields was not supplied or is empty")

    @property
    def fields(self) -> list[str]:
        return [str(f) for f in self.config.get("fields") or []]

    def add_data(self, record: Mapping[str, Any]) -> bool:
        """Add a data set aligned with the configured fields.

        ``record["data"]`` is either a list matched to fields by position or a
        mapping keyed by field name; ``record["title"]`` is optional.

        Raises:
            MissingFields: If no fields are configured
            TooManyDataSets: If the variant's data set limit is reached
            InvalidRow: If the values do not line up with the fields
        """
        fields = self.fields
        if not fields:
            raise MissingFields("fields must be configured before adding data")
        self._check_capacity()

        raw = record.get("data")
        if isinstance(raw, Mapping):
            # YAML reads numeric field names such as years as ints
            keyed = {str(k): v for k, v in raw.items()}
            unknown = [k for k in keyed if k not in fields]
            if unknown:
                raise InvalidRow(f"Data has values for unknown fields: {unknown}")
            values = {f: keyed.get(f) for f in fields}
        elif isinstance(raw, (list, tuple)):
            if len(raw) > len(fields):
                raise InvalidRow(
                    f"Data has {len(raw)} values but only {len(fields)} fields are configured"
                )
            values = {f: (raw[i] if i < len(raw) else None) for i, f in enumerate(fields)}
        else:
            raise InvalidRow("Data must be a list or a mapping of field values")

        self.data.append(DataSet(values=values, title=record.get("title")))
        return True


def numeric(value: Any) -> float | None:
    """Return ``value`` as a number, or None for empty values."""
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidRow(f"Value {value!r} is not numeric") from None


def check_number(
    config: GraphConfig, name: str, *, allow_empty: bool = False, positive: bool = False
) -> None:
    """Raise InvalidConfiguration unless option ``name`` holds a number."""
    value = config.get(name)
    if allow_empty and value in (None, ""):
        return
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidConfiguration(f"{name} must be a number, got {value!r}")
    if positive and value <= 0:
        raise InvalidConfiguration(f"{name} must be greater than zero")
