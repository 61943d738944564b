"""HeatMap graph: a grid of coloured blocks, one row of blocks per x value."""

from __future__ import annotations

import random
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from ..core.errors import InvalidConfiguration, InvalidRow, MissingAxisOrder
from ..core.logging_config import get_logger
from ..core.models import DataSet
from ..render.renderer import TemplateRenderer
from .base import BASE_DEFAULTS, Graph, numeric

logger = get_logger(__name__)

# Pixels reserved per label character, and around the whole grid
CHAR_WIDTH = 8
MARGIN = 10

ColorStrategy = Callable[[Any], str]


class RandomColorStrategy:
    """Pick an unrelated random colour for every cell.

    Each channel is uniform in [0, 255). Pass a seeded ``random.Random`` for
    repeatable output.
    """

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    def __call__(self, value: Any = None) -> str:
        r = self.rng.randrange(255)
        g = self.rng.randrange(255)
        b = self.rng.randrange(255)
        return f"rgb({r},{g},{b})"


class GradientColorStrategy:
    """Map a cell's numeric value linearly between two colours.

    Values outside [low, high] are clamped; empty or non-numeric values get
    ``empty``.
    """

    def __init__(
        self,
        low: float,
        high: float,
        start: tuple[int, int, int] = (255, 255, 204),
        end: tuple[int, int, int] = (189, 0, 38),
        empty: str = "rgb(240,240,240)",
    ):
        if high <= low:
            raise InvalidConfiguration("Gradient high must be greater than low")
        self.low = low
        self.high = high
        self.start = start
        self.end = end
        self.empty = empty

    def __call__(self, value: Any = None) -> str:
        try:
            number = numeric(value)
        except InvalidRow:
            return self.empty
        if number is None:
            return self.empty
        ratio = min(max((number - self.low) / (self.high - self.low), 0.0), 1.0)
        channels = [round(s + (e - s) * ratio) for s, e in zip(self.start, self.end)]
        return "rgb({},{},{})".format(*channels)


class HeatMap(Graph):
    """HeatMap of a single table of rows.

    Data is either an array of arrays whose first entry is a header
    (``["x", "c", "b"]``) or an array of records each holding ``x`` plus one
    value per ``y_axis_order`` entry. Rows become columns of blocks along the
    x axis and the axis fields are stacked upwards.
    """

    template_name = "heatmap.svg.j2"
    max_data_sets = 1

    def __init__(
        self,
        config: Mapping[str, Any] | None = None,
        *,
        renderer: TemplateRenderer | None = None,
        color_strategy: ColorStrategy | None = None,
    ):
        self.color_strategy = color_strategy or RandomColorStrategy()
        super().__init__(config, renderer=renderer)

    @classmethod
    def defaults(cls) -> dict[str, Any]:
        return {
            **BASE_DEFAULTS,
            "block_width": 24,
            "block_height": 24,
            "gutter_width": 1,
            "y_axis_order": [],
            "debug": 0,
        }

    def validate(self) -> None:
        super().validate()
        order = self.config.get("y_axis_order")
        if order is not None and not isinstance(order, (list, tuple)):
            raise InvalidConfiguration("y_axis_order must be a list of field names")
        for name in ("block_width", "block_height", "gutter_width"):
            value = self.config.get(name)
            if not isinstance(value, (int, float)) or value < 0:
                raise InvalidConfiguration(f"{name} must be a non-negative number")

    def resolve_axis_order(self, rows: Sequence[Any]) -> list[str]:
        """Axis order from config, else from the header row of ``rows``.

        Raises:
            MissingAxisOrder: If neither source provides any field names
        """
        order = [str(name) for name in self.config.get("y_axis_order") or []]
        if not order and rows and isinstance(rows[0], (list, tuple)):
            order = [str(name) for name in rows[0][1:]]
        if not order:
            raise MissingAxisOrder(
                "The data needs to have either a y_axis_order or a header array in the data"
            )
        return order

    def add_data(self, record: Mapping[str, Any]) -> bool:
        """Add the table of rows.

        Raises:
            TooManyDataSets: If a table was already added
            MissingAxisOrder: If the axis order can not be resolved
            InvalidRow: If a row is malformed or missing a value
        """
        self._check_capacity()
        rows = record.get("data")
        if not isinstance(rows, (list, tuple)):
            raise InvalidRow("Data needs to be an array of arrays or an array of records")

        order = self.resolve_axis_order(rows)
        if rows and isinstance(rows[0], (list, tuple)):
            header = [str(name) for name in rows[0]]
            body = rows[1:]
            start = 1
        else:
            header = []
            body = rows
            start = 0

        normalized = [
            self._normalize_row(row, index, order, header)
            for index, row in enumerate(body, start=start)
        ]

        self.data.append(DataSet(values=normalized, title=record.get("title"), axis_order=order))
        logger.debug("Added heatmap data", extra={"rows": len(normalized), "columns": len(order)})
        return True

    def _normalize_row(
        self, row: Any, index: int, order: list[str], header: list[str]
    ) -> dict[str, Any]:
        if isinstance(row, (list, tuple)):
            if not header:
                raise InvalidRow(f"row '{index}' is an array but the data has no header array")
            values = dict(zip(header[1:], row[1:]))
            x = row[0] if row else None
        elif isinstance(row, Mapping):
            values = row
            x = row.get("x")
        else:
            raise InvalidRow("Data needs to be in an array of arrays or an array of records")

        if x is None:
            raise InvalidRow(f"row '{index}' has no x value")
        normalized: dict[str, Any] = {"x": x}
        for name in order:
            if values.get(name) is None:
                raise InvalidRow(f"'{x}' does not have a '{name}' value")
            normalized[name] = self.color_strategy(values[name])
        return normalized

    def layout(self) -> dict[str, Any]:
        cfg = self.config
        block_w = cfg.get("block_width")
        block_h = cfg.get("block_height")
        gutter = cfg.get("gutter_width")

        order = self.data[0].axis_order
        max_key_size = max(len(ds.title or "") for ds in self.data)
        max_x = max(len(ds.values) for ds in self.data)
        max_y = len(order)
        max_y_label_length = max(len(name) for name in order)
        max_x_label_length = max(
            (len(str(row["x"])) for ds in self.data for row in ds.values), default=0
        )

        width = MARGIN * 2 + max_y_label_length * CHAR_WIDTH + 1 + max_x * (block_w + gutter)
        height = MARGIN * 2 + max_x_label_length * CHAR_WIDTH + 1 + max_y * (block_h + gutter)

        # Graph area inside the margins and label gutters
        y_label_room = max_y_label_length * CHAR_WIDTH
        x_label_room = max_x_label_length * CHAR_WIDTH
        area_x = MARGIN + y_label_room
        area_y = MARGIN
        area_w = width - MARGIN * 2 - y_label_room
        area_h = height - MARGIN * 2 - x_label_room
        base_line = area_h + area_y

        y_labels = [
            {
                "x": area_x - y_label_room / 2,
                "y": (base_line - 1) - row * (block_h + gutter) - block_h / 3,
                "text": name,
            }
            for row, name in enumerate(order)
        ]

        x_labels = []
        cells = []
        for ds in self.data:
            for column, pair in enumerate(ds.values):
                block_x = area_x + 1 + column * (block_w + gutter)
                label = str(pair["x"])
                x_labels.append(
                    {
                        "x": block_x,
                        "y": base_line + 1,
                        "text": label,
                        "shift_x": (len(label) + 1) * 4,
                        "shift_y": (block_h - gutter) / -3,
                        "marker_x": block_x + block_w / 2,
                    }
                )
                for row, name in enumerate(order):
                    cells.append(
                        {
                            "x": block_x,
                            "y": (base_line - 1 - block_h) - row * (block_h + gutter),
                            "width": block_w,
                            "height": block_h,
                            "fill": pair[name],
                            "field": name,
                            "label": label,
                        }
                    )

        return {
            "max_key_size": max_key_size,
            "max_x": max_x,
            "min_x": 0,
            "max_y": max_y,
            "min_y": 0,
            "max_x_label_length": max_x_label_length,
            "max_y_label_length": max_y_label_length,
            "width": width,
            "height": height,
            "y_axis_order": order,
            "area": {"x": area_x, "y": area_y, "width": area_w, "height": area_h},
            "base_line": base_line,
            "x_labels": x_labels,
            "y_labels": y_labels,
            "cells": cells,
        }
