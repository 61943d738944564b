"""Shared x/y axis layout for field-keyed value graphs."""

from __future__ import annotations

from typing import Any

from .base import FieldGraph, check_number, numeric
from .scaling import range_calc, ticks

# Approximate glyph width used to reserve room for labels
CHAR_WIDTH = 6
KEY_BOX_SIZE = 12
KEY_PADDING = 5


class AxisGraph(FieldGraph):
    """Field-keyed graph drawn against a y value scale.

    Subclasses place their marks inside ``calc["area"]`` using ``scale_y``.
    """

    @classmethod
    def defaults(cls) -> dict[str, Any]:
        return {
            **super().defaults(),
            "show_data_values": 1,
            "show_x_labels": 1,
            "show_y_labels": 1,
            "min_scale_value": 0,
            "scale_divisions": "",
            "show_x_title": 0,
            "x_title": "X Field names",
            "show_y_title": 0,
            "y_title": "Y Scale",
        }

    def validate(self) -> None:
        super().validate()
        check_number(self.config, "min_scale_value", allow_empty=True)
        check_number(self.config, "scale_divisions", allow_empty=True, positive=True)

    def series(self) -> list[list[float | None]]:
        """Numeric values of every data set in field order."""
        return [[numeric(ds.value(f)) for f in self.fields] for ds in self.data]

    def axis_layout(self) -> dict[str, Any]:
        cfg = self.config
        width = float(cfg.get("width"))
        height = float(cfg.get("height"))
        fields = self.fields
        series = self.series()

        present = [v for values in series for v in values if v is not None]
        minimum = float(cfg.get("min_scale_value") or 0)
        if present:
            minimum = min(minimum, min(present))
        top = max(present) if present else minimum
        scale_max, division, precision = range_calc(top - minimum)
        if cfg.get("scale_divisions"):
            division = float(cfg.get("scale_divisions"))

        # Room for titles, axis labels and the key
        top_pad = 20
        if cfg.get("show_graph_title"):
            top_pad += 25
        if cfg.get("show_graph_subtitle"):
            top_pad += 10
        label_chars = max(len(f"{minimum + scale_max:.{precision}f}"), 1)
        left_pad = 10 + (label_chars * CHAR_WIDTH if cfg.get("show_y_labels") else 0)
        if cfg.get("show_y_title"):
            left_pad += 20
        bottom_pad = 10 + (20 if cfg.get("show_x_labels") else 0)
        if cfg.get("show_x_title"):
            bottom_pad += 20
        right_pad = 20
        key_entries = []
        if cfg.get("key"):
            longest = max((len(ds.title or "") for ds in self.data), default=0)
            right_pad += KEY_BOX_SIZE + KEY_PADDING * 2 + longest * CHAR_WIDTH

        area = {
            "x": left_pad,
            "y": top_pad,
            "width": max(width - left_pad - right_pad, 1.0),
            "height": max(height - top_pad - bottom_pad, 1.0),
        }
        base_line = area["y"] + area["height"]

        def scale_y(value: float) -> float:
            return base_line - (value - minimum) / scale_max * area["height"]

        y_ticks = [
            {"y": scale_y(v), "text": f"{v:.{precision}f}"}
            for v in ticks(minimum, scale_max, division)
        ]
        field_width = area["width"] / len(fields)

        if cfg.get("key"):
            key_x = area["x"] + area["width"] + KEY_PADDING * 2
            for count, ds in enumerate(self.data, start=1):
                key_y = area["y"] + (KEY_BOX_SIZE + KEY_PADDING) * (count - 1)
                key_entries.append(
                    {
                        "x": key_x,
                        "y": key_y,
                        "size": KEY_BOX_SIZE,
                        "text_x": key_x + KEY_BOX_SIZE + KEY_PADDING,
                        "text_y": key_y + KEY_BOX_SIZE,
                        "css_class": f"key{count}",
                        "text": ds.title or "",
                    }
                )

        return {
            "min_value": min(present) if present else None,
            "max_value": max(present) if present else None,
            "scale_min": minimum,
            "scale_max": scale_max,
            "division": division,
            "precision": precision,
            "area": area,
            "base_line": base_line,
            "field_width": field_width,
            "y_ticks": y_ticks,
            "key_entries": key_entries,
            "scale_y": scale_y,
            "series": series,
        }
