"""Pie graph: wedge geometry, labels and key placement."""

from __future__ import annotations

import math
from typing import Any

from ..core.errors import DegenerateData
from ..core.logging_config import get_logger
from ..render.renderer import format_number as _n
from .base import FieldGraph, check_number, numeric

logger = get_logger(__name__)

PADDING = 30
KEY_BOX_SIZE = 12
KEY_PADDING = 5
KEY_START = 30
# Extra radius drawn behind the pie when wedges are pulled out
EXPAND_MARGIN = 10


def wedge_fractions(values: list[float]) -> list[float]:
    """Return each value's share of the total.

    Raises:
        DegenerateData: If the values sum to zero
    """
    total = sum(values)
    if total == 0:
        raise DegenerateData("Pie values sum to zero")
    return [v / total for v in values]


def percent_of(value: float, total: float) -> int:
    return int(round(100 * value / total)) if total else 0


def label_text(field: str, value: Any, percent: int, *, labels: bool, values: bool, percents: bool) -> str:
    parts = []
    if labels:
        parts.append(field)
    if values:
        parts.append(f"[{value if value is not None else ''}]")
    if percents:
        parts.append(f"{percent}%")
    return " ".join(parts)


class Pie(FieldGraph):
    """Pie graph of a single data set, one wedge per configured field.

    Wedges run clockwise from three o'clock. Only one data set is accepted.
    """

    template_name = "pie.svg.j2"
    max_data_sets = 1

    @classmethod
    def defaults(cls) -> dict[str, Any]:
        return {
            **super().defaults(),
            "style_sheet_field_names": 0,
            "show_shadow": 1,
            "shadow_size": 1,
            "shadow_offset": 15,
            "key_placement": "R",
            "show_data_labels": 0,
            "show_actual_values": 0,
            "show_percent": 1,
            "show_key_data_labels": 1,
            "show_key_actual_values": 1,
            "show_key_percent": 0,
            "expanded": 0,
            "expand_greatest": 0,
        }

    def validate(self) -> None:
        super().validate()
        check_number(self.config, "shadow_size", allow_empty=True)
        check_number(self.config, "shadow_offset", allow_empty=True)

    def _canvas(self) -> dict[str, Any]:
        """Centre, radius and key orientation for the configured canvas."""
        cfg = self.config
        w = float(cfg.get("width"))
        h = float(cfg.get("height"))
        if cfg.get("show_graph_title"):
            h -= 25
        if cfg.get("show_graph_subtitle"):
            h -= 10

        x = w / 2
        y = h / 2
        if cfg.get("show_graph_title"):
            y += 15
        if cfg.get("show_graph_subtitle"):
            y += 10

        placement = str(cfg.get("key_placement") or "R").upper()
        key_position = None
        if w >= h:
            r = h / 2 - PADDING
            if cfg.get("key"):
                key_position = "h"
                if placement == "R":
                    x -= r / 3
                    if x < r:
                        r -= w / 8
                else:
                    x += r / 3
                    if r > (w - x) and x > (w / 2):
                        r -= w / 8
        else:
            r = w / 2 - PADDING
            if cfg.get("key"):
                key_position = "v"
                if placement == "B":
                    y -= r / 2
                    if y < r:
                        r -= h / 8
                else:
                    y += r / 2
                    if r > (h - y) and y > (h / 2):
                        r -= h / 8
                # Tall canvases draw side keys on top
                if placement in ("R", "L"):
                    placement = "T"

        return {
            "width": w,
            "height": h,
            "x": x,
            "y": y,
            "r": max(r, 0.0),
            "key_position": key_position,
            "key_placement": placement,
        }

    def layout(self) -> dict[str, Any]:
        cfg = self.config
        dataset = self.data[0]
        fields = self.fields
        raw = [dataset.value(f) for f in fields]
        nums = [numeric(v) for v in raw]
        present = [n for n in nums if n is not None]
        values = [n or 0.0 for n in nums]

        total = sum(values)
        min_value = min(present) if present else 0.0
        max_value = max(present) if present else 0.0

        try:
            fractions = wedge_fractions(values)
            degenerate = False
        except DegenerateData:
            logger.warning(
                "Pie values sum to zero, drawing empty wedges",
                extra={"fields": len(fields)},
            )
            fractions = [0.0] * len(values)
            degenerate = True

        canvas = self._canvas()
        x, y, r = canvas["x"], canvas["y"], canvas["r"]

        expanded = bool(cfg.get("expanded"))
        expand_greatest = bool(cfg.get("expand_greatest")) and not expanded
        e = EXPAND_MARGIN if (expanded or expand_greatest) else 0
        offset = r / 10

        shadow = None
        if cfg.get("show_shadow") and not e:
            size = cfg.get("shadow_size")
            shadow_r = r + (r / 100) * float(size) if size not in (None, "", 0) else r
            shadow_offset = float(cfg.get("shadow_offset") or 0)
            shadow = {"cx": x + shadow_offset, "cy": y + shadow_offset, "r": shadow_r}

        if cfg.get("show_percent") and cfg.get("show_data_labels"):
            text_pad = 20
        else:
            text_pad = 5

        wedges = []
        cumulative = 0.0
        half_cumulative = 0.0
        greatest_done = False
        start_x, start_y = x + r, y
        for index, field in enumerate(fields):
            value = values[index]
            cumulative += fractions[index]
            # Midpoint of this wedge: everything before it plus half of itself
            half = fractions[index] / 2
            mid_fraction = half_cumulative + half
            half_cumulative += fractions[index]

            radians = math.radians(cumulative * 360)
            radians_half = math.radians(mid_fraction * 360)
            end_x = r * math.cos(radians)
            end_y = r * math.sin(radians)
            mid_x = r * math.cos(radians_half)
            mid_y = r * math.sin(radians_half)

            percent = 0 if degenerate else percent_of(value, total)

            displace = expanded
            if expand_greatest and not greatest_done and nums[index] == max_value:
                displace = greatest_done = True
            dx = offset * math.cos(radians_half) if displace else 0.0
            dy = offset * math.sin(radians_half) if displace else 0.0

            if math.isclose(fractions[index], 1.0):
                # An arc whose ends coincide draws nothing: use two half circles
                path = (
                    f"M{_n(x + r + dx)} {_n(y + dy)} "
                    f"A{_n(r)} {_n(r)} 0 1 1 {_n(x - r + dx)} {_n(y + dy)} "
                    f"A{_n(r)} {_n(r)} 0 1 1 {_n(x + r + dx)} {_n(y + dy)} Z"
                )
            else:
                path = (
                    f"M{_n(start_x + dx)} {_n(start_y + dy)} "
                    f"A{_n(r)} {_n(r)} 0 {1 if percent >= 50 else 0} 1 "
                    f"{_n(x + end_x + dx)} {_n(y + end_y + dy)} "
                    f"L{_n(x + dx)} {_n(y + dy)} Z"
                )

            # Label sits outside the wedge midpoint, anchored away from the centre
            if mid_x >= 0:
                label_x, anchor = x + mid_x + dx + text_pad, "start"
            else:
                label_x, anchor = x + mid_x + dx - text_pad, "end"
            if mid_y >= 0:
                label_y = y + mid_y + dy + text_pad
            else:
                label_y = y + mid_y + dy - text_pad

            wedges.append(
                {
                    "field": field,
                    "value": raw[index],
                    "percent": percent,
                    "large_arc": percent >= 50,
                    "path": path,
                    "displaced": displace,
                    "css_class": self._css_class(field, index + 1, "dataPoint"),
                    "label": {
                        "x": label_x,
                        "y": label_y,
                        "anchor": anchor,
                        "text": label_text(
                            field,
                            raw[index],
                            percent,
                            labels=bool(cfg.get("show_data_labels")),
                            values=bool(cfg.get("show_actual_values")),
                            percents=bool(cfg.get("show_percent")),
                        ),
                    },
                }
            )
            start_x, start_y = x + end_x, y + end_y

        calc = {
            "total": total,
            "min_value": min_value,
            "max_value": max_value,
            "degenerate": degenerate,
            "x": x,
            "y": y,
            "r": r,
            "e": e,
            "shadow": shadow,
            "wedges": wedges,
            "key_entries": self._key_entries(canvas, wedges),
            "title_y": 15,
            "subtitle_y": 30 if cfg.get("show_graph_title") else 15,
        }
        logger.debug(
            "Pie layout",
            extra={"total": total, "radius": r, "wedges": len(wedges), "degenerate": degenerate},
        )
        return calc

    def _css_class(self, field: str, position: int, kind: str) -> str:
        if self.config.get("style_sheet_field_names"):
            return f"{field}_{kind}"
        return f"{kind}{position}"

    def _key_entries(self, canvas: dict[str, Any], wedges: list[dict[str, Any]]) -> list[dict[str, Any]]:
        cfg = self.config
        position = canvas["key_position"]
        if not position:
            return []

        x, y, r = canvas["x"], canvas["y"], canvas["r"]
        w = canvas["width"]
        step = KEY_BOX_SIZE + KEY_PADDING
        entries = []
        x_key, y_key = float(PADDING), float(PADDING)
        for count, wedge in enumerate(wedges, start=1):
            if position == "h":
                box_x = x + r + KEY_START if canvas["key_placement"] == "R" else KEY_START
                box_y = (y - r) + step * count
            else:
                if count in (7, 13):
                    # Wrap the key into a new column every six entries
                    x_key += w / 3
                    y_key -= step * 6
                box_x = x_key
                if canvas["key_placement"] == "T":
                    box_y = y_key + step * count
                else:
                    box_y = (r * 2) + (PADDING * 2) + y_key + step * count
            entries.append(
                {
                    "x": box_x,
                    "y": box_y,
                    "size": KEY_BOX_SIZE,
                    "text_x": box_x + KEY_BOX_SIZE + KEY_PADDING,
                    "text_y": box_y + KEY_BOX_SIZE,
                    "css_class": self._css_class(wedge["field"], count, "key"),
                    "text": label_text(
                        wedge["field"],
                        wedge["value"],
                        wedge["percent"],
                        labels=bool(cfg.get("show_key_data_labels")),
                        values=bool(cfg.get("show_key_actual_values")),
                        percents=bool(cfg.get("show_key_percent")),
                    ),
                }
            )
        return entries

