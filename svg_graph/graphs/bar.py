from __future__ import annotations

from typing import Any

from .axes import AxisGraph


class Bar(AxisGraph):
    """Vertical bar graph; each field holds one bar per data set."""

    template_name = "bar.svg.j2"

    @classmethod
    def defaults(cls) -> dict[str, Any]:
        return {**super().defaults(), "bar_gap": 1}

    def layout(self) -> dict[str, Any]:
        calc = self.axis_layout()
        scale_y = calc.pop("scale_y")
        series = calc["series"]
        area = calc["area"]
        field_width = calc["field_width"]
        gap = field_width / 4 if self.config.get("bar_gap") else 0
        bar_width = (field_width - gap) / len(series)

        x_labels = []
        bars = []
        for index, field in enumerate(self.fields):
            left = area["x"] + index * field_width
            x_labels.append({"x": left + field_width / 2, "text": field})
            for number, values in enumerate(series, start=1):
                value = values[index]
                if value is None:
                    continue
                top = scale_y(value)
                bottom = scale_y(calc["scale_min"])
                bars.append(
                    {
                        "x": left + gap / 2 + (number - 1) * bar_width,
                        "y": min(top, bottom),
                        "width": bar_width,
                        "height": abs(bottom - top),
                        "value": value,
                        "css_class": f"fill{number}",
                        "field": field,
                    }
                )

        calc.update({"bars": bars, "x_labels": x_labels})
        return calc
