from __future__ import annotations

from typing import Any

from ..render.renderer import format_number
from .axes import AxisGraph


class Line(AxisGraph):
    """Line graph; each data set is a polyline across the fields."""

    template_name = "line.svg.j2"

    @classmethod
    def defaults(cls) -> dict[str, Any]:
        return {**super().defaults(), "show_data_points": 1, "area_fill": 0}

    def layout(self) -> dict[str, Any]:
        calc = self.axis_layout()
        scale_y = calc.pop("scale_y")
        area = calc["area"]
        fields = self.fields
        step = area["width"] / (len(fields) - 1) if len(fields) > 1 else 0
        x_positions = [area["x"] + i * step for i in range(len(fields))]

        lines = []
        for number, values in enumerate(calc["series"], start=1):
            points = [
                {"x": x_positions[i], "y": scale_y(v), "value": v, "field": fields[i]}
                for i, v in enumerate(values)
                if v is not None
            ]
            path = " ".join(
                f"{'M' if i == 0 else 'L'}{format_number(p['x'])} {format_number(p['y'])}"
                for i, p in enumerate(points)
            )
            fill = ""
            if points and self.config.get("area_fill"):
                fill = (
                    f"{path} L{format_number(points[-1]['x'])} {format_number(calc['base_line'])} "
                    f"L{format_number(points[0]['x'])} {format_number(calc['base_line'])} Z"
                )
            lines.append({"number": number, "points": points, "path": path, "fill": fill})

        calc.update(
            {
                "lines": lines,
                "x_labels": [{"x": x, "text": f} for x, f in zip(x_positions, fields)],
            }
        )
        return calc
