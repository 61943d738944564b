"""Template rendering for SVG graph documents."""

from __future__ import annotations

from .renderer import TemplateRenderer, compress_svg, write_output

__all__ = ["TemplateRenderer", "compress_svg", "write_output"]
