from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, TemplateNotFound

from ..core.errors import RenderError
from ..core.logging_config import get_logger

try:
    import gzip
except ImportError:  # pragma: no cover - interpreter built without zlib
    gzip = None

logger = get_logger(__name__)

DEFAULT_TEMPLATES_DIR = Path(__file__).parent / "templates"


def format_number(value: Any, precision: int = 4) -> str:
    """Format a coordinate for SVG attributes without trailing zeros."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, int):
        return str(value)
    text = f"{value:.{precision}f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


class TemplateRenderer:
    """Renders graph documents from Jinja2 SVG templates."""

    def __init__(self, templates_dir: Path | None = None):
        # A custom directory overrides bundled templates by file name
        search_path = [str(DEFAULT_TEMPLATES_DIR)]
        if templates_dir is not None:
            search_path.insert(0, str(templates_dir))
        # Escape markup in SVG templates; field names and titles are user data
        self.env = Environment(
            loader=FileSystemLoader(search_path),
            autoescape=lambda name: name is None or name.endswith(".svg.j2"),
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )
        self.env.filters["num"] = format_number
        self.search_path = search_path

    def render(self, template_name: str, context: dict[str, Any]) -> str:
        """Render a named template from the templates directory.

        Args:
            template_name: File name of the template (e.g. ``pie.svg.j2``)
            context: Values exposed to the template (config, data, calc, sin, cos)

        Returns:
            Rendered document text

        Raises:
            RenderError: If the template is missing or fails to render
        """
        try:
            template = self.env.get_template(template_name)
            logger.debug("Rendering template", extra={"template": template_name})
            return template.render(**context)
        except TemplateNotFound as e:
            logger.error("Template not found", extra={"template": template_name})
            raise RenderError(
                f"Template not found: {e}. Looked in {', '.join(self.search_path)}"
            ) from e
        except (TemplateError, ArithmeticError, TypeError, ValueError) as e:
            logger.error(
                "Failed to render template",
                extra={"template": template_name, "error": str(e)},
            )
            raise RenderError(f"Template error in {template_name}: {e}") from e

    def render_string(self, source: str, context: dict[str, Any]) -> str:
        """Render a template supplied as text rather than by name."""
        try:
            return self.env.from_string(source).render(**context)
        except (TemplateError, ArithmeticError, TypeError, ValueError) as e:
            logger.error("Failed to render template string", extra={"error": str(e)})
            raise RenderError(f"Template error: {e}") from e


def compression_available() -> bool:
    return gzip is not None


def compress_svg(text: str) -> bytes:
    """Gzip a rendered document into SVGZ bytes.

    ``mtime`` is pinned so identical documents compress to identical bytes.
    """
    if gzip is None:
        raise RuntimeError("gzip is not available in this interpreter")
    return gzip.compress(text.encode("utf-8"), mtime=0)


def write_output(path: str | Path, content: str | bytes) -> None:
    """Write a rendered document to file."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        p.write_bytes(content)
    else:
        p.write_text(content, encoding="utf-8")
