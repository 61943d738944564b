from __future__ import annotations

import random
import sys
from pathlib import Path

import typer

from .. import __version__
from ..core.chartfile import load_chart
from ..core.config import get_settings
from ..core.errors import GraphError
from ..core.logging_config import get_logger, setup_logging
from ..graphs import GRAPH_TYPES, GraphType, RandomColorStrategy, create_graph
from ..render.renderer import TemplateRenderer, write_output
from . import output as cli_output

app = typer.Typer(help="svg-graph: render SVG graphs from chart files")

logger = get_logger(__name__)


@app.callback()
def callback(
    json_logs: bool = typer.Option(False, "--json-logs", help="Output logs in JSON format"),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)"
    ),
) -> None:
    """Configure global CLI options."""
    settings = get_settings()
    level = (log_level or settings.log_level).upper()
    setup_logging(json_output=json_logs, log_level=level, log_dir=settings.log_dir)
    logger.debug("CLI initialized", extra={"json_logs": json_logs, "log_level": level})


@app.command()
def version() -> None:
    """Print version."""
    typer.echo(__version__)


@app.command("types")
def list_types() -> None:
    """List the available graph types."""
    for graph_type in GraphType:
        typer.echo(f"{graph_type.value}\t{GRAPH_TYPES[graph_type].__name__}")


@app.command()
def options(
    graph_type: GraphType = typer.Argument(..., case_sensitive=False, help="Graph type"),  # noqa: B008
) -> None:
    """List the config options of a graph type with their defaults."""
    defaults = GRAPH_TYPES[graph_type].defaults()
    for name in sorted(defaults):
        typer.echo(f"{name} = {defaults[name]!r}")


@app.command()
def render(
    chart_file: Path = typer.Argument(..., help="YAML or JSON chart file"),  # noqa: B008
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write the SVG here instead of stdout"
    ),  # noqa: B008
    compress: bool = typer.Option(False, "--compress", help="Gzip the output (SVGZ)"),
    template: Path | None = typer.Option(
        None, "--template", help="Render with this Jinja2 template file instead"
    ),  # noqa: B008
    seed: int | None = typer.Option(
        None, help="Seed for heatmap cell colours, for repeatable output"
    ),
) -> None:
    """Render a chart file to SVG.

    The chart file names a graph ``type``, its ``config`` options and a list of
    ``data`` sets. Template directory overrides come from SVG_GRAPH_TEMPLATES_DIR.
    """
    settings = get_settings()
    try:
        chart = load_chart(chart_file)
    except GraphError as e:
        cli_output.error(str(e))
        raise typer.Exit(code=1) from e

    try:
        graph_type = GraphType(chart.type)
    except ValueError:
        cli_output.error(
            f"Unknown graph type '{chart.type}'. Choose from: "
            + ", ".join(t.value for t in GraphType)
        )
        raise typer.Exit(code=1) from None

    try:
        kwargs = {"renderer": TemplateRenderer(settings.templates_dir)}
        if graph_type is GraphType.HEATMAP and seed is not None:
            kwargs["color_strategy"] = RandomColorStrategy(random.Random(seed))
        graph = create_graph(graph_type, chart.config, **kwargs)
        if compress:
            graph.set("compress", 1)
        for dataset in chart.datasets:
            graph.add_data(dataset)

        source = template.read_text(encoding="utf-8") if template else None
        document = graph.burn(template_source=source)
    except GraphError as e:
        logger.error("Failed to render chart", extra={"chart_file": str(chart_file), "error": str(e)})
        cli_output.error(str(e))
        raise typer.Exit(code=1) from e

    logger.info(
        "Rendered chart",
        extra={"chart_file": str(chart_file), "type": chart.type, "data_sets": len(chart.datasets)},
    )
    if output:
        write_output(output, document)
        cli_output.success(f"Graph written to {output}")
    elif isinstance(document, bytes):
        sys.stdout.buffer.write(document)
    else:
        typer.echo(document, nl=False)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
