"""Exceptions raised by graph construction, data loading and rendering."""


class GraphError(Exception):
    """Base exception for svg_graph errors."""
    pass


class UnknownOption(GraphError):
    """Config option is not part of the graph variant's option set."""

    def __init__(self, name: str, variant: str = "graph"):
        self.name = name
        self.variant = variant
        super().__init__(f"Option '{name}' can not be used with {variant}")


class InvalidConfiguration(GraphError):
    """Config values fail the variant's validation."""
    pass


class MissingFields(InvalidConfiguration):
    """Field-keyed data was added before any fields were configured."""
    pass


class MissingAxisOrder(InvalidConfiguration):
    """HeatMap has neither a y_axis_order nor a header row to derive one."""
    pass


class TooManyDataSets(GraphError):
    """Variant accepts a single data set and one was already added."""
    pass


class InvalidRow(GraphError):
    """A data row is malformed or is missing a required value."""
    pass


class NoData(GraphError):
    """burn() was called before any data was added."""
    pass


class RenderError(GraphError):
    """The template renderer failed to produce a document."""
    pass


class DegenerateData(GraphError):
    """Data can not be proportioned (e.g. pie values summing to zero)."""
    pass
