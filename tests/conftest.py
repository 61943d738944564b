"""Shared fixtures for svg_graph tests."""

from __future__ import annotations

import pytest


@pytest.fixture
def sales_fields() -> list[str]:
    return ["Jan", "Feb", "Mar"]


@pytest.fixture
def grey_colors():
    """Deterministic heatmap colour strategy echoing the cell value."""

    def strategy(value):
        return f"rgb({value},{value},{value})"

    return strategy


@pytest.fixture
def heatmap_rows() -> list[list]:
    return [["x", "c", "b"], ["r1", 1, 2], ["r2", 3, 4]]
