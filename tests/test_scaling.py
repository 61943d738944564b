"""Tests for axis range calculation."""

from __future__ import annotations

import pytest

from svg_graph.graphs.scaling import range_calc, ticks


@pytest.mark.parametrize(
    ("span", "expected"),
    [
        (0, (1, 0.2, 1)),
        (1, (1, 0.2, 1)),
        (3, (3, 0.5, 1)),
        (60, (60, 10, 0)),
        (78, (80, 10, 0)),
        (250, (250, 50, 0)),
        (0.5, (0.5, 0.05, 2)),
    ],
)
def test_range_calc(span: float, expected: tuple) -> None:
    """Test axis maximum, division and precision for common spans."""
    maximum, division, precision = range_calc(span)
    assert maximum == pytest.approx(expected[0])
    assert division == pytest.approx(expected[1])
    assert precision == expected[2]


def test_ticks_cover_scale() -> None:
    """Test ticks run from the minimum to minimum + maximum."""
    values = ticks(0, 60, 10)
    assert values == [0, 10, 20, 30, 40, 50, 60]


def test_ticks_with_offset_minimum() -> None:
    """Test ticks start at a non-zero minimum."""
    assert ticks(-5, 10, 5) == [-5, 0, 5]
