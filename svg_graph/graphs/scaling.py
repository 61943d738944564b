"""Axis scaling for value-based graphs."""

from __future__ import annotations

import math


def range_calc(span: float) -> tuple[float, float, int]:
    """Pick a pleasant axis maximum and tick division for a value span.

    Args:
        span: Distance between the lowest and highest value on the axis

    Returns:
        Tuple of (axis maximum, division size, decimal places for labels)
    """
    if span == 0:
        return 1, 0.2, 1

    value = span
    count = 0
    if value < 1:
        while value < 1:
            value *= 10
            count += 1
        division = 10.0 ** -count
    else:
        while value > 10:
            value /= 10
            count += 1
        division = 10.0 ** count

    maximum = math.ceil(span / division) * division
    steps = int(maximum / division)
    if steps <= 2:
        division /= 5
    elif steps <= 5:
        division /= 2
    maximum = math.ceil(round(span / division, 9)) * division

    precision = 0 if division >= 1 else -math.floor(math.log10(division) + 1e-9)
    return round(maximum, precision), round(division, precision), precision


def ticks(minimum: float, maximum: float, division: float) -> list[float]:
    """Axis tick values from ``minimum`` up to ``minimum + maximum``."""
    count = int(round(maximum / division))
    return [minimum + i * division for i in range(count + 1)]
