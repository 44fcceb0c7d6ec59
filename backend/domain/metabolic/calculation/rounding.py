"""Rounding helpers shared by the calculation services."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up.

    Python's built-in round() uses banker's rounding (2218.5 -> 2218);
    energy figures are rounded the conventional way instead.

    Example:
        >>> round_half_up(2218.5)
        2219
    """
    return int(math.floor(value + 0.5))
