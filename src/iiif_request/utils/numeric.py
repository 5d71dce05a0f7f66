"""Numeric rendering helpers for canonical parameter values."""

from __future__ import annotations

import math

import numpy as np


def format_number(value: float) -> str:
    """Render a float as its shortest faithful decimal string.

    Integral values drop the trailing ``.0``; other values use the shortest
    digit string that round-trips to the same double. Exponent notation is
    never produced, so the output always re-parses under the request grammar.

    Args:
        value: Number to render.

    Returns:
        Decimal string representation.

    Example:
        >>> format_number(90.0)
        '90'
        >>> format_number(90.1)
        '90.1'
        >>> format_number(float("90.1111111111111111111111111111"))
        '90.11111111111111'
    """
    value = float(value)
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return np.format_float_positional(value, unique=True, trim="-")
