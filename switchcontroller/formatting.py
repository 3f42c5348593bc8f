"""Numeric formatting for wire commands."""
from __future__ import annotations

import math
from decimal import Decimal

# Stands in for an unset left stick when only the right stick is sent.
# Kept literal, it is not the output of format_number().
LEFT_STICK_PLACEHOLDER = "0.0 0.0"


def format_number(value: float) -> str:
    """Render a value as the shortest decimal that round-trips.

    Integral values lose their trailing ``.0`` and exponent notation is
    expanded, so the firmware only ever sees plain positional numbers.

    Examples:
        >>> format_number(0.0)
        '0'
        >>> format_number(-1.0)
        '-1'
        >>> format_number(0.5)
        '0.5'
        >>> format_number(1e-05)
        '0.00001'
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    text = repr(value)
    if "e" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text
