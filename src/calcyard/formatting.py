"""Rendering of results as text that the tokenizer accepts again."""

import math
from decimal import Decimal


def format_result(value: float) -> str:
    """
    Format ``value`` in plain positional notation.

    Integral values drop the fractional part (``14.0`` -> ``"14"``) and
    other values use the shortest round-tripping digits without an
    exponent (``1e-07`` -> ``"0.0000001"``), so the text can be chained
    into a further expression.
    """
    if not math.isfinite(value):
        return repr(value)
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")
