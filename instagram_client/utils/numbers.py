"""Numeric helpers shared by the analytics code."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3).

    The builtin ``round`` uses banker's rounding, which would report an
    average caption length of 2 for 2.5.
    """

    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
