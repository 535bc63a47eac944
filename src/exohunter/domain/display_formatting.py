# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Magnitude-aware rounding for UI display.

Keeps roughly four significant figures across values spanning many
orders of magnitude (stellar masses, planetary mass ratios) without
switching to scientific notation.
"""
import math
from decimal import Decimal, ROUND_HALF_UP

# (lowest floor(log10|v|), decimal places), checked in order
_DECIMALS_BY_MAGNITUDE: tuple[tuple[int, int], ...] = (
    (3, 0),
    (2, 1),
    (1, 2),
    (0, 3),
    (-1, 4),
    (-2, 5),
)
_FALLBACK_DECIMALS = 6


def decimals_for(value: float) -> int:
    """Number of decimal places used for value (value != 0)."""
    magnitude = math.floor(math.log10(abs(value)))
    for lowest, decimals in _DECIMALS_BY_MAGNITUDE:
        if magnitude >= lowest:
            return decimals
    return _FALLBACK_DECIMALS


def significant_digits(value: float) -> float:
    """
    Round value to a precision that scales with its order of magnitude.

    >= 1000 → 0 dp, >= 100 → 1, >= 10 → 2, >= 1 → 3, >= 0.1 → 4,
    >= 0.01 → 5, otherwise 6. Ties round away from zero on the shortest
    decimal representation of value, so 0.012345 gives 0.01235.
    """
    if value == 0:
        return 0.0
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-decimals_for(value))
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def format_quantity(value: float | None, unit: str = "") -> str:
    """Display string for a catalog quantity; '-' for missing values."""
    if value is None:
        return "-"
    if value == 0 or not math.isfinite(value):
        text = str(value)
    else:
        text = f"{significant_digits(value):.{decimals_for(value)}f}"
    return f"{text} {unit}".rstrip()
