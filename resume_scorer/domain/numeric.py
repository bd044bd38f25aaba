"""Rounding and clamping helpers shared by the scorers."""

from __future__ import annotations

import math


def round_half_up(value: float, digits: int = 0) -> float:
    """Round *value* to *digits* decimals with halves rounded toward +inf.

    Scores are product-facing numbers, so ``72.5`` must become ``73`` rather
    than the banker's-rounded ``72`` that :func:`round` would produce.
    """
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))
