"""Scalar helpers shared by every shape module.

Two tolerances are in use: DEFAULT_TOLERANCE for shape comparisons and
FUZZY_EPSILON for the loose scalar comparison in `fuzzy_equals`.
"""

from __future__ import annotations

import math

DEFAULT_TOLERANCE = 1e-10
FUZZY_EPSILON = 1e-6


def clamp(value: float, lo: float, hi: float) -> float:
    return min(max(value, lo), hi)


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation; t outside [0, 1] extrapolates."""
    return a + (b - a) * t


def deg_to_rad(degrees: float) -> float:
    return degrees * (math.pi / 180.0)


def rad_to_deg(radians: float) -> float:
    return radians * (180.0 / math.pi)


def map_range(value: float, in_min: float, in_max: float, out_min: float, out_max: float) -> float:
    """Remap value from [in_min, in_max] to [out_min, out_max].

    An empty input range (in_min == in_max) raises ZeroDivisionError.
    """
    return (value - in_min) * (out_max - out_min) / (in_max - in_min) + out_min


def fuzzy_equals(a: float, b: float, epsilon: float = FUZZY_EPSILON) -> bool:
    return abs(a - b) < epsilon


def round_to_precision(value: float, decimal_places: int) -> float:
    """Round to a number of decimals, halves go toward +inf (2.5 -> 3, -2.5 -> -2)."""
    factor = 10 ** decimal_places
    return math.floor(value * factor + 0.5) / factor


def sign(value: float) -> int:
    if value < 0:
        return -1
    if value > 0:
        return 1
    return 0
