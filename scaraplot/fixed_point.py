"""Conversions between floats and fixed-point integers."""

from __future__ import annotations

import math

SCALE_Q15_16 = 16
SCALE_Q4_27 = 27


def fixed_to_float(x: int, scale: int) -> float:
    """Convert a fixed-point integer with ``scale`` fractional bits to a float."""
    return x / (1 << scale)


def float_to_fixed(x: float, scale: int) -> int:
    """Convert a float to fixed point with ``scale`` fractional bits.

    Rounds to the nearest integer, with halves rounded away from zero.
    """
    scaled = x * (1 << scale)
    return int(math.copysign(math.floor(abs(scaled) + 0.5), scaled))