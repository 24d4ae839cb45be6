"""Numerical integration steps."""

from __future__ import annotations

from collections.abc import Sequence


def integrate_step_trapezoid(x: Sequence[float], t: Sequence[float]) -> float:
    """Integrate one step with the trapezoid rule.

    ``x`` holds the function values at the start and end of the step,
    ``t`` the corresponding variable values.
    """
    return (x[1] + x[0]) * (t[1] - t[0]) / 2