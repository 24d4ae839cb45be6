"""Polynomial evaluation."""

from __future__ import annotations

from collections.abc import Sequence


def poly_eval(t: float, coef: Sequence[float]) -> float:
    """Evaluate a polynomial at ``t``.

    ``coef`` lists the coefficients from the highest power down to the
    constant term, so ``[a, b, c]`` stands for ``a*t**2 + b*t + c``.
    """
    degree = len(coef) - 1
    return sum(t ** (degree - power_index) * c for power_index, c in enumerate(coef))