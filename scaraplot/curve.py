"""Parametric planar curves and path-length tables."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import accumulate, pairwise

from scaraplot.integration import integrate_step_trapezoid
from scaraplot.interpolation import find_interpolation_points_linear
from scaraplot.polynomial import poly_eval

logger = logging.getLogger(__name__)

Coefficients = tuple[tuple[float, ...], tuple[float, ...]]


@dataclass(frozen=True)
class QuadraticCurve:
    """Planar curve whose x and y are quadratics in the parameter ``t``."""

    coef: Coefficients
    t_span: tuple[float, float] = (0.0, 1.0)

    @property
    def deg(self) -> int:
        return 2

    def evaluate(self, t: float) -> tuple[float, float]:
        """Return the ``(x, y)`` point at parameter ``t``."""
        return poly_eval(t, self.coef[0]), poly_eval(t, self.coef[1])


@dataclass(frozen=True)
class CubicCurve:
    """Planar curve whose x and y are cubics in the parameter ``t``."""

    coef: Coefficients
    t_span: tuple[float, float] = (0.0, 1.0)

    @property
    def deg(self) -> int:
        return 3

    @classmethod
    def from_bezier(cls, points: Sequence[Sequence[float]]) -> CubicCurve:
        """Build the cubic Bezier curve with four control points, ``t`` in [0, 1]."""
        if len(points) != 4:
            raise ValueError("a cubic Bezier curve needs exactly four control points")
        p0, p1, p2, p3 = points

        def axis(i: int) -> tuple[float, ...]:
            return (
                -p0[i] + 3 * p1[i] - 3 * p2[i] + p3[i],
                3 * p0[i] - 6 * p1[i] + 3 * p2[i],
                -3 * p0[i] + 3 * p1[i],
                p0[i],
            )

        return cls(coef=(axis(0), axis(1)), t_span=(0.0, 1.0))

    def derivative(self) -> QuadraticCurve:
        """Return the curve's derivative with respect to ``t``."""
        coef = tuple((3 * a, 2 * b, c) for a, b, c, _ in self.coef)
        return QuadraticCurve(coef=(coef[0], coef[1]), t_span=self.t_span)

    def evaluate(self, t: float) -> tuple[float, float]:
        """Return the ``(x, y)`` point at parameter ``t``."""
        return poly_eval(t, self.coef[0]), poly_eval(t, self.coef[1])


def dp_dt_fun(t: float, curve_diff_coef: Coefficients) -> float:
    """Rate of change of curve length at ``t``, given the derivative's coefficients."""
    return math.hypot(poly_eval(t, curve_diff_coef[0]), poly_eval(t, curve_diff_coef[1]))


def make_p_t_map_table(
    curve: CubicCurve, err_max_abs: float
) -> list[tuple[float, float]]:
    """Build a table of ``(p, t)`` rows: path length from the start and curve parameter.

    Rows are chosen so that dp/dt is linear between them within ``err_max_abs``;
    linear interpolation between rows approximates ``t(p)``.
    """
    curve_diff = curve.derivative()

    def dp_dt(t: float) -> float:
        return dp_dt_fun(t, curve_diff.coef)

    t_tab = find_interpolation_points_linear(dp_dt, curve_diff.t_span, err_max_abs)
    rates = [dp_dt(t) for t in t_tab]
    steps = (
        integrate_step_trapezoid(rate_pair, t_pair)
        for rate_pair, t_pair in zip(pairwise(rates), pairwise(t_tab))
    )
    p_tab = list(accumulate(steps, initial=0.0))

    logger.debug("path length: %f", p_tab[-1])
    return list(zip(p_tab, t_tab))