"""Time-parametrised motion along a curve with trapezoidal speed profile."""

from __future__ import annotations

import logging
import math

from scaraplot.curve import CubicCurve, make_p_t_map_table
from scaraplot.interpolation import Lerp, QuadInterp, lerp_map
from scaraplot.polynomial import poly_eval

logger = logging.getLogger(__name__)


class Trajectory:
    """Motion along ``path``: accelerate, keep a constant speed, decelerate.

    ``err_max_speed`` bounds the error of the path-length table: the lower it
    is, the more accurate and the larger the table. Speeds are in mm/s and
    ``acc`` (used for both acceleration and deceleration) in mm/s^2.

    When the path is too short to reach the requested final speed ``v_f``,
    the reachable value is stored in :attr:`v_f` and
    :attr:`reached_final_speed` is ``False``.
    """

    def __init__(
        self,
        path: CubicCurve,
        err_max_speed: float,
        v_0: float,
        v_target: float,
        v_f: float,
        acc: float,
    ) -> None:
        self.path = path
        self.p_tau_map = make_p_t_map_table(path, err_max_speed)
        self.v_f = v_f
        self.reached_final_speed = self._calc_phases(v_0, v_target, acc)
        if not self.reached_final_speed:
            logger.warning("End speed cannot be reached.")
        logger.debug("movement phases moments: %f, %f, %f", *self.t_phases)

    @property
    def length(self) -> float:
        """Full path length."""
        return self.p_tau_map[-1][0]

    @property
    def duration(self) -> float:
        """Time at which the motion ends."""
        return self.t_phases[2]

    def _calc_phases(self, v_0: float, v_target: float, acc: float) -> bool:
        p = self.length
        v_f = self.v_f

        t_acc = (v_target - v_0) / acc
        t_dcc = (v_target - v_f) / acc
        p_acc = acc * t_acc**2 / 2 + v_0 * t_acc
        p_dcc = v_target * t_dcc - acc * t_dcc**2 / 2
        p_const_v = p - p_acc - p_dcc
        t_const_v = p_const_v / v_target

        success = True
        if p_const_v < 0.0:
            # target speed is never reached: accelerate, then decelerate at once
            t_acc = (
                math.sqrt(4 * acc * p + 3 * v_0**2 - 4 * v_0 * v_f + 2 * v_f**2) - v_0
            ) / (2 * acc)
            t_dcc = (v_0 - v_f) / acc + t_acc
            t_const_v = 0.0
            p_const_v = 0.0
            v_target = t_acc * acc

            if t_dcc < 0.0:
                # final speed is never reached: accelerate all the way
                t_acc = (math.sqrt(2 * acc * p + v_0**2) - v_0) / acc
                t_dcc = 0.0
                p_acc = acc * t_acc**2 / 2 + v_0 * t_acc
                p_dcc = 0.0
                self.v_f = acc * t_acc
                success = False

        self.t_phases = (t_acc, t_acc + t_const_v, t_acc + t_const_v + t_dcc)
        p_phases = (p_acc, p_acc + p_const_v, p_acc + p_const_v + p_dcc)

        self.acc_interp = QuadInterp.from_acceleration(acc, 0.0, 0.0, v_0)
        if self.t_phases[1] > self.t_phases[0]:
            self.const_v_interp = Lerp.from_points(
                p_phases[0], p_phases[1], self.t_phases[0], self.t_phases[1]
            )
        else:
            self.const_v_interp = Lerp(x_0=p_phases[0], t_0=self.t_phases[0], step=v_target)
        self.dcc_interp = QuadInterp.from_acceleration(
            -acc, self.t_phases[1], p_phases[1], v_target
        )
        return success

    def path_length_at(self, t: float) -> float:
        """Distance travelled along the path at time ``t``."""
        t_acc_end, t_const_end, t_end = self.t_phases
        if t < t_acc_end:
            return self.acc_interp(t)
        if t < t_const_end:
            return self.const_v_interp(t)
        if t <= t_end:
            return self.dcc_interp(t)
        return self.dcc_interp(t_end)

    def get_xy(self, t: float) -> tuple[float, float]:
        """Position ``(x, y)`` at time ``t``."""
        p = self.path_length_at(t)
        tau = lerp_map(p, self.p_tau_map)
        return poly_eval(tau, self.path.coef[0]), poly_eval(tau, self.path.coef[1])