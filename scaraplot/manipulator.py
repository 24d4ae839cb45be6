"""Two-link planar (SCARA) manipulator: work area and inverse kinematics."""

from __future__ import annotations

import enum
import math
import sys
from collections.abc import Sequence
from dataclasses import dataclass

V_TARGET_DEFAULT = 100.0
"""Default movement speed target [mm/s]."""

ACC_MAX_DEFAULT = 1000.0
"""Default maximum acceleration and deceleration [mm/s^2]."""


class ManipulatorConfig(enum.IntEnum):
    """Elbow configuration; the value is the sign of the elbow angle."""

    LEFT = -1
    RIGHT = 1


@dataclass(frozen=True)
class WorkArea:
    """Bounds of the points the manipulator can reach.

    The area is bounded by ``x >= x_min``, a minimal radius around the origin,
    a maximal radius around the origin on one side of ``y_border`` and a circle
    around the elbow's extreme position on the other side.
    """

    x_min: float
    r_min_sqr: float
    r_max_straight_sqr: float
    r_max_edge_sqr: float
    y_border: float
    x_center_edge: float
    y_center_edge: float


class Manipulator:
    """Two-link arm with link lengths ``l_0``, ``l_1`` and joint angle limits.

    The arm works in a single elbow configuration, chosen from the range of the
    second joint angle. Raises :class:`ValueError` for invalid parameters.
    """

    def __init__(
        self,
        l_0: float,
        l_1: float,
        theta_0_min: float,
        theta_0_max: float,
        theta_1_min: float,
        theta_1_max: float,
    ) -> None:
        problems = []
        if l_0 <= 0 or l_1 <= 0:
            problems.append("l_0 and l_1 must be greater than 0.")
        if theta_0_max < theta_0_min or theta_1_max < theta_1_min:
            problems.append("Maximal theta values must be greater than minimal values.")
        if problems:
            raise ValueError(" ".join(problems))

        self.configuration = (
            ManipulatorConfig.RIGHT
            if abs(theta_1_max) >= abs(theta_1_min)
            else ManipulatorConfig.LEFT
        )
        self.l_0 = l_0
        self.l_1 = l_1
        self.theta_0_min = theta_0_min
        self.theta_0_max = theta_0_max
        self.theta_1_min = theta_1_min
        self.theta_1_max = theta_1_max
        self.work_area = self._compute_work_area()

    def _compute_work_area(self) -> WorkArea:
        l_0, l_1 = self.l_0, self.l_1
        if self.configuration is ManipulatorConfig.RIGHT:
            theta_0_abs_min, theta_0_abs_max = self.theta_0_max, self.theta_0_min
            theta_1_abs_min, theta_1_abs_max = self.theta_1_min, self.theta_1_max
        else:
            theta_0_abs_min, theta_0_abs_max = self.theta_0_min, self.theta_0_max
            theta_1_abs_min, theta_1_abs_max = self.theta_1_max, self.theta_1_min

        x_min = l_0 * math.cos(theta_0_abs_max) + l_1 * math.cos(
            theta_0_abs_max + theta_1_abs_max
        )
        return WorkArea(
            x_min=max(x_min, 0.0),
            r_min_sqr=l_0**2 + l_1**2 - 2 * l_0 * l_1 * math.cos(math.pi - theta_1_abs_max),
            r_max_straight_sqr=(l_0 + l_1 * math.cos(theta_1_abs_min)) ** 2,
            r_max_edge_sqr=l_1**2,
            y_border=(l_0 + l_1) * math.sin(theta_0_abs_min),
            x_center_edge=l_0 * math.cos(theta_0_abs_min),
            y_center_edge=l_0 * math.sin(theta_0_abs_min),
        )

    def work_area_description(self) -> str:
        """Human-readable inequalities describing the work area."""
        area = self.work_area
        if self.configuration is ManipulatorConfig.RIGHT:
            straight_side, edge_side = "<=", ">"
        else:
            straight_side, edge_side = ">=", "<"
        lines = [
            "--- MANIPULATOR WORK AREA ---",
            f"x >= {area.x_min:.2f}",
            f"x^2 + y^2 >= {math.sqrt(area.r_min_sqr):.2f}^2",
            f"x^2 + y^2 <= {math.sqrt(area.r_max_straight_sqr):.2f}^2 "
            f"for y {straight_side} {area.y_border:.2f}",
            f"(x - {area.x_center_edge:.2f})^2 + (y - {area.y_center_edge:.2f})^2 "
            f"<= {math.sqrt(area.r_max_edge_sqr):.2f}^2 for y {edge_side} {area.y_border:.2f}",
            "---",
        ]
        return "\n".join(lines) + "\n"

    def print_work_area(self) -> str:
        """Write the work area description to standard output and return it."""
        text = self.work_area_description()
        out = sys.stdout
        out.write(text)
        out.flush()
        return text

    def is_in_range_angle(self, theta: Sequence[float]) -> bool:
        """Whether both joint angles lie within their limits."""
        return (
            self.theta_0_min <= theta[0] <= self.theta_0_max
            and self.theta_1_min <= theta[1] <= self.theta_1_max
        )

    def is_in_range_work_area(self, point: Sequence[float]) -> bool:
        """Whether the point ``(x, y)`` lies in the work area."""
        x, y = point[0], point[1]
        area = self.work_area
        if x < area.x_min:
            return False
        r_sqr = x**2 + y**2
        if r_sqr < area.r_min_sqr:
            return False
        if (y <= area.y_border) != (self.configuration is ManipulatorConfig.RIGHT):
            return r_sqr <= area.r_max_straight_sqr
        edge_sqr = (x - area.x_center_edge) ** 2 + (y - area.y_center_edge) ** 2
        return edge_sqr <= area.r_max_edge_sqr

    def inverse_kinematics(self, point: Sequence[float]) -> tuple[float, float]:
        """Joint angles ``(theta_0, theta_1)`` placing the arm tip at ``point``.

        Raises :class:`ValueError` when no arm pose reaches the point.
        """
        x, y = point[0], point[1]
        r = math.hypot(x, y)
        if r == 0.0:
            raise ValueError("point at the origin has no defined arm pose")
        sign = int(self.configuration)
        shoulder_cos = (self.l_0**2 - self.l_1**2 + r**2) / (2 * self.l_0 * r)
        elbow_cos = (r**2 - self.l_0**2 - self.l_1**2) / (2 * self.l_0 * self.l_1)
        if abs(shoulder_cos) > 1.0 or abs(elbow_cos) > 1.0:
            raise ValueError(f"point ({x}, {y}) cannot be reached")
        theta_0 = math.atan2(y, x) - sign * math.acos(shoulder_cos)
        theta_1 = sign * math.acos(elbow_cos)
        return theta_0, theta_1