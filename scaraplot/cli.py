"""Command that plans a plotter trajectory and prints the joint angles along it."""

from __future__ import annotations

import argparse
import itertools
import math

from scaraplot.curve import CubicCurve
from scaraplot.manipulator import ACC_MAX_DEFAULT, V_TARGET_DEFAULT, Manipulator
from scaraplot.trajectory import Trajectory

BEZIER_POINTS = ((100.0, 50.0), (0.0, 0.0), (200.0, 0.0), (100.0, -50.0))


def _positive_float(text: str) -> float:
    value = float(text)
    if not value > 0:
        raise argparse.ArgumentTypeError("must be a positive number")
    return value


def main(argv=None) -> int:
    """Run the plotter simulation; returns the process exit status."""
    parser = argparse.ArgumentParser(
        prog="scaraplot",
        description="Follow a Bezier path with a SCARA arm and print joint angles.",
    )
    parser.add_argument(
        "--time-step",
        type=_positive_float,
        default=0.02,
        help="time between printed samples [s] (default: 0.02)",
    )
    args = parser.parse_args(argv)

    manipulator = Manipulator(
        100.0, 100.0, math.radians(-170.0), 0.0, 0.0, math.radians(150.0)
    )
    curve = CubicCurve.from_bezier(BEZIER_POINTS)
    trajectory = Trajectory(curve, 1.0, 0.0, V_TARGET_DEFAULT, 0.0, ACC_MAX_DEFAULT)

    print()
    for i in itertools.count():
        t = i * args.time_step
        if t >= trajectory.duration:
            break
        x, y = trajectory.get_xy(t)
        print(f"t: {t:f}\tx: {x:f}\ty: {y:f}\t", end="")
        if not manipulator.is_in_range_work_area((x, y)):
            print(f"Point ({x:f}, {y:f}) out of manipulator range.")
            return 1
        theta_0, theta_1 = manipulator.inverse_kinematics((x, y))
        print(f"t0: {theta_0:f}\t t1: {theta_1:f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())