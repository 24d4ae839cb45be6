# scaraplot

scaraplot plans the motion of a two-link SCARA plotter arm. You describe a
path as a cubic Bézier curve. scaraplot turns the path into a trajectory in
time with three phases: acceleration, constant speed and deceleration. It then
converts points on that trajectory into joint angles for the arm. The package
has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
scaraplot
scaraplot --time-step 0.05
```

The command plans a fixed demonstration path for a fixed arm. The path is the
Bézier curve with control points (100, 50), (0, 0), (200, 0) and (100, -50).
The arm has two 100 mm links, joint limits of -170°…0° and 0°…150°, a target
speed of 100 mm/s and an acceleration of 1000 mm/s².

The command samples the trajectory every `--time-step` seconds; the default is
0.02 and the value must be positive. For each sample it prints the time, the
`x`/`y` position and the two joint angles in radians. If a sample falls
outside the arm's work area, the command prints a message and exits with
status 1. Otherwise it exits with status 0.

## Library use

```python
import math

from scaraplot.curve import CubicCurve
from scaraplot.manipulator import Manipulator
from scaraplot.trajectory import Trajectory

arm = Manipulator(100.0, 100.0, math.radians(-170), 0.0, 0.0, math.radians(150))

path = CubicCurve.from_bezier([(100, 50), (0, 0), (200, 0), (100, -50)])
trajectory = Trajectory(path, err_max_speed=1.0, v_0=0.0, v_target=100.0,
                        v_f=0.0, acc=1000.0)

print(trajectory.length, trajectory.duration)
x, y = trajectory.get_xy(0.5)
if arm.is_in_range_work_area((x, y)):
    theta_0, theta_1 = arm.inverse_kinematics((x, y))
```

### Modules

- `scaraplot.polynomial`
  - `poly_eval(t, coef)` evaluates a polynomial. The coefficients are listed
    from the highest power down to the constant term.
- `scaraplot.integration`
  - `integrate_step_trapezoid(x, t)` computes one step of the trapezoid rule.
- `scaraplot.fixed_point`
  - `float_to_fixed(x, scale)` converts a float to fixed point. It rounds
    halves away from zero.
  - `fixed_to_float(x, scale)` converts back to a float.
  - `SCALE_Q15_16` and `SCALE_Q4_27` give the number of fractional bits of
    two common formats.
- `scaraplot.interpolation`
  - `Lerp` is a linear interpolator. Build it with `Lerp.from_points`.
  - `QuadInterp` is a quadratic interpolator. Build it with
    `QuadInterp.from_points` for three points, or with
    `QuadInterp.from_acceleration` for motion under constant acceleration.
  - `find_interpolation_points_linear(f, t_span, err_max_abs)` halves the
    span recursively until `f` is linear on every piece to within
    `err_max_abs`. It returns the boundaries of the pieces.
  - `lerp_map(t, t_x_map)` interpolates linearly in a table of ascending
    `(t, x)` rows. Outside the table it extrapolates.
  - `AscendingLerpMap` does the same lookup but keeps its position in the
    table between calls. Use it when the `t` values do not decrease.
- `scaraplot.curve`
  - `CubicCurve` is a cubic curve with `from_bezier`, `derivative` and
    `evaluate`.
  - `QuadraticCurve` is a quadratic curve with `evaluate`.
  - `dp_dt_fun(t, curve_diff_coef)` gives the rate at which curve length
    changes at parameter `t`.
  - `make_p_t_map_table(curve, err_max_abs)` builds a list of
    `(path length, curve parameter)` rows.
- `scaraplot.trajectory`
  - `Trajectory` holds the speed profile along a path. It offers:
    - `path_length_at(t)`, the distance travelled by time `t`;
    - `get_xy(t)`, the position at time `t`;
    - `length`, the length of the path;
    - `duration`, the time the motion ends;
    - `t_phases`, the times at which each phase ends.

    A path can be too short to reach the requested final speed. In that case
    `reached_final_speed` is `False` and `v_f` holds the speed actually
    reached. A warning is also logged through the `logging` module.
- `scaraplot.manipulator`
  - `Manipulator` is the arm. Invalid link lengths or angle limits raise
    `ValueError`. Its methods are:
    - `is_in_range_angle`;
    - `is_in_range_work_area`;
    - `inverse_kinematics`, which raises `ValueError` for a point that cannot
      be reached;
    - `work_area_description`;
    - `print_work_area`.
  - `WorkArea` holds the bounds of the region the arm can reach.
  - `ManipulatorConfig` is `LEFT` or `RIGHT`. The arm's configuration is
    chosen from its second joint's limits.
  - `V_TARGET_DEFAULT` is 100 mm/s and `ACC_MAX_DEFAULT` is 1000 mm/s².

## What it does not do

scaraplot only computes joint angles. It does not send them to motors or to
any other hardware.

The command takes no path, arm or speed settings; the only setting is
`--time-step`. To plan other paths or arms, use the library.