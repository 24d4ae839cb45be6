"""Linear and quadratic interpolation and lookup-table mapping."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass

Point = Sequence[float]

_TEST_POINTS = (0.25, 0.5, 0.75)


@dataclass(frozen=True)
class Lerp:
    """Linear interpolator ``x(t) = x_0 + (t - t_0) * step``."""

    x_0: float
    t_0: float
    step: float

    @classmethod
    def from_points(cls, x_0: float, x_n: float, t_0: float, t_n: float) -> Lerp:
        """Build the line through ``(t_0, x_0)`` and ``(t_n, x_n)``."""
        return cls(x_0=x_0, t_0=t_0, step=(x_n - x_0) / (t_n - t_0))

    def __call__(self, t: float) -> float:
        return self.x_0 + (t - self.t_0) * self.step


@dataclass(frozen=True)
class QuadInterp:
    """Quadratic ``x(t) = a*t**2 + b*t + c``."""

    a: float
    b: float
    c: float

    @classmethod
    def from_points(cls, p_0: Point, p_1: Point, p_2: Point) -> QuadInterp:
        """Build the parabola through three ``(t, x)`` points (Lagrange form)."""
        d_0 = (p_0[0] - p_1[0]) * (p_0[0] - p_2[0])
        d_1 = (p_1[0] - p_0[0]) * (p_1[0] - p_2[0])
        d_2 = (p_2[0] - p_0[0]) * (p_2[0] - p_1[0])
        a = p_0[1] / d_0 + p_1[1] / d_1 + p_2[1] / d_2
        b = -(
            p_0[1] * (p_1[0] + p_2[0]) / d_0
            + p_1[1] * (p_0[0] + p_2[0]) / d_1
            + p_2[1] * (p_0[0] + p_1[0]) / d_2
        )
        c = (
            p_0[1] * p_1[0] * p_2[0] / d_0
            + p_1[1] * p_0[0] * p_2[0] / d_1
            + p_2[1] * p_0[0] * p_1[0] / d_2
        )
        return cls(a, b, c)

    @classmethod
    def from_acceleration(
        cls, acc: float, t_0: float, x_0: float, v_0: float
    ) -> QuadInterp:
        """Motion with constant ``acc`` having position ``x_0`` and speed ``v_0`` at ``t_0``."""
        a = acc / 2
        b = v_0 - 2 * a * t_0
        c = x_0 - a * t_0**2 - b * t_0
        return cls(a, b, c)

    def __call__(self, t: float) -> float:
        return t**2 * self.a + t * self.b + self.c


def _segment_starts(
    f: Callable[[float], float],
    err_max_abs: float,
    t_tab: tuple[float, float, float],
    f_tab: tuple[float, float, float],
) -> Iterator[float]:
    t_start, t_mid, t_end = t_tab
    f_start, f_mid, f_end = f_tab
    width = t_end - t_start
    t_test = (t_start + width * _TEST_POINTS[0], t_mid, t_start + width * _TEST_POINTS[2])
    f_true = (f(t_test[0]), f_mid, f(t_test[2]))

    needs_split = any(
        abs(f_start + (f_end - f_start) * fraction - true) > err_max_abs
        for fraction, true in zip(_TEST_POINTS, f_true)
    )
    if not needs_split:
        yield t_start
        return

    yield from _segment_starts(
        f, err_max_abs, (t_start, t_test[0], t_test[1]), (f_start, f_true[0], f_true[1])
    )
    yield from _segment_starts(
        f, err_max_abs, (t_test[1], t_test[2], t_end), (f_true[1], f_true[2], f_end)
    )


def find_interpolation_points_linear(
    f: Callable[[float], float], t_span: Sequence[float], err_max_abs: float
) -> list[float]:
    """Find points between which ``f`` is close to linear.

    The span is halved recursively until linear interpolation of ``f`` on each
    piece is within ``err_max_abs`` at a quarter, half and three quarters of
    the piece. Returns the ascending piece boundaries, both span ends included.
    """
    t_start, t_end = t_span[0], t_span[1]
    t_init = (t_start, (t_start + t_end) / 2, t_end)
    f_init = (f(t_init[0]), f(t_init[1]), f(t_init[2]))
    points = list(_segment_starts(f, err_max_abs, t_init, f_init))
    points.append(t_end)
    return points


def _check_table(t_x_map: Sequence[Point]) -> None:
    if len(t_x_map) < 2:
        raise ValueError("lookup table needs at least two rows")


def _segment_lerp(t_x_map: Sequence[Point], index: int) -> Lerp:
    before, after = t_x_map[index - 1], t_x_map[index]
    return Lerp.from_points(before[1], after[1], before[0], after[0])


def lerp_map(t: float, t_x_map: Sequence[Point]) -> float:
    """Map ``t`` through a table of ascending ``(t, x)`` rows by linear interpolation.

    Values outside the table are extrapolated from the first or last segment.
    """
    _check_table(t_x_map)
    keys = [row[0] for row in t_x_map]
    index = min(max(bisect_right(keys, t), 1), len(keys) - 1)
    return _segment_lerp(t_x_map, index)(t)


class AscendingLerpMap:
    """Table lookup like :func:`lerp_map`, faster for ascending ``t`` calls.

    The current table position is kept between calls, so successive values of
    ``t`` must not decrease.
    """

    def __init__(self, t_x_map: Sequence[Point]) -> None:
        _check_table(t_x_map)
        self._rows = [(row[0], row[1]) for row in t_x_map]
        self._index = 0
        self._lerp: Lerp | None = None

    def __call__(self, t: float) -> float:
        rows = self._rows
        last = len(rows) - 1
        index = self._index
        moved = False
        while t < rows[last][0] and rows[index][0] <= t:
            index += 1
            moved = True
        if t >= rows[last][0] and index != last:
            index = last
            moved = True
        if moved or self._lerp is None:
            self._lerp = _segment_lerp(rows, max(index, 1))
        self._index = index
        return self._lerp(t)