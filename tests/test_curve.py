import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from scaraplot.curve import CubicCurve, QuadraticCurve, dp_dt_fun, make_p_t_map_table

coord = st.floats(min_value=-500, max_value=500, allow_nan=False)
point = st.tuples(coord, coord)

MAIN_POINTS = [(100, 50), (0, 0), (200, 0), (100, -50)]
LINE_POINTS = [(0, 0), (100, 0), (200, 0), (300, 0)]


@given(st.lists(point, min_size=4, max_size=4))
def test_bezier_passes_through_end_points(points):
    curve = CubicCurve.from_bezier(points)
    start = curve.evaluate(0.0)
    end = curve.evaluate(1.0)
    assert start == pytest.approx(points[0], abs=1e-6)
    assert end == pytest.approx(points[3], abs=1e-6)


def test_bezier_span_is_unit_interval():
    curve = CubicCurve.from_bezier(MAIN_POINTS)
    assert curve.t_span == (0.0, 1.0)
    assert curve.deg == 3


def test_bezier_rejects_wrong_point_count():
    with pytest.raises(ValueError):
        CubicCurve.from_bezier(MAIN_POINTS[:3])


@given(st.lists(point, min_size=4, max_size=4))
def test_derivative_end_tangents(points):
    p0, p1, p2, p3 = points
    diff = CubicCurve.from_bezier(points).derivative()
    start = diff.evaluate(0.0)
    end = diff.evaluate(1.0)
    assert start == pytest.approx((3 * (p1[0] - p0[0]), 3 * (p1[1] - p0[1])), abs=1e-6)
    assert end == pytest.approx((3 * (p3[0] - p2[0]), 3 * (p3[1] - p2[1])), abs=1e-6)


def test_derivative_keeps_span():
    curve = CubicCurve(coef=((1, 2, 3, 4), (5, 6, 7, 8)), t_span=(0.5, 2.0))
    diff = curve.derivative()
    assert isinstance(diff, QuadraticCurve)
    assert diff.t_span == (0.5, 2.0)
    assert diff.coef == ((3, 4, 3), (15, 12, 7))


def test_dp_dt_constant_on_evenly_spaced_line():
    diff = CubicCurve.from_bezier(LINE_POINTS).derivative()
    for t in (0.0, 0.3, 0.7, 1.0):
        assert dp_dt_fun(t, diff.coef) == pytest.approx(300.0)


@pytest.mark.parametrize("t", [0.0, 0.1, 0.5, 0.9, 1.0])
def test_dp_dt_is_derivative_magnitude(t):
    diff = CubicCurve.from_bezier(MAIN_POINTS).derivative()
    dx, dy = diff.evaluate(t)
    assert dp_dt_fun(t, diff.coef) == pytest.approx(math.hypot(dx, dy))


def test_table_for_straight_line():
    table = make_p_t_map_table(CubicCurve.from_bezier(LINE_POINTS), 1.0)
    assert table[0] == (0.0, 0.0)
    assert table[-1][0] == pytest.approx(300.0)
    assert table[-1][1] == 1.0


def test_table_is_ascending_and_covers_span():
    table = make_p_t_map_table(CubicCurve.from_bezier(MAIN_POINTS), 1.0)
    p_values = [p for p, _ in table]
    t_values = [t for _, t in table]
    assert t_values[0] == 0.0 and t_values[-1] == 1.0
    assert all(a < b for a, b in zip(t_values, t_values[1:]))
    assert all(a <= b for a, b in zip(p_values, p_values[1:]))


def test_table_length_matches_polyline():
    curve = CubicCurve.from_bezier(MAIN_POINTS)
    table = make_p_t_map_table(curve, 1.0)
    samples = [curve.evaluate(i / 20000) for i in range(20001)]
    polyline = sum(math.dist(a, b) for a, b in zip(samples, samples[1:]))
    assert table[-1][0] == pytest.approx(polyline, rel=1e-2)


def test_smaller_error_gives_more_rows():
    curve = CubicCurve.from_bezier(MAIN_POINTS)
    coarse = make_p_t_map_table(curve, 10.0)
    fine = make_p_t_map_table(curve, 0.1)
    assert len(fine) > len(coarse)