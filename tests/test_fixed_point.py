import pytest
from hypothesis import given
from hypothesis import strategies as st

from scaraplot.fixed_point import (
    SCALE_Q4_27,
    SCALE_Q15_16,
    fixed_to_float,
    float_to_fixed,
)


def test_one_in_q15_16():
    assert float_to_fixed(1.0, SCALE_Q15_16) == 1 << SCALE_Q15_16


def test_one_back_from_q15_16():
    assert fixed_to_float(1 << SCALE_Q15_16, SCALE_Q15_16) == 1.0


@pytest.mark.parametrize("value, expected", [(0.5, 1), (-0.5, -1), (2.5, 3), (-2.5, -3)])
def test_halves_round_away_from_zero(value, expected):
    assert float_to_fixed(value, 0) == expected


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_q15_16_round_trip(n):
    assert float_to_fixed(fixed_to_float(n, SCALE_Q15_16), SCALE_Q15_16) == n


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_q4_27_round_trip(n):
    assert float_to_fixed(fixed_to_float(n, SCALE_Q4_27), SCALE_Q4_27) == n


@given(st.floats(min_value=-1000.0, max_value=1000.0))
def test_quantisation_error_within_half_step(x):
    fixed = float_to_fixed(x, SCALE_Q15_16)
    assert abs(fixed_to_float(fixed, SCALE_Q15_16) - x) <= 0.5 / (1 << SCALE_Q15_16) + 1e-12