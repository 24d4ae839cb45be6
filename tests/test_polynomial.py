import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from scaraplot.polynomial import poly_eval

finite = st.floats(min_value=-1e3, max_value=1e3, allow_nan=False)


def test_pure_square():
    assert poly_eval(3.0, [1.0, 0.0, 0.0]) == 9.0


def test_empty_polynomial_is_zero():
    assert poly_eval(5.0, []) == 0


@given(st.lists(finite, min_size=1, max_size=6))
def test_value_at_zero_is_constant_term(coef):
    assert poly_eval(0.0, coef) == coef[-1]


@given(st.lists(finite, min_size=1, max_size=6))
def test_value_at_one_is_sum_of_coefficients(coef):
    assert math.isclose(poly_eval(1.0, coef), sum(coef), rel_tol=1e-9, abs_tol=1e-6)


@given(finite, finite)
def test_constant_polynomial(t, c):
    assert poly_eval(t, [c]) == c


@given(finite, st.lists(finite, min_size=1, max_size=5))
def test_leading_zeros_do_not_change_value(t, coef):
    assert poly_eval(t, [0.0, 0.0] + coef) == pytest.approx(poly_eval(t, coef))