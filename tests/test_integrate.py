import math

import pytest

from astrolab.integrate import integrate


def test_constant_integrand_gives_interval_length():
    assert integrate(lambda x: 1.0, 0.0, 2.0, 0.1, 1e-6) == pytest.approx(2.0)


def test_cosine_quarter_period():
    result = integrate(math.cos, 0.0, math.pi / 2, 0.01, 1e-8)
    assert result == pytest.approx(math.sin(math.pi / 2), abs=1e-6)


def test_exponential_on_unit_interval():
    result = integrate(math.exp, 0.0, 1.0, 0.01, 1e-8)
    assert result == pytest.approx(math.e - 1.0, rel=1e-6)


def test_equal_bounds_give_zero():
    assert integrate(math.exp, 1.5, 1.5, 0.1, 1e-6) == 0.0


def test_reversed_bounds_change_sign():
    forward = integrate(lambda x: x * x, 0.0, 1.0, 0.05, 1e-8)
    backward = integrate(lambda x: x * x, 1.0, 0.0, 0.05, 1e-8)
    assert backward == pytest.approx(-forward, rel=1e-6)


def test_intervals_add_up():
    def f(x):
        return math.sin(x) + x

    whole = integrate(f, 0.0, 2.0, 0.01, 1e-9)
    parts = integrate(f, 0.0, 1.0, 0.01, 1e-9) + integrate(f, 1.0, 2.0, 0.01, 1e-9)
    assert whole == pytest.approx(parts, rel=1e-6)


def test_integral_matches_antiderivative():
    result = integrate(lambda x: 1.0 / x, 1.0, 3.0, 0.01, 1e-9)
    assert result == pytest.approx(math.log(3.0), rel=1e-6)