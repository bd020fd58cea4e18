import math

import pytest

from astrolab.series import calculation, doubling_sequence, pi_series


def test_pi_series_converges():
    assert pi_series(60) == pytest.approx(math.pi, abs=1e-12)


def test_pi_series_first_term():
    assert pi_series(1) == pytest.approx(math.sqrt(12))


def test_pi_series_empty_and_negative():
    assert pi_series(0) == 0.0
    with pytest.raises(ValueError):
        pi_series(-1)


def test_calculation_zero_steps_is_identity():
    assert calculation(0, 1.1) == 1.1


@pytest.mark.parametrize("i", [0, 1, 5, 20])
def test_calculation_matches_serial_recurrence(i):
    assert calculation(i + 1, 1.1) == pytest.approx(1.01 * calculation(i, 1.1))


def test_calculation_grows():
    assert calculation(10, 1.1) > 1.1


def test_doubling_sequence_defaults():
    values = doubling_sequence()
    assert len(values) == 10
    assert values[0] == 2.0
    assert values[-1] == 1024.0
    for previous, current in zip(values, values[1:]):
        assert current == 2 * previous


def test_doubling_sequence_custom_start():
    values = doubling_sequence(4, 0.5)
    assert values[0] == 0.5
    assert all(b == 2 * a for a, b in zip(values, values[1:]))


def test_doubling_sequence_empty_and_negative():
    assert doubling_sequence(0, 2.0) == []
    with pytest.raises(ValueError):
        doubling_sequence(-1, 2.0)