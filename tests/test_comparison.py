import numpy as np
import pytest

from learning_curves.comparison import delta, prediction_error
from learning_curves.errors import ConfigError, RangeError


def test_unit_delta_reference_values():
    d = delta(50, 1, 25, 0.885)
    assert d.shape == (25,)
    assert d[0] == pytest.approx(0.0, abs=1e-12)
    assert np.allclose(d[1:5], [5.75, 6.103821, 6.110519, 6.041146], atol=1e-6)
    assert d[-1] == pytest.approx(4.913395, abs=1e-6)


def test_cumulative_delta_is_running_sum():
    d = delta(50, 1, 25, 0.885)
    c = delta(50, 1, 25, 0.885, level="cumulative")
    assert np.allclose(c, np.cumsum(d))
    assert c[-1] == pytest.approx(130.82581, abs=1e-5)


def test_delta_rejects_unknown_level():
    with pytest.raises(ConfigError):
        delta(50, 1, 25, 0.885, level="c")


def test_delta_rejects_reversed_bounds():
    with pytest.raises(RangeError):
        delta(50, 10, 5, 0.885)


def test_prediction_error_reference_value():
    assert prediction_error(250, 0.85, 0.87) == pytest.approx(0.2035303, abs=1e-7)


def test_prediction_error_sign_flips_with_rates():
    assert prediction_error(250, 0.87, 0.85) < 0


@pytest.mark.parametrize("n", [1, 10, 250, 10_000])
@pytest.mark.parametrize("r", [0.7, 0.85, 1.0])
def test_equal_rates_have_no_difference(n, r):
    assert prediction_error(n, r, r) is None


def test_prediction_error_over_horizons():
    err = prediction_error([10, 100, 1000], 0.85, 0.87)
    assert err.shape == (3,)
    assert np.all(np.diff(err) > 0)
