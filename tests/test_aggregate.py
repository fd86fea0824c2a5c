import numpy as np
import pytest

from learning_curves.aggregate import AggregateCurve, aggregate_curve, fit_aggregate_curve
from learning_curves.errors import ConfigError, MissingValuesWarning, RangeError
from learning_curves.slope_rate import natural_slope


def test_aggregate_reference_value():
    assert aggregate_curve([70, 45, 25], [0.85, 0.87, 0.80], 300) == pytest.approx(11000.96, abs=1e-2)


def test_fit_matches_sum_of_departments_at_horizon():
    t = np.array([70.0, 45.0, 25.0])
    r = np.array([0.85, 0.87, 0.80])
    fit = fit_aggregate_curve(t, r, 300)
    assert isinstance(fit, AggregateCurve)
    assert fit.first_unit_cost == pytest.approx(140.0)
    assert fit.total == pytest.approx(np.sum(t * 300 ** (1 + natural_slope(r))))
    assert fit.natural_slope == pytest.approx(fit.exponent - 1.0)
    assert 0.80 < fit.learning_rate < 0.87


def test_single_department_recovers_its_rate():
    fit = fit_aggregate_curve([50], [0.9], 1000)
    assert fit.learning_rate == pytest.approx(0.9)


def test_fitted_slope_depends_on_horizon():
    a = fit_aggregate_curve([70, 45, 25], [0.85, 0.87, 0.80], 50)
    b = fit_aggregate_curve([70, 45, 25], [0.85, 0.87, 0.80], 5000)
    assert a.exponent != pytest.approx(b.exponent)


def test_departments_must_line_up():
    with pytest.raises(ConfigError):
        aggregate_curve([70, 45, 25], [0.85, 0.87], 300)


def test_horizon_must_exceed_one():
    with pytest.raises(RangeError):
        aggregate_curve([70, 45], [0.85, 0.87], 1)


def test_horizon_must_be_scalar():
    with pytest.raises(ConfigError):
        aggregate_curve([70, 45], [0.85, 0.87], [100, 200])


def test_na_rm_drops_missing_department_entries():
    with pytest.warns(MissingValuesWarning):
        y = aggregate_curve([70, np.nan, 25], [0.85, np.nan, 0.80], 300, na_rm=True)
    assert y == pytest.approx(aggregate_curve([70, 25], [0.85, 0.80], 300))
