import numpy as np
import pytest

from learning_curves.errors import ConfigError, DomainError
from learning_curves.fitting import fit_unit_curve
from learning_curves.unit_model import unit_cost


def test_fit_recovers_exact_curve():
    units = np.arange(1, 60)
    costs = unit_cost(120, 1, units, 0.82)
    fit = fit_unit_curve(units, costs)
    assert fit.first_unit_cost == pytest.approx(120.0)
    assert fit.learning_rate == pytest.approx(0.82)
    assert fit.r_squared == pytest.approx(1.0)
    assert fit.n_obs == 59


def test_fit_on_noisy_data():
    rng = np.random.default_rng(7)
    units = np.arange(1, 200)
    costs = unit_cost(100, 1, units, 0.9) * np.exp(rng.normal(0.0, 0.02, size=units.size))
    fit = fit_unit_curve(units, costs)
    assert fit.learning_rate == pytest.approx(0.9, abs=0.01)
    assert fit.r_squared > 0.9


def test_fit_skips_missing_pairs():
    units = [1, 2, 3, 4]
    costs = [100.0, np.nan, 100 * 3 ** np.log2(0.8), 64.0]
    fit = fit_unit_curve(units, costs)
    assert fit.n_obs == 3
    assert fit.learning_rate == pytest.approx(0.8)


def test_fit_rejects_bad_inputs():
    with pytest.raises(DomainError):
        fit_unit_curve([1, 2, 3], [10, 0, 5])
    with pytest.raises(ConfigError):
        fit_unit_curve([1, 2, 3], [10, 9])
    with pytest.raises(ConfigError):
        fit_unit_curve([4, 4], [10, 9])
