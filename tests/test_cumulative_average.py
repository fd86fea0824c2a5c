import numpy as np
import pytest

from learning_curves.cumulative_average import block_cost, cumulative_average_cost, unit_cost
from learning_curves.errors import RangeError


def test_unit_cost_reference_value():
    assert unit_cost(110, 1, 2200, 0.885) == pytest.approx(23.34001, abs=1e-5)


def test_first_unit_is_reference_cost():
    assert unit_cost(110, 1, 1, 0.885) == pytest.approx(110.0)


def test_block_cost_reference_value():
    assert block_cost(75, 201, 250, 0.85) == pytest.approx(806.772, abs=1e-3)


def test_block_cost_matches_sum_of_unit_costs():
    units = np.arange(1, 51)
    assert block_cost(75, 1, 50, 0.85) == pytest.approx(np.sum(unit_cost(75, 1, units, 0.85)))


def test_average_cost_doubles_by_rate():
    # the cumulative average, not the unit cost, falls by r per doubling
    assert cumulative_average_cost(100, 2, 0.8) == pytest.approx(80.0)
    assert block_cost(100, 1, 2, 0.8) / 2 == pytest.approx(80.0)


def test_block_cost_rejects_reversed_bounds():
    with pytest.raises(RangeError):
        block_cost(75, 250, 201, 0.85)
