import numpy as np
import pytest

from learning_curves.config import PlotStyle, check_level, check_model
from learning_curves.errors import ConfigError, DomainError, LearningCurveError, RangeError
from learning_curves.inputs import as_numeric, prepare, require_block


def test_errors_share_a_base_and_builtin_types():
    assert issubclass(DomainError, LearningCurveError)
    assert issubclass(DomainError, TypeError)
    assert issubclass(DomainError, ValueError)
    assert issubclass(RangeError, ValueError)
    assert issubclass(ConfigError, ValueError)


def test_as_numeric_converts_to_float():
    out = as_numeric({"n": [1, 2, 3], "r": 0.85})
    assert out["n"].dtype == float
    assert out["r"].ndim == 0


def test_as_numeric_rejects_nested_sequences():
    with pytest.raises(ConfigError):
        as_numeric({"n": [[1, 2], [3, 4]]})
    with pytest.raises(DomainError):
        as_numeric({"n": [[1, 2], [3]]})


def test_prepare_reports_scalar_inputs():
    (t, n), scalar = prepare({"t": 100, "n": 5})
    assert scalar is True
    (t, n), scalar = prepare({"t": 100, "n": [5, 6]})
    assert scalar is False


def test_require_block_allows_single_unit_blocks():
    require_block(np.array(5.0), np.array(5.0), "test")
    with pytest.raises(RangeError):
        require_block(np.array([1.0, 6.0]), np.array([5.0, 5.0]), "test")


def test_option_sets_are_closed():
    assert check_model("both") == "both"
    assert check_level("cumulative") == "cumulative"
    with pytest.raises(ConfigError):
        check_model("u")
    with pytest.raises(ConfigError):
        check_level("c")


def test_plot_style_round_trips_to_dict():
    style = PlotStyle()
    style.validate()
    assert style.to_dict()["point_threshold"] == 100
