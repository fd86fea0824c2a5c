"""learning_curves

Production learning curve estimates under two competing models.

The package exposes:
- rate/slope conversion and estimation (slope_rate)
- Crawford's unit model: unit time, exact and approximate cumulative time,
  midpoint unit, block summary (unit_model)
- Wright's cumulative average model: unit time and block time (cumulative_average)
- model comparison: unit/cumulative delta, prediction error (comparison)
- an equivalent aggregate curve across departments (aggregate)
- a log-log fit of a unit curve from observed data (fitting)
- plot-ready series and optional matplotlib figures (series, plotting)

Plotting lives in learning_curves.plotting and is not imported here.
"""

from .aggregate import AggregateCurve, aggregate_curve, fit_aggregate_curve
from .comparison import delta, prediction_error
from .cumulative_average import block_cost as ca_block_cost
from .cumulative_average import cumulative_average_cost
from .cumulative_average import unit_cost as ca_unit_cost
from .errors import ConfigError, DomainError, LearningCurveError, MissingValuesWarning, RangeError
from .fitting import CurveFit, fit_unit_curve
from .series import block_summary_series, delta_series, unit_curve_series
from .slope_rate import learning_rate, learning_rate_estimate, natural_slope, natural_slope_estimate
from .unit_model import BlockSummary, block_summary, cumulative_approx, cumulative_exact, midpoint_unit, unit_cost

__version__ = "0.1.0"

__all__ = [
    "natural_slope",
    "learning_rate",
    "natural_slope_estimate",
    "learning_rate_estimate",
    "unit_cost",
    "cumulative_exact",
    "cumulative_approx",
    "midpoint_unit",
    "block_summary",
    "BlockSummary",
    "ca_unit_cost",
    "ca_block_cost",
    "cumulative_average_cost",
    "delta",
    "prediction_error",
    "aggregate_curve",
    "fit_aggregate_curve",
    "AggregateCurve",
    "fit_unit_curve",
    "CurveFit",
    "unit_curve_series",
    "block_summary_series",
    "delta_series",
    "LearningCurveError",
    "DomainError",
    "RangeError",
    "ConfigError",
    "MissingValuesWarning",
]
