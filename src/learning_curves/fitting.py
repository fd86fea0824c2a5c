"""Estimate a unit curve from observed (unit, time) pairs.

Crawford's law is linear in log-log space: ln(y) = ln(t1) + b * ln(x).
An ordinary least squares fit of that line gives the natural slope b and the
first-unit time t1.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict

import numpy as np
from scipy.stats import linregress

from .errors import ConfigError, DomainError
from .inputs import as_numeric
from .slope_rate import rate_from_slope


@dataclass(frozen=True)
class CurveFit:
    first_unit_cost: float
    natural_slope: float
    learning_rate: float
    r_squared: float
    n_obs: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def fit_unit_curve(units: Any, costs: Any) -> CurveFit:
    arrays = as_numeric({"units": units, "costs": costs})
    x = np.atleast_1d(arrays["units"])
    y = np.atleast_1d(arrays["costs"])
    if x.shape != y.shape:
        raise ConfigError(f"units and costs must have the same length; got {x.shape[0]} and {y.shape[0]}")

    keep = np.isfinite(x) & np.isfinite(y)
    x = x[keep]
    y = y[keep]
    if np.any(x <= 0) or np.any(y <= 0):
        raise DomainError("units and costs must be greater than 0 for a log-log fit")
    if np.unique(x).size < 2:
        raise ConfigError("At least two distinct units are required to fit a curve")

    res = linregress(np.log(x), np.log(y))
    b = float(res.slope)
    return CurveFit(
        first_unit_cost=float(np.exp(res.intercept)),
        natural_slope=b,
        learning_rate=float(rate_from_slope(b)),
        r_squared=float(res.rvalue**2),
        n_obs=int(x.size),
    )
