"""Aggregate learning curve for several departments working on the same units.

Each department follows its own Wright total t_i * n^(1+b_i). The sum of
those totals is matched at a single horizon n by one equivalent curve
H * n^B with H = sum(t_i). B is only valid at that n: refit for any other
horizon.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict

import numpy as np

from .errors import ConfigError, RangeError
from .inputs import load, require_positive, require_scalar
from .slope_rate import rate_from_slope, slope_from_rate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AggregateCurve:
    first_unit_cost: float
    exponent: float
    natural_slope: float
    learning_rate: float
    n: float
    total: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def fit_aggregate_curve(t: Any, r: Any, n: Any, *, na_rm: bool = False) -> AggregateCurve:
    """Fit the equivalent aggregate curve for departments with first-unit times t and rates r."""
    arrays = load({"t": t, "r": r, "n": n}, na_rm=na_rm)
    t_arr = np.atleast_1d(arrays["t"])
    r_arr = np.atleast_1d(arrays["r"])
    if t_arr.shape != r_arr.shape:
        raise ConfigError(
            f"t and r describe the same departments and must have the same length; "
            f"got t={t_arr.shape[0]}, r={r_arr.shape[0]}"
        )
    if t_arr.size == 0:
        raise ConfigError("At least one department is required")
    n0 = require_scalar("n", arrays["n"])
    if n0 <= 1.0:
        raise RangeError(f"The aggregate slope is only defined for n > 1 (got n={n0:g})")
    require_positive("r", r_arr)

    H = float(np.sum(t_arr))
    c = 1.0 + slope_from_rate(r_arr)
    hours_all = float(np.sum(t_arr * np.power(n0, c)))
    B = (np.log(hours_all) - np.log(H)) / np.log(n0)
    total = H * n0**B
    logger.debug("fit_aggregate_curve: %d departments, H=%g, B=%g at n=%g", t_arr.size, H, B, n0)
    return AggregateCurve(
        first_unit_cost=H,
        exponent=float(B),
        natural_slope=float(B - 1.0),
        learning_rate=float(rate_from_slope(B - 1.0)),
        n=n0,
        total=float(total),
    )


def aggregate_curve(t: Any, r: Any, n: Any, *, na_rm: bool = False) -> float:
    """Total predicted time for units 1 through n across all departments."""
    return fit_aggregate_curve(t, r, n, na_rm=na_rm).total
