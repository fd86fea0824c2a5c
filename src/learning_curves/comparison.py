"""Crawford vs. Wright comparisons."""

from __future__ import annotations

import logging
from typing import Any, Optional

import numpy as np

from . import cumulative_average, unit_model
from .config import DEFAULT_LEVEL, check_level
from .inputs import block_units, finish, prepare, require_block, require_positive, require_scalar
from .slope_rate import slope_from_rate

logger = logging.getLogger(__name__)


def delta(t: Any, m: Any, n: Any, r: Any, level: str = DEFAULT_LEVEL) -> np.ndarray:
    """Unit-model minus cumulative-average-model time for every unit in [m, n].

    level="unit" gives the per-unit differences, level="cumulative" their
    running sum.
    """
    check_level(level)
    (t, m, n, r), _ = prepare({"t": t, "m": m, "n": n, "r": r})
    t0 = require_scalar("t", t)
    m0 = require_scalar("m", m)
    n0 = require_scalar("n", n)
    r0 = require_scalar("r", r)
    require_block(m, n, "delta")

    units = block_units(m0, n0)
    d = unit_model.unit_cost(t0, m0, units, r0) - cumulative_average.unit_cost(t0, m0, units, r0)
    if level == "cumulative":
        return np.cumsum(d)
    return d


def prediction_error(n: Any, r1: Any, r2: Any) -> Optional[float | np.ndarray]:
    """Approximate relative error in cumulative time from using rate r1 when r2 was realized.

    Ratio of the realized cumulative result to the predicted one, minus one.
    Returns None when the two rates are the same: there is nothing to compare.
    """
    (n, r1, r2), scalar = prepare({"n": n, "r1": r1, "r2": r2})
    require_positive("r1", r1)
    require_positive("r2", r2)
    if np.all(r1 == r2):
        logger.debug("prediction_error: rates are identical (%s), no error to report", r1.tolist())
        return None

    b1 = slope_from_rate(r1)
    b2 = slope_from_rate(r2)
    return finish(np.power(n, b2 - b1) - 1.0, scalar)
