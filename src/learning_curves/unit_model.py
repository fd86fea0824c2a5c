"""Crawford's unit learning curve.

The cost of unit n given the cost t of unit m is t * (n/m)^b, b being the
natural slope of the learning rate r. Cumulative costs over a production
block [m, n] are available exactly (explicit sum) or through the integral of
the power law over [m - 0.5, n + 0.5], which is O(1) and usually within a
unit or two of the exact total.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict

import numpy as np

from .inputs import block_units, finish, prepare, require_block, require_positive, require_scalar
from .slope_rate import slope_from_rate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlockSummary:
    """Summary of the production block [m, n] under the unit model."""

    block_units: float | np.ndarray
    block_hours: float | np.ndarray
    midpoint_unit: float | np.ndarray
    midpoint_hours: float | np.ndarray

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _unit_cost(t: np.ndarray, m: np.ndarray, n: np.ndarray, b: np.ndarray) -> np.ndarray:
    return t * np.power(n / m, b)


def _first_unit(t: np.ndarray, m: np.ndarray, b: np.ndarray) -> np.ndarray:
    # rebase the reference cost from unit m to unit 1
    return t / np.power(m, b)


def _integral(m: np.ndarray, n: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Integral of x^b over [m - 0.5, n + 0.5]."""
    c = 1.0 + b
    lo = m - 0.5
    hi = n + 0.5
    with np.errstate(divide="ignore", invalid="ignore"):
        power_form = (np.power(hi, c) - np.power(lo, c)) / c
        log_form = np.log(hi / lo)
    return np.where(c == 0.0, log_form, power_form)


def unit_cost(t: Any, m: Any, n: Any, r: Any, *, na_rm: bool = False) -> float | np.ndarray:
    """Time (or cost) of unit n given the time t of unit m and learning rate r."""
    (t, m, n, r), scalar = prepare({"t": t, "m": m, "n": n, "r": r}, na_rm=na_rm)
    require_positive("r", r)
    b = slope_from_rate(r)
    return finish(_unit_cost(t, m, n, b), scalar)


def cumulative_exact(t: Any, m: Any, n: Any, r: Any, *, na_rm: bool = False) -> float:
    """Exact cumulative time for units m through n (inclusive), summed unit by unit.

    Cost grows with n - m; prefer cumulative_approx for spans in the millions.
    """
    (t, m, n, r), _ = prepare({"t": t, "m": m, "n": n, "r": r}, na_rm=na_rm)
    t0 = require_scalar("t", t)
    m0 = require_scalar("m", m)
    n0 = require_scalar("n", n)
    r0 = require_scalar("r", r)
    require_block(m, n, "cumulative_exact")
    require_positive("r", r)

    if not np.isfinite(m0) or not np.isfinite(n0):
        return float("nan")

    b = float(slope_from_rate(r0))
    t1 = t0 / m0**b
    units = block_units(m0, n0)
    logger.debug("cumulative_exact: summing %d units from %g", units.size, m0)
    return float(np.sum(t1 * np.power(units, b)))


def cumulative_approx(t: Any, m: Any, n: Any, r: Any, *, na_rm: bool = False) -> float | np.ndarray:
    """Approximate cumulative time for units m through n (inclusive).

    Replaces the discrete sum with the integral of the power law over
    [m - 0.5, n + 0.5].
    """
    (t, m, n, r), scalar = prepare({"t": t, "m": m, "n": n, "r": r}, na_rm=na_rm)
    require_block(m, n, "cumulative_approx")
    require_positive("r", r)
    b = slope_from_rate(r)
    t1 = _first_unit(t, m, b)
    return finish(t1 * _integral(m, n, b), scalar)


def _midpoint(m: np.ndarray, n: np.ndarray, b: np.ndarray) -> np.ndarray:
    units = n - m + 1.0
    with np.errstate(divide="ignore", invalid="ignore"):
        k = np.power(_integral(m, n, b) / units, 1.0 / b)
    # without learning every unit costs the same: take the middle of the block
    return np.where(b == 0.0, (m + n) / 2.0, k)


def midpoint_unit(m: Any, n: Any, r: Any, *, na_rm: bool = False) -> float | np.ndarray:
    """The "midpoint" (average) unit of the block [m, n].

    Its unit cost, repeated n - m + 1 times, reproduces cumulative_approx.
    """
    (m, n, r), scalar = prepare({"m": m, "n": n, "r": r}, na_rm=na_rm)
    require_block(m, n, "midpoint_unit")
    require_positive("r", r)
    return finish(_midpoint(m, n, slope_from_rate(r)), scalar)


def block_summary(t: Any, m: Any, n: Any, r: Any, *, na_rm: bool = False) -> BlockSummary:
    """Block units, block hours, midpoint unit and midpoint hours for [m, n]."""
    (t, m, n, r), scalar = prepare({"t": t, "m": m, "n": n, "r": r}, na_rm=na_rm)
    require_block(m, n, "block_summary")
    require_positive("r", r)
    t, m, n, r = np.broadcast_arrays(t, m, n, r)

    b = slope_from_rate(r)
    t1 = _first_unit(t, m, b)
    k = _midpoint(m, n, b)
    t_k = _unit_cost(t1, 1.0, k, b)
    units = n - m + 1.0
    return BlockSummary(
        block_units=finish(units, scalar),
        block_hours=finish(t_k * units, scalar),
        midpoint_unit=finish(k, scalar),
        midpoint_hours=finish(t_k, scalar),
    )
