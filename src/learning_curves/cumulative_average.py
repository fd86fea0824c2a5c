"""Wright's cumulative average learning curve.

The law is stated on the running average cost: the first n units together
cost t * n^(1+b). A single unit's cost is the first difference of that total.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from .inputs import finish, prepare, require_block, require_positive
from .slope_rate import slope_from_rate


def _total(n: np.ndarray, c: np.ndarray) -> np.ndarray:
    # n^c, with the total before the first unit pinned to 0
    return np.where(n == 0.0, 0.0, np.power(np.where(n == 0.0, 1.0, n), c))


def unit_cost(t: Any, m: Any, n: Any, r: Any, *, na_rm: bool = False) -> float | np.ndarray:
    """Time (or cost) of unit n given the time t of unit m and learning rate r."""
    (t, m, n, r), scalar = prepare({"t": t, "m": m, "n": n, "r": r}, na_rm=na_rm)
    require_positive("r", r)
    c = 1.0 + slope_from_rate(r)
    y = t * (_total(n, c) - _total(n - 1.0, c)) / (_total(m, c) - _total(m - 1.0, c))
    return finish(y, scalar)


def block_cost(t: Any, m: Any, n: Any, r: Any, *, na_rm: bool = False) -> float | np.ndarray:
    """Total time for the production block [m, n], t being the first-unit time."""
    (t, m, n, r), scalar = prepare({"t": t, "m": m, "n": n, "r": r}, na_rm=na_rm)
    require_block(m, n, "block_cost")
    require_positive("r", r)
    c = 1.0 + slope_from_rate(r)
    return finish(t * (_total(n, c) - _total(m - 1.0, c)), scalar)


def cumulative_average_cost(t: Any, n: Any, r: Any, *, na_rm: bool = False) -> float | np.ndarray:
    """Average time per unit over the first n units."""
    (t, n, r), scalar = prepare({"t": t, "n": n, "r": r}, na_rm=na_rm)
    require_positive("r", r)
    return finish(t * np.power(n, slope_from_rate(r)), scalar)
