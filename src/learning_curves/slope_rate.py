from __future__ import annotations

from typing import Any

import numpy as np

from .errors import RangeError
from .inputs import finish, prepare, require_positive


LOG2 = float(np.log(2.0))
LOG10_2 = float(np.log10(2.0))


def slope_from_rate(r: np.ndarray) -> np.ndarray:
    """b = ln(r) / ln(2), on already validated arrays."""
    return np.log(r) / LOG2


def rate_from_slope(b: np.ndarray) -> np.ndarray:
    # routed through base 10: 10^(b*log10(2) + 2) / 100 == 2^b
    return np.power(10.0, b * LOG10_2 + 2.0) / 100.0


def natural_slope(r: Any, *, na_rm: bool = False) -> float | np.ndarray:
    """Natural slope b for one or more learning rates."""
    (r,), scalar = prepare({"r": r}, na_rm=na_rm)
    require_positive("r", r)
    return finish(slope_from_rate(r), scalar)


def learning_rate(b: Any, *, na_rm: bool = False) -> float | np.ndarray:
    """Learning rate r for one or more natural slopes (inverse of natural_slope)."""
    (b,), scalar = prepare({"b": b}, na_rm=na_rm)
    return finish(rate_from_slope(b), scalar)


def natural_slope_estimate(T: Any, t: Any, n: Any) -> float | np.ndarray:
    """Back out b from the total cost T of the first n units and the first-unit cost t.

    Inverts the continuous Wright cumulative total T = t * n^(1+b). Needs n > 1,
    since ln(1) = 0 leaves b undetermined.
    """
    (T, t, n), scalar = prepare({"T": T, "t": t, "n": n})
    if np.any(n <= 1):
        raise RangeError(f"n must be greater than 1 to estimate a slope (got n={np.asarray(n).tolist()})")
    b = (np.log(T) - np.log(t)) / np.log(n) - 1.0
    return finish(b, scalar)


def learning_rate_estimate(T: Any, t: Any, n: Any) -> float | np.ndarray:
    """Learning rate implied by natural_slope_estimate."""
    b = np.asarray(natural_slope_estimate(T, t, n), dtype=float)
    return finish(rate_from_slope(b), b.ndim == 0)
