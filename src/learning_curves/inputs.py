"""Input handling shared by every model function.

The models themselves never look at Python types. This module turns the raw
arguments into float arrays once, and enforces the calling contract:

- every input must be numeric (ints or floats, scalars or 1-D sequences);
- sequences must all have the same length, scalars broadcast against them;
- with ``na_rm=True`` missing entries are dropped from each input first.
"""

from __future__ import annotations

import warnings
from typing import Any, Dict, List, Mapping, Tuple

import numpy as np
import pandas as pd

from .errors import ConfigError, DomainError, MissingValuesWarning, RangeError


NUMERIC_KINDS = "iuf"


def _describe(value: Any) -> str:
    if isinstance(value, np.ndarray):
        return f"ndarray[{value.dtype}]"
    return type(value).__name__


def _is_missing(value: Any) -> bool:
    """None, pd.NA, NaN and NaT are missing; anything else (strings included) is not."""
    if value is None:
        return True
    if isinstance(value, str) or np.ndim(value) != 0:
        return False
    return bool(pd.isna(value))


def _is_sequence(value: Any) -> bool:
    if isinstance(value, (list, tuple, pd.Series)):
        return True
    return isinstance(value, np.ndarray) and value.dtype == object and value.ndim == 1


def strip_missing(fields: Mapping[str, Any]) -> Tuple[Dict[str, Any], Dict[str, int]]:
    """Remove missing entries before type checks, so None or pd.NA never reach numpy.

    Returns the cleaned fields and how many entries were removed from each.
    """
    out: Dict[str, Any] = {}
    counts: Dict[str, int] = {}
    for name, value in fields.items():
        if _is_missing(value):
            out[name] = []
            counts[name] = 1
        elif _is_sequence(value):
            items = list(value)
            keep = [v for v in items if not _is_missing(v)]
            out[name] = keep if len(keep) < len(items) else value
            if len(keep) < len(items):
                counts[name] = len(items) - len(keep)
        else:
            out[name] = value
    return out, counts


def as_numeric(fields: Mapping[str, Any]) -> Dict[str, np.ndarray]:
    """Coerce each field to a float array, or raise DomainError naming every bad field."""
    out: Dict[str, np.ndarray] = {}
    bad: List[str] = []
    for name, value in fields.items():
        try:
            arr = np.asarray(value)
        except (TypeError, ValueError):
            bad.append(f"{name}: {_describe(value)}")
            continue
        if arr.size == 0 and arr.ndim == 1:
            arr = arr.astype(float)
        if arr.dtype.kind not in NUMERIC_KINDS:
            bad.append(f"{name}: {_describe(value)}")
            continue
        if arr.ndim > 1:
            raise ConfigError(f"{name} must be a scalar or a 1-D sequence, got shape {arr.shape}")
        out[name] = arr.astype(float)
    if bad:
        raise DomainError(
            "This function only works for numeric inputs. "
            "You have provided objects of the following classes: " + ", ".join(bad)
        )
    return out


def drop_missing(
    arrays: Dict[str, np.ndarray],
    *,
    na_rm: bool,
    counts: Mapping[str, int] | None = None,
) -> Dict[str, np.ndarray]:
    if not na_rm:
        return arrays
    counts = dict(counts or {})
    out: Dict[str, np.ndarray] = {}
    for name, arr in arrays.items():
        mask = np.isnan(arr)
        if mask.any():
            counts[name] = counts.get(name, 0) + int(mask.sum())
            arr = np.atleast_1d(arr)[~np.atleast_1d(mask)]
        out[name] = arr
    dropped = [f"{name} ({k})" for name, k in counts.items() if k]
    if dropped:
        warnings.warn(
            "Missing values were filtered from " + ", ".join(dropped) + ". "
            "Input lengths may no longer line up.",
            MissingValuesWarning,
            stacklevel=5,
        )
    return out


def load(fields: Mapping[str, Any], *, na_rm: bool = False) -> Dict[str, np.ndarray]:
    """Float arrays for every field; with na_rm, missing entries of any kind are dropped."""
    counts: Dict[str, int] = {}
    if na_rm:
        fields, counts = strip_missing(fields)
    return drop_missing(as_numeric(fields), na_rm=na_rm, counts=counts)


def check_lengths(arrays: Dict[str, np.ndarray]) -> bool:
    """Enforce equal-length-or-scalar. Returns True when every input is a scalar."""
    lengths = {name: arr.shape[0] for name, arr in arrays.items() if arr.ndim == 1}
    if len(set(lengths.values())) > 1:
        desc = ", ".join(f"{k}={v}" for k, v in lengths.items())
        raise ConfigError(f"Sequence inputs must have the same length (or be scalars); got {desc}")
    return not lengths


def prepare(fields: Mapping[str, Any], *, na_rm: bool = False) -> Tuple[List[np.ndarray], bool]:
    """Validate, filter and length-check a set of inputs, returned in the order given."""
    arrays = load(fields, na_rm=na_rm)
    scalar = check_lengths(arrays)
    return [arrays[name] for name in fields], scalar


def require_scalar(name: str, arr: np.ndarray) -> float:
    if arr.ndim != 0:
        raise ConfigError(f"{name} must be a single number, got a sequence of length {arr.shape[0]}")
    return float(arr)


def require_positive(name: str, arr: np.ndarray) -> None:
    # NaN compares False and is left to propagate
    if np.any(arr <= 0):
        raise DomainError(f"{name} must be greater than 0")


def require_block(m: np.ndarray, n: np.ndarray, context: str) -> None:
    if np.any(m > n):
        raise RangeError(
            f"{context} is defined for the production block between m and n; "
            f"consequently, n must be at least m (got m={np.asarray(m).tolist()}, n={np.asarray(n).tolist()})"
        )


def finish(value: np.ndarray, scalar: bool) -> float | np.ndarray:
    if scalar:
        return float(value)
    return np.asarray(value, dtype=float)


def block_units(m: float, n: float) -> np.ndarray:
    """Units m, m+1, ... up to n."""
    if not (np.isfinite(m) and np.isfinite(n)):
        raise RangeError(f"Block bounds must be finite (got m={m}, n={n})")
    return m + np.arange(int(np.floor(n - m)) + 1, dtype=float)
