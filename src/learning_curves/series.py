"""Plot-ready series.

These frames are the only thing the plotting sink consumes:
- curve frames: x, value, cumulative_value (+ model when two models share a frame)
- block frames: x, value, plus one annotated midpoint {x, value, label}
- delta frames: x, value
"""

from __future__ import annotations

from typing import Any, Dict, Tuple

import numpy as np
import pandas as pd

from . import cumulative_average, unit_model
from .comparison import delta
from .config import DEFAULT_LEVEL, DEFAULT_MODEL, MODEL_LABELS, check_model
from .inputs import block_units, prepare, require_block, require_scalar


def _block(t: Any, m: Any, n: Any, r: Any, context: str) -> Tuple[float, float, float, float]:
    (t, m, n, r), _ = prepare({"t": t, "m": m, "n": n, "r": r})
    vals = tuple(require_scalar(k, v) for k, v in zip("tmnr", (t, m, n, r)))
    require_block(m, n, context)
    return vals  # type: ignore[return-value]


def _curve_frame(x: np.ndarray, y: np.ndarray) -> pd.DataFrame:
    return pd.DataFrame({"x": x, "value": y, "cumulative_value": np.cumsum(y)})


def unit_curve_series(t: Any, m: Any, n: Any, r: Any, *, model: str = DEFAULT_MODEL) -> pd.DataFrame:
    """Unit and cumulative time for units m..n under one model, or both stacked."""
    check_model(model)
    t0, m0, n0, r0 = _block(t, m, n, r, "unit_curve_series")
    x = block_units(m0, n0)

    frames = {}
    if model in ("unit", "both"):
        frames["unit"] = _curve_frame(x, unit_model.unit_cost(t0, m0, x, r0))
    if model in ("cumulative_average", "both"):
        frames["cumulative_average"] = _curve_frame(x, cumulative_average.unit_cost(t0, m0, x, r0))

    if model != "both":
        return frames[model]

    parts = [df.assign(model=MODEL_LABELS[name]) for name, df in frames.items()]
    out = pd.concat(parts, ignore_index=True)
    return out[["x", "model", "value", "cumulative_value"]]


def block_summary_series(t: Any, m: Any, n: Any, r: Any) -> Tuple[pd.DataFrame, Dict[str, Any]]:
    """Unit-model curve over the block plus the annotated midpoint."""
    t0, m0, n0, r0 = _block(t, m, n, r, "block_summary_series")
    x = block_units(m0, n0)
    df = pd.DataFrame({"x": x, "value": unit_model.unit_cost(t0, m0, x, r0)})

    summary = unit_model.block_summary(t0, m0, n0, r0)
    k = float(summary.midpoint_unit)
    h = float(summary.midpoint_hours)
    point = {"x": k, "value": h, "label": f"[{round(k)}, {round(h)}]"}
    return df, point


def delta_series(t: Any, m: Any, n: Any, r: Any, *, level: str = DEFAULT_LEVEL) -> pd.DataFrame:
    t0, m0, n0, r0 = _block(t, m, n, r, "delta_series")
    return pd.DataFrame({"x": block_units(m0, n0), "value": delta(t0, m0, n0, r0, level=level)})
