"""matplotlib renderers for the series frames.

Figures are built with matplotlib.figure.Figure directly, so nothing here
touches pyplot state or needs a display. Saving is left to the caller
(fig.savefig(...)).
"""

from __future__ import annotations

from typing import Any

import pandas as pd
from matplotlib.figure import Figure

from .config import DEFAULT_LEVEL, DEFAULT_MODEL, DEFAULT_STYLE, PlotStyle, check_level
from .series import block_summary_series, delta_series, unit_curve_series


def _figure(style: PlotStyle, *, title: str, y_label: str) -> tuple[Figure, Any]:
    style.validate()
    fig = Figure(figsize=(style.width, style.height), layout="tight")
    ax = fig.add_subplot(111)
    ax.set_title(title, fontsize=14, pad=15)
    ax.set_xlabel("Unit", fontsize=12)
    ax.set_ylabel(y_label, fontsize=12)
    ax.grid(True, alpha=0.3, linestyle="--")
    return fig, ax


def _column(level: str) -> str:
    return "value" if level == "unit" else "cumulative_value"


def plot_unit_curve(
    t: Any,
    m: Any,
    n: Any,
    r: Any,
    *,
    model: str = DEFAULT_MODEL,
    level: str = DEFAULT_LEVEL,
    style: PlotStyle = DEFAULT_STYLE,
) -> Figure:
    """Learning curve for units m..n under the unit model, the cumulative average model, or both."""
    check_level(level)
    df = unit_curve_series(t, m, n, r, model=model)
    col = _column(level)
    y_label = "Time per unit" if level == "unit" else "Cumulative time"
    fig, ax = _figure(style, title=f"Learning curve (r={float(r):g})", y_label=y_label)

    if "model" in df.columns:
        for color, (name, part) in zip(style.colors, df.groupby("model", sort=False)):
            ax.plot(part["x"].to_numpy(), part[col].to_numpy(), linewidth=style.line_width, color=color, label=name)
        ax.legend(loc="upper right")
    else:
        ax.plot(df["x"].to_numpy(), df[col].to_numpy(), linewidth=style.line_width, color=style.colors[0])

    return fig


def plot_block_summary(t: Any, m: Any, n: Any, r: Any, *, style: PlotStyle = DEFAULT_STYLE) -> Figure:
    """Unit-model curve for the block [m, n] with its midpoint highlighted."""
    df, point = block_summary_series(t, m, n, r)
    fig, ax = _figure(style, title=f"Block summary [{df['x'].iloc[0]:g}, {df['x'].iloc[-1]:g}]", y_label="Time per unit")
    ax.plot(df["x"].to_numpy(), df["value"].to_numpy(), linewidth=style.line_width, color=style.colors[0])
    ax.scatter([point["x"]], [point["value"]], s=style.point_size * 6, color=style.colors[1], zorder=3)
    ax.annotate(
        point["label"],
        xy=(point["x"], point["value"]),
        xytext=style.label_offset,
        textcoords="offset points",
        ha="left",
        va="bottom",
    )
    return fig


def plot_delta(
    t: Any,
    m: Any,
    n: Any,
    r: Any,
    *,
    level: str = DEFAULT_LEVEL,
    style: PlotStyle = DEFAULT_STYLE,
) -> Figure:
    """Unit model minus cumulative average model, per unit or cumulative."""
    df: pd.DataFrame = delta_series(t, m, n, r, level=level)
    y_label = "Delta per unit" if level == "unit" else "Cumulative delta"
    fig, ax = _figure(style, title="Crawford vs. Wright", y_label=y_label)
    ax.plot(df["x"].to_numpy(), df["value"].to_numpy(), linewidth=style.line_width, color=style.colors[0])
    if len(df) and float(df["x"].iloc[-1]) < style.point_threshold:
        ax.scatter(df["x"].to_numpy(), df["value"].to_numpy(), s=style.point_size, color=style.colors[0])
    return fig
