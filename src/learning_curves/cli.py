#!/usr/bin/env python3
"""Command line entry point.

Usage:
  learning-curves unit --t 100 --m 1 --n 125 --r 0.85
  learning-curves block --t 125 --m 201 --n 500 --r 0.75
  learning-curves aggregate --t 70 45 25 --r 0.85 0.87 0.80 --n 300

Every command prints a single JSON document on stdout.
"""

from __future__ import annotations

import argparse
import json
import logging
from typing import Any, Callable, Dict, Optional, Sequence

import numpy as np

from . import aggregate, comparison, cumulative_average, slope_rate, unit_model
from .config import LEVELS
from .errors import LearningCurveError


def _jsonable(value: Any) -> Any:
    # nan and inf have no JSON spelling; they go out as null
    if isinstance(value, np.ndarray):
        return [_jsonable(v) for v in value.tolist()]
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    if isinstance(value, (np.floating, np.integer)):
        value = value.item()
    if isinstance(value, float) and not np.isfinite(value):
        return None
    return value


def _one(values: Sequence[float]) -> Any:
    # single values stay scalars so the result is a plain number
    return values[0] if len(values) == 1 else list(values)


def _block_args(p: argparse.ArgumentParser, *, with_t: bool = True) -> None:
    if with_t:
        p.add_argument("--t", type=float, nargs="+", required=True, help="Time (or cost) of unit m.")
    p.add_argument("--m", type=float, nargs="+", default=[1.0], help="Reference unit (default 1).")
    p.add_argument("--n", type=float, nargs="+", required=True, help="Target unit, or last unit of the block.")
    p.add_argument("--r", type=float, nargs="+", required=True, help="Learning rate, e.g. 0.85.")


def _cmd_unit(a: argparse.Namespace) -> Any:
    return unit_model.unit_cost(_one(a.t), _one(a.m), _one(a.n), _one(a.r), na_rm=a.na_rm)


def _cmd_cumulative(a: argparse.Namespace) -> Any:
    fn = unit_model.cumulative_approx if a.approx else unit_model.cumulative_exact
    return fn(_one(a.t), _one(a.m), _one(a.n), _one(a.r), na_rm=a.na_rm)


def _cmd_midpoint(a: argparse.Namespace) -> Any:
    return unit_model.midpoint_unit(_one(a.m), _one(a.n), _one(a.r), na_rm=a.na_rm)


def _cmd_block(a: argparse.Namespace) -> Any:
    return unit_model.block_summary(_one(a.t), _one(a.m), _one(a.n), _one(a.r), na_rm=a.na_rm).to_dict()


def _cmd_ca_unit(a: argparse.Namespace) -> Any:
    return cumulative_average.unit_cost(_one(a.t), _one(a.m), _one(a.n), _one(a.r), na_rm=a.na_rm)


def _cmd_ca_block(a: argparse.Namespace) -> Any:
    return cumulative_average.block_cost(_one(a.t), _one(a.m), _one(a.n), _one(a.r), na_rm=a.na_rm)


def _cmd_delta(a: argparse.Namespace) -> Any:
    return comparison.delta(_one(a.t), _one(a.m), _one(a.n), _one(a.r), level=a.level)


def _cmd_error(a: argparse.Namespace) -> Any:
    err = comparison.prediction_error(_one(a.n), _one(a.r1), _one(a.r2))
    if err is None:
        return {"error": None, "note": "the learning rates being compared are the same"}
    return {"error": err}


def _cmd_aggregate(a: argparse.Namespace) -> Any:
    return aggregate.fit_aggregate_curve(a.t, a.r, a.n, na_rm=a.na_rm).to_dict()


def _cmd_slope(a: argparse.Namespace) -> Any:
    return slope_rate.natural_slope(_one(a.r), na_rm=a.na_rm)


def _cmd_rate(a: argparse.Namespace) -> Any:
    return slope_rate.learning_rate(_one(a.b), na_rm=a.na_rm)


def _cmd_estimate(a: argparse.Namespace) -> Any:
    return {
        "natural_slope": slope_rate.natural_slope_estimate(a.total, a.t, a.n),
        "learning_rate": slope_rate.learning_rate_estimate(a.total, a.t, a.n),
    }


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="learning-curves", description="Crawford and Wright learning curve estimates.")
    ap.add_argument("--na-rm", dest="na_rm", action="store_true", help="Drop missing (nan) entries before computing.")
    ap.add_argument("--verbose", action="store_true", help="Log debug messages on stderr.")
    sub = ap.add_subparsers(dest="command", required=True)

    commands: Dict[str, tuple[str, Callable[[argparse.Namespace], Any]]] = {
        "unit": ("Unit model: time of unit n.", _cmd_unit),
        "cumulative": ("Unit model: cumulative time for units m..n.", _cmd_cumulative),
        "block": ("Unit model: block summary for units m..n.", _cmd_block),
        "ca-unit": ("Cumulative average model: time of unit n.", _cmd_ca_unit),
        "ca-block": ("Cumulative average model: time for units m..n.", _cmd_ca_block),
        "delta": ("Unit model minus cumulative average model over m..n.", _cmd_delta),
    }
    for name, (help_text, fn) in commands.items():
        p = sub.add_parser(name, help=help_text)
        _block_args(p)
        p.set_defaults(func=fn)
        if name == "cumulative":
            p.add_argument("--approx", action="store_true", help="Use the O(1) integral approximation.")
        if name == "delta":
            p.add_argument("--level", choices=LEVELS, default="unit")

    p = sub.add_parser("midpoint", help="Unit model: midpoint unit of the block m..n.")
    _block_args(p, with_t=False)
    p.set_defaults(func=_cmd_midpoint)

    p = sub.add_parser("error", help="Relative cumulative error from using r1 when r2 was realized.")
    p.add_argument("--n", type=float, nargs="+", required=True)
    p.add_argument("--r1", type=float, nargs="+", required=True)
    p.add_argument("--r2", type=float, nargs="+", required=True)
    p.set_defaults(func=_cmd_error)

    p = sub.add_parser("aggregate", help="Equivalent aggregate curve across departments.")
    p.add_argument("--t", type=float, nargs="+", required=True, help="First-unit time per department.")
    p.add_argument("--r", type=float, nargs="+", required=True, help="Learning rate per department.")
    p.add_argument("--n", type=float, required=True, help="Total units produced.")
    p.set_defaults(func=_cmd_aggregate)

    p = sub.add_parser("slope", help="Natural slope of learning rates.")
    p.add_argument("--r", type=float, nargs="+", required=True)
    p.set_defaults(func=_cmd_slope)

    p = sub.add_parser("rate", help="Learning rate of natural slopes.")
    p.add_argument("--b", type=float, nargs="+", required=True)
    p.set_defaults(func=_cmd_rate)

    p = sub.add_parser("estimate", help="Estimate slope and rate from the total time of the first n units.")
    p.add_argument("--total", type=float, required=True, help="Total time for the first n units.")
    p.add_argument("--t", type=float, required=True, help="Time of the first unit.")
    p.add_argument("--n", type=float, required=True, help="Units produced.")
    p.set_defaults(func=_cmd_estimate)

    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    try:
        result = args.func(args)
    except LearningCurveError as exc:
        raise SystemExit(f"{args.command}: {exc}") from exc
    print(json.dumps(_jsonable(result), indent=2, allow_nan=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
