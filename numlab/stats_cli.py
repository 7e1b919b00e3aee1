"""Describe a file of numbers, or follow a yearly temperature trend."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Sequence
from os import PathLike
from pathlib import Path
from typing import NamedTuple

from numlab.stats import (
    format_numbered,
    mean,
    median,
    read_values,
    sampled_variance,
    selection_sort,
    variance,
)


class YearSummary(NamedTuple):
    year: int
    mean: float
    error: float


def temperature_trend(
    directory: str | PathLike[str], first_year: int, last_year: int
) -> list[YearSummary]:
    """Mean and spread of the values in ``<year>.txt`` for each year, inclusive.

    The spread is the square root of the variance sampled every seventh value.
    """
    if first_year > last_year:
        raise ValueError(f"first year {first_year} is after last year {last_year}")
    base = Path(directory)
    summaries = []
    for year in range(first_year, last_year + 1):
        values = read_values(base / f"{year}.txt")
        summaries.append(
            YearSummary(year, mean(values), math.sqrt(sampled_variance(values)))
        )
    return summaries


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="numlab-stats", description=__doc__)
    sub = parser.add_subparsers(dest="command", required=True)
    describe = sub.add_parser("describe", help="statistics of a file of numbers")
    describe.add_argument("n_data", type=int)
    describe.add_argument("filename")
    trend = sub.add_parser("trend", help="yearly temperature trend")
    trend.add_argument("--directory", type=Path, default=Path("."))
    trend.add_argument("--first", type=int, default=1941)
    trend.add_argument("--last", type=int, default=2023)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _parser().parse_args(argv)

    if args.command == "describe":
        try:
            values = read_values(args.filename, args.n_data)
            m = mean(values)
        except (OSError, ValueError) as exc:
            print(f"Errore caricamento file: {exc}", file=sys.stderr)
            return 1
        print(f"Stampo vettore {args.filename}")
        print(format_numbered(values))
        print(f"Media= {m:g}")
        print(f"Varianza= {variance(values):g}")
        print(f"Mediana= {median(values):g}")
        print("Vettore ordinato:")
        print(" ".join(f"{v:g}" for v in selection_sort(values)))
        return 0

    try:
        summaries = temperature_trend(args.directory, args.first, args.last)
    except (OSError, ValueError) as exc:
        print(f"Errore caricamento file: {exc}", file=sys.stderr)
        return 1
    for s in summaries:
        print(f"  Anno {s.year}  delta medio = {s.mean:g} +/- {s.error:g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())