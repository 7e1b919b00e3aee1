"""Repeat Monte Carlo estimates of an integral and study their spread."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Callable, Iterable, Sequence
from os import PathLike
from pathlib import Path

from numlab.functions import XSinX
from numlab.integration import MeanIntegrator, MonteCarloIntegrator
from numlab.stats import Histogram, mean, variance

DEFAULT_POINTS = (500, 1000, 5000, 10000, 50000, 100000)


def repeated_estimates(
    integrator: MonteCarloIntegrator,
    f: Callable[[float], float],
    points: int,
    repeats: int,
) -> list[float]:
    """Estimate the integral of ``f`` over [0, pi/2] ``repeats`` times."""
    return [integrator.integrate(f, 0, math.pi / 2, points) for _ in range(repeats)]


def write_estimates(path: str | PathLike[str], estimates: Iterable[float]) -> None:
    """Write one estimate per line."""
    with open(path, "w", encoding="utf-8") as fh:
        fh.writelines(f"{value!r}\n" for value in estimates)


def read_estimates(path: str | PathLike[str]) -> list[float]:
    """Read the estimates written by :func:`write_estimates`."""
    with open(path, encoding="utf-8") as fh:
        return [float(token) for token in fh.read().split()]


def _histogram(values: Sequence[float], nbins: int) -> Histogram:
    low = min(values)
    high = max(values)
    if high == low:
        high = low + 1.0
    hist = Histogram(nbins, low, high + (high - low) * 1e-9)
    hist.fill_all(values)
    return hist


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="numlab-montecarlo", description=__doc__)
    sub = parser.add_subparsers(dest="command", required=True)
    gen = sub.add_parser("generate", help="write repeated estimates to files")
    gen.add_argument("--repeats", type=int, default=10000)
    gen.add_argument("--seed", type=int, default=1)
    hist = sub.add_parser("histogram", help="summarise the written estimates")
    hist.add_argument("--bins", type=int, default=30)
    for p in (gen, hist):
        p.add_argument("--directory", type=Path, default=Path("."))
        p.add_argument("--points", type=int, nargs="+", default=list(DEFAULT_POINTS))
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    paths = [args.directory / f"{i}.txt" for i in range(1, len(args.points) + 1)]

    if args.command == "generate":
        integrator = MeanIntegrator(args.seed)
        f = XSinX()
        for path, points in zip(paths, args.points):
            try:
                write_estimates(
                    path, repeated_estimates(integrator, f, points, args.repeats)
                )
            except OSError as exc:
                print(f"Errore apertura del file {path}: {exc}", file=sys.stderr)
                return 1
            print(f"File {path} creato correttamente")
        return 0

    for path, points in zip(paths, args.points):
        try:
            values = read_estimates(path)
        except OSError:
            print(f"Errore apertura file : {path}", file=sys.stderr)
            return 1
        if not values:
            print(f"File vuoto : {path}", file=sys.stderr)
            return 1
        print(f"N = {points}")
        print(f"media {mean(values):.6g} sigma {math.sqrt(variance(values)):.6g}")
        hist = _histogram(values, args.bins)
        for edge, count in zip(hist.bin_edges(), hist.counts):
            print(f"{edge:12.6g} {count}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())