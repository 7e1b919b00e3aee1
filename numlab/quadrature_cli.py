"""Integrate x*sin(x) over [0, pi/2] to a precision and tabulate the error."""

from __future__ import annotations

import argparse
import math
from collections.abc import Callable, Sequence
from typing import NamedTuple

from numlab.functions import XSinX
from numlab.integration import Integral, MidPoint, Simpson, Trapezoid

_METHODS: dict[str, type[Integral]] = {
    "midpoint": MidPoint,
    "simpson": Simpson,
    "trapezoid": Trapezoid,
}


class ErrorRow(NamedTuple):
    nstep: int
    h: float
    error: float


def error_table(
    integrator: Integral,
    f: Callable[[float], float],
    nstep: int,
    exact: float = 1.0,
    rounds: int = 10,
) -> list[ErrorRow]:
    """Absolute error of the integral for ``rounds`` step counts, doubling each time."""
    if nstep <= 0:
        raise ValueError(f"number of steps must be positive, got {nstep}")
    rows = []
    for _ in range(rounds):
        value = integrator.integrate(nstep, f)
        rows.append(
            ErrorRow(nstep, (integrator.b - integrator.a) / nstep, abs(value - exact))
        )
        nstep *= 2
    return rows


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="numlab-quadrature", description=__doc__)
    parser.add_argument("precision", type=float)
    parser.add_argument("--method", choices=sorted(_METHODS), default="midpoint")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _parser()
    args = parser.parse_args(argv)
    if args.precision <= 0:
        parser.error("la precisione deve essere positiva")

    f = XSinX()
    integrator = _METHODS[args.method](0, math.pi / 2)
    value, nstep = integrator.integrate_to_precision(args.precision, f)
    print(f"Risultato dell'integrale I = {value:>20g} con nPassi = {nstep:>20}")

    for row in error_table(integrator, f, nstep):
        print(f"Numero passi= {row.nstep:>20}  err= {row.error:>20g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())