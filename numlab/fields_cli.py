"""Electric field of a hydrogen-like dipole, and the solutions of tan(x) = x."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Sequence

from numlab.functions import TanEquation
from numlab.geometry import MaterialPoint, Position, VectorField
from numlab.roots import Bisection

ELEMENTARY_CHARGE = 1.60217653e-19
ELECTRON_MASS = 9.1093826e-31
PROTON_MASS = 1.6726219e-27
DIPOLE_DISTANCE = 1.0e-10


def dipole_field(p: Position) -> VectorField:
    """Field at ``p`` of an electron at z = d/2 and a proton at z = -d/2."""
    electron = MaterialPoint(
        ELECTRON_MASS, -ELEMENTARY_CHARGE, 0.0, 0.0, DIPOLE_DISTANCE / 2
    )
    proton = MaterialPoint(PROTON_MASS, ELEMENTARY_CHARGE, 0.0, 0.0, -DIPOLE_DISTANCE / 2)
    return electron.electric_field(p) + proton.electric_field(p)


def tan_search_intervals(nmin: int, nmax: int) -> list[tuple[float, float]]:
    """The intervals [i*pi, (i+1)*pi] for i from ``nmin`` to ``nmax``."""
    if nmin < 1:
        raise ValueError(f"nmin must be at least 1, got {nmin}")
    return [(i * math.pi, i * math.pi + math.pi) for i in range(nmin, nmax + 1)]


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="numlab-fields", description=__doc__)
    sub = parser.add_subparsers(dest="command", required=True)
    dipole = sub.add_parser("dipole", help="electric field of the dipole at a point")
    for axis in ("x", "y", "z"):
        dipole.add_argument(axis, type=float)
    tan = sub.add_parser("tan", help="solutions of tan(x) = x by bisection")
    tan.add_argument("precision", type=float)
    tan.add_argument("nmin", type=int)
    tan.add_argument("nmax", type=int)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _parser()
    args = parser.parse_args(argv)

    if args.command == "dipole":
        try:
            field = dipole_field(Position(args.x, args.y, args.z))
        except ValueError as exc:
            print(f"Errore: {exc}", file=sys.stderr)
            return 1
        print("Campo elettrico generato dal dipolo: ")
        print(f"E= ({field.fx:g} ,{field.fy:g} ,{field.fz:g})")
        return 0

    if args.precision <= 0:
        parser.error("la precisione deve essere positiva")
    try:
        intervals = tan_search_intervals(args.nmin, args.nmax)
    except ValueError:
        parser.error("il valore minimo di nMin consentito è 1")
    solver = Bisection(args.precision, args.nmax, args.nmin)
    equation = TanEquation(args.precision)
    for a, b in intervals:
        root = solver.find_zero_by_width(a, b, equation, args.precision)
        print(f"[{a:.6g}, {b:.6g}] x = {root:.12g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())