"""Integrate oscillators and pendulums with Runge-Kutta and study the results."""

from __future__ import annotations

import argparse
import math
from collections.abc import Callable, Sequence
from typing import NamedTuple

from numlab.ode import ForcedOscillator, HarmonicOscillator, Pendulum, RungeKutta, Stepper

_MAX_PERIOD_STEPS = 1_000_000


class TrajectoryPoint(NamedTuple):
    t: float
    state: list[float]


def format_step(h: float) -> str:
    """Fixed-point text of ``h`` with as many decimals as -log10(h), truncated.

    Values above 10 have no such count of decimals and get six.
    """
    if h <= 0:
        raise ValueError(f"step must be positive, got {h}")
    digits = int(-math.log10(h))
    if digits < 0:
        digits = 6
    return f"{h:.{digits}f}"


def check_value(val: float, values: Sequence[float], epsilon: float) -> bool:
    """True when ``val`` is within ``epsilon`` of one of ``values``."""
    return any(abs(v - val) < epsilon for v in values)


def integrate_trajectory(
    stepper: Stepper,
    f: Callable[[float, Sequence[float]], Sequence[float]],
    x0: Sequence[float],
    h: float,
    tmax: float,
) -> list[TrajectoryPoint]:
    """States from t = 0 in steps of ``h`` up to about ``tmax``.

    The number of steps is tmax/h rounded to the nearest integer; the
    initial state is the first point.
    """
    if h <= 0:
        raise ValueError(f"step must be positive, got {h}")
    nstep = int(tmax / h + 0.5)
    t = 0.0
    x = list(x0)
    points = [TrajectoryPoint(t, x)]
    for _ in range(nstep):
        x = stepper.step(t, x, h, f)
        t += h
        points.append(TrajectoryPoint(t, x))
    return points


def pendulum_period(amplitude: float, omega0: float, h: float = 0.1) -> float:
    """Period of a pendulum released at rest from angle -``amplitude``.

    The motion is integrated until the angular velocity turns negative;
    the time of that inversion, linearly interpolated, is half a period.
    ``omega0`` is the coefficient of sin(theta), -g/l for a real pendulum.
    """
    if amplitude <= 0:
        raise ValueError(f"amplitude must be positive, got {amplitude}")
    if h <= 0:
        raise ValueError(f"step must be positive, got {h}")
    stepper = RungeKutta()
    f = Pendulum(omega0)
    x = [-amplitude, 0.0]
    t = 0.0
    v = 0.0
    steps = 0
    while x[1] >= 0:
        if steps >= _MAX_PERIOD_STEPS:
            raise RuntimeError("the pendulum never turned back")
        v = x[1]
        x = stepper.step(t, x, h, f)
        t += h
        steps += 1
    t -= v * h / (x[1] - v)
    return 2 * t


def forcing_frequencies(start: float, end: float, step: float) -> list[float]:
    """Values from ``start`` to ``end`` (included) in increments of ``step``."""
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    values = []
    value = start
    while value <= end + step / 2:
        values.append(value)
        value += step
    return values


def _rk_errors(tmax: float, rounds: int) -> list[tuple[float, float]]:
    rows = []
    f = HarmonicOscillator(1.0)
    stepper = RungeKutta()
    for i in range(rounds):
        h = 0.1 * 0.5**i
        final = integrate_trajectory(stepper, f, [0.0, 1.0], h, tmax)[-1]
        rows.append((h, abs(final.state[0] - math.sin(final.t))))
    return rows


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="numlab-ode", description=__doc__)
    sub = parser.add_subparsers(dest="command", required=True)

    osc = sub.add_parser("oscillator", help="harmonic oscillator and its error")
    osc.add_argument("h", type=float)
    osc.add_argument("--tmax", type=float, default=70.0)
    osc.add_argument("--rounds", type=int, default=10)

    pend = sub.add_parser("pendulum", help="period of a pendulum against amplitude")
    pend.add_argument("--h", type=float, default=0.1)
    pend.add_argument("--count", type=int, default=30)
    pend.add_argument("--g", type=float, default=9.8067)
    pend.add_argument("--length", type=float, default=1.0)

    forced = sub.add_parser("forced", help="damped oscillator driven by sin(omega*t)")
    forced.add_argument("--omega", type=float)
    forced.add_argument("--h", type=float, default=0.01)
    forced.add_argument("--tmax", type=float, default=300.0)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _parser()
    args = parser.parse_args(argv)

    if args.command == "oscillator":
        if args.h <= 0:
            parser.error("il passo deve essere positivo")
        print(f"Oscillatore armonico (RungeKutta h = {format_step(args.h)})")
        for point in integrate_trajectory(
            RungeKutta(), HarmonicOscillator(1.0), [0.0, 1.0], args.h, args.tmax
        ):
            print(f"{point.t:.6g} {point.state[0]:.6g}")
        print("Errore Oscillatore armonico (RungeKutta)")
        for h, err in _rk_errors(args.tmax, args.rounds):
            print(f"{h:.6g} {err:.6g}")
        return 0

    if args.command == "pendulum":
        if args.h <= 0 or args.length <= 0:
            parser.error("passo e lunghezza devono essere positivi")
        omega0 = -(args.g / args.length)
        print("Ampiezza Periodo")
        for i in range(args.count):
            amplitude = 0.1 * (i + 1)
            period = pendulum_period(amplitude, omega0, args.h)
            print(f"{amplitude:.6g} {period:.6g}")
        return 0

    if args.h <= 0:
        parser.error("il passo deve essere positivo")
    omega0 = 10.0
    alpha = 1.0 / 30.0
    frequencies = forcing_frequencies(9.0, 11.0, 0.05)
    stepper = RungeKutta()

    if args.omega is not None:
        if not check_value(args.omega, frequencies, 1e-5):
            parser.error("Valore non valido: inserire un valore tra 9 e 11 con passo 0.05")
        print(
            "Oscillatore armonico smorzato (pulsazione forzante = "
            f"{format_step(args.omega)})"
        )
        for point in integrate_trajectory(
            stepper, ForcedOscillator(omega0, args.omega, alpha), [0.0, 0.0],
            args.h, args.tmax,
        ):
            print(f"{point.t:.6g} {point.state[0]:.6g}")
        return 0

    print("Omega Ampiezza")
    for omega in frequencies:
        points = integrate_trajectory(
            stepper, ForcedOscillator(omega0, omega, alpha), [0.0, 0.0],
            args.h, args.tmax,
        )
        peak = max(abs(p.state[0]) for p in points)
        print(f"{omega:.2f} {peak:.6g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())