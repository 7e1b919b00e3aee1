"""Numerical quadrature: deterministic rules and Monte Carlo estimates."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Callable

from numlab.random_gen import RandomGen

RealFunction = Callable[[float], float]


class Integral(ABC):
    """Base of fixed-step quadrature rules over an interval.

    The interval ends are stored in ascending order; when they were given
    reversed, the result changes sign.
    """

    def __init__(self, a: float, b: float) -> None:
        self.a = min(a, b)
        self.b = max(a, b)
        self.sign = -1 if a > b else 1
        self.nstep = 0
        self.h = 0.0
        self.sum = 0.0
        self.integral = 0.0

    def _prepare(self, nstep: int) -> None:
        if nstep <= 0:
            raise ValueError(f"number of steps must be positive, got {nstep}")
        self.nstep = nstep
        self.h = (self.b - self.a) / nstep

    def _finish(self, weighted_sum: float) -> float:
        self.sum = weighted_sum
        self.integral = self.sign * weighted_sum * self.h
        return self.integral

    @abstractmethod
    def integrate(self, nstep: int, f: RealFunction) -> float:
        """Return the integral of ``f`` computed with ``nstep`` steps."""

    def integrate_to_precision(self, prec: float, f: RealFunction) -> tuple[float, int]:
        """Double the steps until the error estimate is at most ``prec``.

        The error is estimated as 4/3 of the difference between the results
        with N and 2N steps. Returns the 2N-step result and N.
        """
        if prec <= 0:
            raise ValueError(f"precision must be positive, got {prec}")
        steps = 1
        coarse = self.integrate(steps, f)
        fine = self.integrate(steps * 2, f)
        while 4.0 / 3.0 * abs(fine - coarse) > prec:
            steps *= 2
            coarse = fine
            fine = self.integrate(steps * 2, f)
        return fine, steps


class MidPoint(Integral):
    """Midpoint rule."""

    def integrate(self, nstep: int, f: RealFunction) -> float:
        self._prepare(nstep)
        total = math.fsum(f(self.a + (i + 0.5) * self.h) for i in range(nstep))
        return self._finish(total)


class Simpson(Integral):
    """Composite Simpson rule, weights 1/3, 4/3, 2/3, ..., 4/3, 1/3."""

    def _weight(self, i: int) -> float:
        if i == 0 or i == self.nstep:
            return 1.0 / 3.0
        return 4.0 / 3.0 if i % 2 else 2.0 / 3.0

    def integrate(self, nstep: int, f: RealFunction) -> float:
        self._prepare(nstep)
        total = math.fsum(
            self._weight(i) * f(self.a + i * self.h) for i in range(nstep + 1)
        )
        return self._finish(total)


class Trapezoid(Integral):
    """Composite trapezoidal rule."""

    def integrate(self, nstep: int, f: RealFunction) -> float:
        self._prepare(nstep)
        total = math.fsum(
            f(self.a + i * self.h) * (0.5 if i in (0, nstep) else 1.0)
            for i in range(nstep + 1)
        )
        return self._finish(total)


class MonteCarloIntegrator(ABC):
    """Base of Monte Carlo integrators, owning a seeded generator.

    After each estimate ``error`` holds its statistical uncertainty and
    ``points`` the number of points used.
    """

    def __init__(self, seed: int) -> None:
        self.gen = RandomGen(seed)
        self.error = 0.0
        self.points = 0

    @abstractmethod
    def integrate(
        self,
        f: RealFunction,
        inf: float,
        sup: float,
        points: int,
        fmax: float = 0.0,
    ) -> float:
        """Estimate the integral of ``f`` over [inf, sup] with ``points`` draws."""


class MeanIntegrator(MonteCarloIntegrator):
    """Mean-value method: the interval width times the mean of ``f``."""

    def integrate(
        self,
        f: RealFunction,
        inf: float,
        sup: float,
        points: int,
        fmax: float = 0.0,
    ) -> float:
        if points < 2:
            raise ValueError(f"at least two points are needed, got {points}")
        width = sup - inf
        values = [f(self.gen.unif(inf, sup)) for _ in range(points)]
        average = math.fsum(values) / points
        spread = math.sqrt(math.fsum((v - average) ** 2 for v in values) / (points - 1))
        self.error = spread * width / math.sqrt(points)
        self.points = points
        return average * width