"""Root finding for real functions of one variable."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

RealFunction = Callable[[float], float]


class RootNotBracketedError(ValueError):
    """The function does not change sign between the interval ends."""


class Solver(ABC):
    """Base of root finders, holding the precision and iteration limits."""

    default_nmax = 1000

    def __init__(
        self, prec: float = 0.001, nmax: int | None = None, nmin: int = 1
    ) -> None:
        self.prec = prec
        self.nmax = self.default_nmax if nmax is None else nmax
        self.nmin = nmin
        self.iterations = 0

    @abstractmethod
    def find_zero(
        self,
        xmin: float,
        xmax: float,
        f: RealFunction,
        prec: float | None = None,
        nmax: int | None = None,
    ) -> float:
        """Return an approximate zero of ``f`` in [xmin, xmax]."""


class Bisection(Solver):
    """Root finding by repeated halving of a bracketing interval."""

    default_nmax = 20

    def find_zero(
        self,
        xmin: float,
        xmax: float,
        f: RealFunction,
        prec: float | None = None,
        nmax: int | None = None,
    ) -> float:
        """Halve the interval until ``|f(c)| < prec`` or ``nmax`` steps pass.

        After ``nmax`` steps the last midpoint is returned.
        """
        prec = self.prec if prec is None else prec
        nmax = self.nmax if nmax is None else nmax
        if f(xmax) * f(xmin) >= 0:
            raise RootNotBracketedError(
                f"f does not change sign on [{xmin}, {xmax}]"
            )
        c = (xmin + xmax) / 2
        self.iterations = 0
        for _ in range(nmax):
            c = (xmin + xmax) / 2
            self.iterations += 1
            fc = f(c)
            if abs(fc) < prec:
                return c
            if f(xmin) * fc < 0:
                xmax = c
            else:
                xmin = c
        return c

    def find_zero_by_width(
        self, a: float, b: float, f: RealFunction, prec: float | None = None
    ) -> float:
        """Halve the interval until its half-width is at most ``prec``."""
        prec = self.prec if prec is None else prec
        fa = f(a)
        fb = f(b)
        if fa * fb > 0:
            raise RootNotBracketedError(f"f does not change sign on [{a}, {b}]")
        self.iterations = 0
        while (b - a) / 2 > prec:
            c = (a + b) / 2
            self.iterations += 1
            fc = f(c)
            if fc == 0:
                return c
            if fa * fc < 0:
                b = c
            else:
                a, fa = c, fc
        return (a + b) / 2