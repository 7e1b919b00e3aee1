"""Real functions of one real variable, used by the solvers and integrators."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass


class Function(ABC):
    """A real function of one real variable."""

    @abstractmethod
    def eval(self, x: float) -> float:
        """Return the value of the function at ``x``."""

    def __call__(self, x: float) -> float:
        return self.eval(x)


class XSinX(Function):
    """The function x * sin(x)."""

    def eval(self, x: float) -> float:
        return x * math.sin(x)


@dataclass
class Parabola(Function):
    """The parabola a*x**2 + b*x + c."""

    a: float = 0.0
    b: float = 0.0
    c: float = 0.0

    def eval(self, x: float) -> float:
        return self.a * x * x + self.b * x + self.c

    def vertex(self) -> float:
        """Return the abscissa of the vertex."""
        if self.a == 0:
            raise ZeroDivisionError("a parabola with a == 0 has no vertex")
        return -self.b / (2 * self.a)


class Sign(Function):
    """The sign function: -1, 0 or 1."""

    def eval(self, x: float) -> float:
        if x == 0.0:
            return 0.0
        return 1.0 if x > 0.0 else -1.0


@dataclass
class TanEquation(Function):
    """sin(x) - x*cos(x), whose zeros are the solutions of tan(x) = x."""

    prec: float = 1e-6

    def eval(self, x: float) -> float:
        return math.sin(x) - x * math.cos(x)