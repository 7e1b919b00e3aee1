"""Right-hand sides of ordinary differential equations and one-step integrators."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from numlab.vectors import scale, vadd

VectorField = Callable[[float, Sequence[float]], Sequence[float]]


class VectorFunction(ABC):
    """The right-hand side f(t, x) of a first-order system dx/dt = f(t, x)."""

    @abstractmethod
    def eval(self, t: float, x: Sequence[float]) -> list[float]:
        """Return the derivatives of the state ``x`` at time ``t``."""

    def __call__(self, t: float, x: Sequence[float]) -> list[float]:
        return self.eval(t, x)


@dataclass(frozen=True)
class HarmonicOscillator(VectorFunction):
    """x'' = -omega0**2 * x, with state (x, v)."""

    omega0: float

    def eval(self, t: float, x: Sequence[float]) -> list[float]:
        return [x[1], -(self.omega0**2) * x[0]]


@dataclass(frozen=True)
class Pendulum(VectorFunction):
    """theta'' = omega0 * sin(theta), with state (theta, omega).

    For a physical pendulum ``omega0`` is negative, -g/l.
    """

    omega0: float

    def eval(self, t: float, x: Sequence[float]) -> list[float]:
        return [x[1], self.omega0 * math.sin(x[0])]


@dataclass(frozen=True)
class ForcedOscillator(VectorFunction):
    """Damped oscillator driven by sin(omega*t).

    x'' = -omega0**2 * x - alpha * x' + sin(omega * t), with state (x, v).
    """

    omega0: float
    omega: float
    alpha: float

    def eval(self, t: float, x: Sequence[float]) -> list[float]:
        velocity = x[1]
        return [
            velocity,
            -(self.omega0**2) * x[0] - self.alpha * velocity + math.sin(self.omega * t),
        ]


class Stepper(ABC):
    """A method advancing the state of a system by one time step."""

    @abstractmethod
    def step(
        self, t: float, x: Sequence[float], h: float, f: VectorField
    ) -> list[float]:
        """Return the state at ``t + h`` given the state ``x`` at ``t``."""


class Euler(Stepper):
    """Explicit Euler method, first order."""

    def step(
        self, t: float, x: Sequence[float], h: float, f: VectorField
    ) -> list[float]:
        return vadd(x, scale(h, f(t, x)))


class RungeKutta(Stepper):
    """Classical fourth-order Runge-Kutta method."""

    def step(
        self, t: float, x: Sequence[float], h: float, f: VectorField
    ) -> list[float]:
        k1 = f(t, x)
        k2 = f(t + h / 2, vadd(x, scale(h / 2, k1)))
        k3 = f(t + h / 2, vadd(x, scale(h / 2, k2)))
        k4 = f(t + h, vadd(x, scale(h, k3)))
        total = vadd(vadd(vadd(k1, scale(2.0, k2)), scale(2.0, k3)), k4)
        return vadd(x, scale(h / 6, total))