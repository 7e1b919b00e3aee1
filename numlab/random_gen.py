"""Linear congruential pseudo-random generator with common distributions."""

from __future__ import annotations

import math
from collections.abc import Iterator

_DEFAULT_A = 1664525
_DEFAULT_C = 1013904223
_DEFAULT_M = 1 << 31
_UINT_MASK = 0xFFFFFFFF


class RandomGen:
    """Linear congruential generator working in 32-bit unsigned arithmetic.

    The multiplier ``a``, increment ``c`` and modulus ``m`` are public
    attributes and may be changed after construction.
    """

    def __init__(self, seed: int) -> None:
        self.seed = seed & _UINT_MASK
        self.a = _DEFAULT_A
        self.c = _DEFAULT_C
        self.m = _DEFAULT_M

    def rand(self) -> float:
        """Advance the state and return a uniform number in [0, 1)."""
        self.seed = ((self.seed * self.a + self.c) & _UINT_MASK) % self.m
        return self.seed / self.m

    def __iter__(self) -> Iterator[float]:
        while True:
            yield self.rand()

    def unif(self, xmin: float, xmax: float) -> float:
        """Return a uniform number in [xmin, xmax)."""
        return xmin + (xmax - xmin) * self.rand()

    def exp(self, lam: float) -> float:
        """Return an exponentially distributed number with rate ``lam``."""
        return -math.log(1 - self.rand()) / lam

    def gaus(self, mean: float, sigma: float) -> float:
        """Return a normal number using the Box-Muller transform."""
        s = self.rand()
        t = self.rand()
        x = math.sqrt(-2.0 * math.log(1.0 - s)) * math.cos(2.0 * math.pi * t)
        return mean + x * sigma

    def gaus_ar(self, mean: float, sigma: float, fmax: float) -> float:
        """Return a normal number by accept-reject within mean +/- 3 sigma.

        ``fmax`` is the height of the bounding box; it should not be below
        the peak of the density.
        """
        norm = 1 / (math.sqrt(2 * math.pi) * sigma)
        while True:
            x = self.unif(mean - 3 * sigma, mean + 3 * sigma)
            y = self.unif(0, fmax)
            if y <= norm * math.exp(-0.5 * ((x - mean) / sigma) ** 2):
                return x