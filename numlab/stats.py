"""Descriptive statistics on sequences of numbers, and a fixed-bin histogram."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from os import PathLike


def read_values(path: str | PathLike[str], count: int | None = None) -> list[float]:
    """Read whitespace-separated numbers from a file.

    With ``count`` only the first ``count`` numbers are returned; the file
    must hold at least that many.
    """
    if count is not None and count < 0:
        raise ValueError(f"negative number of values: {count}")
    with open(path, encoding="utf-8") as fh:
        tokens = fh.read().split()
    if count is not None:
        if len(tokens) < count:
            raise ValueError(
                f"{path} holds {len(tokens)} values, {count} were requested"
            )
        tokens = tokens[:count]
    try:
        return [float(token) for token in tokens]
    except ValueError as exc:
        raise ValueError(f"{path} holds a value that is not a number") from exc


def _require_values(values: Sequence[float]) -> None:
    if not values:
        raise ValueError("no values given")


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean."""
    _require_values(values)
    return math.fsum(values) / len(values)


def variance(values: Sequence[float]) -> float:
    """Population variance (divides by the number of values)."""
    m = mean(values)
    return math.fsum((v - m) ** 2 for v in values) / len(values)


def sampled_variance(values: Sequence[float], stride: int = 7) -> float:
    """Variance about the full mean, using only every ``stride``-th value."""
    if stride < 1:
        raise ValueError(f"stride must be positive, got {stride}")
    m = mean(values)
    picked = values[::stride]
    return math.fsum((m - v) ** 2 for v in picked) / len(picked)


def median(values: Iterable[float]) -> float:
    """Median; the mean of the two central values for an even count."""
    ordered = sorted(values)
    _require_values(ordered)
    half = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[half - 1] + ordered[half]) / 2.0
    return ordered[half]


def selection_sort(values: Iterable[float]) -> list[float]:
    """Return the values in ascending order, sorted by repeated selection."""
    remaining = list(values)
    ordered = []
    while remaining:
        smallest = min(remaining)
        remaining.remove(smallest)
        ordered.append(smallest)
    return ordered


def format_numbered(values: Iterable[float]) -> str:
    """One line per value, numbered from 1 as ``"n) value"``."""
    return "\n".join(f"{n}) {v:g}" for n, v in enumerate(values, start=1))


class Histogram:
    """Counts of values in equal-width bins over [low, high).

    Values below ``low`` go to ``underflow``; values at or above ``high``
    go to ``overflow``.
    """

    def __init__(self, nbins: int, low: float, high: float) -> None:
        if nbins < 1:
            raise ValueError(f"number of bins must be positive, got {nbins}")
        if not high > low:
            raise ValueError(f"empty range [{low}, {high})")
        self.nbins = nbins
        self.low = float(low)
        self.high = float(high)
        self.counts = [0] * nbins
        self.underflow = 0
        self.overflow = 0

    @property
    def bin_width(self) -> float:
        return (self.high - self.low) / self.nbins

    @property
    def entries(self) -> int:
        """Number of values filled, including under- and overflow."""
        return sum(self.counts) + self.underflow + self.overflow

    def fill(self, value: float) -> None:
        """Add one value."""
        if math.isnan(value):
            raise ValueError("cannot fill a histogram with NaN")
        if value < self.low:
            self.underflow += 1
        elif value >= self.high:
            self.overflow += 1
        else:
            index = min(int((value - self.low) / self.bin_width), self.nbins - 1)
            self.counts[index] += 1

    def fill_all(self, values: Iterable[float]) -> None:
        """Add every value of an iterable."""
        for value in values:
            self.fill(value)

    def bin_edges(self) -> list[float]:
        """The ``nbins + 1`` bin boundaries from ``low`` to ``high``."""
        width = self.bin_width
        return [self.low + k * width for k in range(self.nbins)] + [self.high]