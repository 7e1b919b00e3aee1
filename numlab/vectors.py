"""Component-wise arithmetic on sequences of numbers treated as vectors."""

from __future__ import annotations

import math
from collections.abc import MutableSequence, Sequence


def _check_sizes(a: Sequence[float], b: Sequence[float]) -> None:
    if len(a) != len(b):
        raise ValueError(
            f"vectors of different size: {len(a)} and {len(b)}"
        )


def vadd(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """Component-wise sum of two vectors of equal length."""
    _check_sizes(a, b)
    return [x + y for x, y in zip(a, b)]


def vsub(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """Component-wise difference of two vectors of equal length."""
    _check_sizes(a, b)
    return [x - y for x, y in zip(a, b)]


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Scalar product of two vectors of equal length."""
    _check_sizes(a, b)
    return math.fsum(x * y for x, y in zip(a, b))


def scale(c: float, a: Sequence[float]) -> list[float]:
    """Product of the scalar ``c`` and the vector ``a``."""
    return [c * x for x in a]


def divide(a: Sequence[float], c: float) -> list[float]:
    """Each component of ``a`` divided by the scalar ``c``."""
    return [x / c for x in a]


def add_inplace(a: MutableSequence[float], b: Sequence[float]) -> MutableSequence[float]:
    """Add ``b`` to ``a`` component by component, in place, and return ``a``."""
    _check_sizes(a, b)
    for i, y in enumerate(b):
        a[i] += y
    return a


def sub_inplace(a: MutableSequence[float], b: Sequence[float]) -> MutableSequence[float]:
    """Subtract ``b`` from ``a`` component by component, in place, and return ``a``."""
    _check_sizes(a, b)
    for i, y in enumerate(b):
        a[i] -= y
    return a


def format_vector(v: Sequence[float]) -> str:
    """Text listing of a vector between a header and a footer line."""
    body = "".join(f"{x:g} " for x in v)
    return f"Printing vector\n{body}\nEnd of printing vector"