"""
Small numeric helpers used when laying out tensors.

These functions are pure and operate on Python scalars and flat sequences.
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple


def clamp(lo: float, x: float, hi: float) -> float:
    """Clamp `x` to the closed range ``[lo, hi]``."""
    return max(lo, min(x, hi))


def nearest_larger_even(val: int) -> int:
    """Return `val` if it is even, else ``val + 1``."""
    return val if val % 2 == 0 else val + 1


def is_int(a: float) -> bool:
    """Return True if `a` has no fractional part."""
    return a % 1 == 0


def dist_squared(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Squared Euclidean distance between two vectors.

    Only the first ``len(a)`` components are compared; `b` must be at
    least as long as `a`.
    """
    result = 0.0
    for i in range(len(a)):
        diff = float(a[i]) - float(b[i])
        result += diff * diff
    return result


def size_to_squarish_shape(size: int) -> Tuple[int, int]:
    """
    Factor `size` into the 2D shape closest to a square.

    Returns ``(rows, cols)`` with ``rows <= cols`` and ``rows * cols ==
    size``; prime sizes yield ``(1, size)``.
    """
    for a in range(math.isqrt(size), 1, -1):
        if size % a == 0:
            return a, size // a
    return 1, size


def nearest_divisor(size: int, start: int) -> int:
    """Smallest divisor of `size` that is ``>= start``, or `size` itself."""
    for i in range(start, size):
        if size % i == 0:
            return i
    return size
