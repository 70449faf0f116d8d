"""
Seedable random helpers.

Each function takes an optional ``numpy.random.Generator``. Passing one
makes results reproducible; omitting it draws from a fresh, OS-seeded
generator so no module-level random state is shared.
"""

from __future__ import annotations

from typing import Any, MutableSequence, Optional

import numpy as np


def _rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def shuffle(array: MutableSequence[Any], rng: Optional[np.random.Generator] = None) -> None:
    """
    Shuffle `array` in place with the Fisher-Yates algorithm.

    Works on lists and 1-D ndarrays alike.
    """
    gen = _rng(rng)
    counter = len(array)
    while counter > 0:
        index = int(gen.integers(0, counter))
        counter -= 1
        array[counter], array[index] = array[index], array[counter]


def create_shuffled_indices(n: int, rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """Return a ``uint32`` permutation of ``0 .. n-1``."""
    indices = np.arange(n, dtype=np.uint32)
    shuffle(indices, rng)
    return indices


def rand_uniform(a: float, b: float, rng: Optional[np.random.Generator] = None) -> float:
    """Sample from the half-open uniform distribution ``[a, b)``."""
    r = float(_rng(rng).random())
    return b * r + (1 - r) * a
