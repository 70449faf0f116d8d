"""
Scalar-kind predicates and string helpers.

Dtype inference relies on these to classify the first element of nested
input. Note that Python's ``bool`` is a subclass of ``int``: `is_number`
therefore rejects booleans so the two kinds stay disjoint.
"""

from __future__ import annotations

import numbers
from typing import Any, Optional, Sequence


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_boolean(value: Any) -> bool:
    # numpy's bool scalar does not subclass bool
    return isinstance(value, bool) or type(value).__name__ in ("bool", "bool_")


def is_number(value: Any) -> bool:
    return isinstance(value, numbers.Number) and not is_boolean(value)


def right_pad(a: str, size: int) -> str:
    """Pad `a` with spaces on the right up to `size` characters."""
    if size <= len(a):
        return a
    return a + " " * (size - len(a))


def bytes_from_string_array(arr: Optional[Sequence[str]]) -> int:
    """
    Approximate bytes held by a string buffer, counting 2 per character.

    Returns 0 for ``None``.
    """
    if arr is None:
        return 0
    return sum(len(x) * 2 for x in arr)
