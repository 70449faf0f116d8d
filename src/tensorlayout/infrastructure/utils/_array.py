"""
Traversal helpers for arbitrarily nested tensor input.

Lists, tuples and NumPy arrays are treated as containers; everything else
(including ``str``) is a scalar leaf.
"""

from __future__ import annotations

from typing import Any, List, Optional

import numpy as np

from ...domain.types._buffer import NestedSequence

_CONTAINERS = (list, tuple, np.ndarray)


def is_nested_container(value: Any) -> bool:
    return isinstance(value, _CONTAINERS)


def flatten(values: NestedSequence, out: Optional[List[Any]] = None) -> List[Any]:
    """
    Flatten nested input depth-first, left to right.

    Parameters
    ----------
    values : NestedSequence
        A scalar or a (possibly ragged) nesting of lists, tuples and
        ndarrays.
    out : list, optional
        Accumulator to append to. A new list is created when omitted.

    Returns
    -------
    list
        `out`, with every scalar of `values` appended in traversal order.
        A bare scalar yields a one-element list.
    """
    if out is None:
        out = []
    if isinstance(values, np.ndarray):
        out.extend(values.ravel().tolist())
    elif isinstance(values, (list, tuple)):
        for v in values:
            flatten(v, out)
    else:
        out.append(values)
    return out


def first_element(values: NestedSequence) -> Any:
    """
    Descend into index 0 until a non-container is reached.

    Returns ``None`` when an empty container is met on the way down.
    """
    while is_nested_container(values):
        if isinstance(values, np.ndarray) and values.ndim == 0:
            return values.item()
        if len(values) == 0:
            return None
        values = values[0]
    return values
