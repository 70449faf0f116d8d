"""
Dtype properties: storage width, lossy re-encoding, and inference.
"""

from __future__ import annotations

from typing import Any, Optional

import numpy as np
from typing_extensions import assert_never

from ...domain._dtype import DType, DTypeLike
from ...domain._errors import UnknownDtypeError
from ...domain.types._buffer import NestedSequence
from ...domain.utils._predicates import is_boolean, is_number, is_string
from ..utils._array import first_element

_PACKED_STORAGE = (np.float32, np.int32, np.uint8)


def has_encoding_loss(old_type: DTypeLike, new_type: DTypeLike) -> bool:
    """
    Return True if `new_type` cannot encode every value of `old_type`.

    The rules are evaluated in order; the first match wins:

    1. complex64 target: no loss.
    2. float32 target from anything but complex64: no loss.
    3. int32 target from anything but float32/complex64: no loss.
    4. bool to bool: no loss.
    5. Everything else is lossy (string targets included).
    """
    old = DType.parse(old_type)
    new = DType.parse(new_type)
    if new is DType.COMPLEX64:
        return False
    if new is DType.FLOAT32 and old is not DType.COMPLEX64:
        return False
    if new is DType.INT32 and old is not DType.FLOAT32 and old is not DType.COMPLEX64:
        return False
    if new is DType.BOOL and old is DType.BOOL:
        return False
    return True


def bytes_per_element(dtype: DTypeLike) -> int:
    """
    Storage width of one element of `dtype`, in bytes.

    Raises
    ------
    UnknownDtypeError
        For ``string`` (variable width, tracked separately) or an
        unrecognized tag.
    """
    dt = DType.parse(dtype)
    if dt is DType.FLOAT32 or dt is DType.INT32:
        return 4
    elif dt is DType.COMPLEX64:
        return 8
    elif dt is DType.BOOL:
        return 1
    elif dt is DType.STRING:
        raise UnknownDtypeError(dtype)
    else:
        assert_never(dt)


def is_typed_array(value: Any) -> bool:
    """Return True if `value` is a 1-D ndarray with a packed buffer type."""
    return (
        isinstance(value, np.ndarray)
        and value.ndim == 1
        and any(value.dtype == t for t in _PACKED_STORAGE)
    )


def _infer_from_array(arr: np.ndarray) -> Optional[DType]:
    kind = arr.dtype.kind
    if kind == "f":
        return DType.FLOAT32
    if kind in "iu":
        return DType.INT32
    if kind == "b":
        return DType.BOOL
    if kind == "c":
        return DType.COMPLEX64
    return None


def infer_dtype(values: NestedSequence) -> DType:
    """
    Infer the dtype of tensor input.

    Numeric ndarrays map by element kind (floating to float32, signed or
    unsigned integer to int32, bool to bool, complex to complex64). Any
    other input is classified by its first element, reached by repeatedly
    descending into index 0: numbers give float32, strings give string,
    booleans give bool. Undeterminable input (e.g. empty lists) defaults
    to float32.
    """
    if isinstance(values, np.ndarray):
        dt = _infer_from_array(values)
        if dt is not None:
            return dt

    first = first_element(values)
    if is_number(first):
        return DType.FLOAT32
    if is_string(first):
        return DType.STRING
    if is_boolean(first):
        return DType.BOOL
    return DType.FLOAT32
