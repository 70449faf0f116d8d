"""
Conversion of nested/flat input into dtype-correct backing buffers.

`convert` is the single entry point used by tensor construction to turn
user data (nested lists, tuples, ndarrays or scalars) into the packed
buffer of a target dtype. The NaN checks live here as well since they
guard the same boundary:

- `check_conversion_for_nan`: NaN is illegal input for non-float dtypes.
- `check_computation_for_nan`: NaN in a float32 *result* signals a defect
  in the computation that produced it.

Storage semantics
-----------------
- float32 / complex64: float32 narrowing (overflow saturates to +/-inf).
- int32: truncation toward zero; NaN and +/-inf become 0; out-of-range
  values wrap modulo 2**32 into the signed range.
- bool: round half up, then 0 -> 0 and everything else (NaN included) -> 1.
"""

from __future__ import annotations

import logging
import numbers
from typing import Any, Optional

import numpy as np
from typing_extensions import assert_never

from ...domain._dtype import DType, DTypeLike
from ...domain._errors import (
    ComputationProducedNaNError,
    InvalidConversionError,
    UnsupportedConversionError,
)
from ...domain.types._buffer import NestedSequence
from .._config import is_debug_mode
from ..utils._array import flatten

logger = logging.getLogger(__name__)

_INT32_RANGE = 2.0**32
_INT32_LIMIT = 2.0**31


def _flat_values(values: NestedSequence) -> Any:
    if isinstance(values, np.ndarray):
        return values.ravel()
    return flatten(values)


def _first_nan_index(values: NestedSequence) -> Optional[int]:
    """Index of the first NaN in the flattened `values`, or None."""
    arr = np.asarray(_flat_values(values))
    kind = arr.dtype.kind
    if kind in "fc":
        hits = np.flatnonzero(np.isnan(arr))
        return int(hits[0]) if hits.size else None
    if kind == "O":
        for i, v in enumerate(arr):
            if isinstance(v, numbers.Number) and not isinstance(v, numbers.Integral):
                if v != v:
                    return i
    return None


def check_computation_for_nan(
    values: NestedSequence, dtype: Optional[DTypeLike], name: str
) -> None:
    """
    Fail if a float32 computation produced NaN.

    Only float32 results are scanned; for other dtypes this is a no-op.

    Parameters
    ----------
    values : NestedSequence
        Result values of the computation.
    dtype : DType | str | None
        Dtype of the result.
    name : str
        Computation name, used in the error message.

    Raises
    ------
    ComputationProducedNaNError
        On the first NaN found.
    """
    if DType.parse(dtype) is not DType.FLOAT32:
        return
    idx = _first_nan_index(values)
    if idx is not None:
        raise ComputationProducedNaNError(name, idx)


def check_conversion_for_nan(values: NestedSequence, dtype: Optional[DTypeLike]) -> None:
    """
    Fail if NaN is being converted into a dtype that cannot hold it.

    NaN is a legal float32 value, and string buffers are not numeric, so
    both are no-ops.

    Raises
    ------
    InvalidConversionError
        If any value is NaN and `dtype` is int32, bool or complex64.
    """
    dt = DType.parse(dtype)
    if dt is DType.FLOAT32 or dt is DType.STRING:
        return
    idx = _first_nan_index(values)
    if idx is not None:
        raise InvalidConversionError(dt, idx)


def _no_conversion_needed(values: Any, dt: DType) -> bool:
    if not isinstance(values, np.ndarray):
        return False
    if values.ndim != 1 or not values.flags.c_contiguous:
        return False
    return (
        (dt is DType.FLOAT32 and values.dtype == np.float32)
        or (dt is DType.INT32 and values.dtype == np.int32)
        or (dt is DType.BOOL and values.dtype == np.uint8)
    )


def _to_float32(flat: Any) -> np.ndarray:
    with np.errstate(over="ignore"):
        return np.array(flat, dtype=np.float32)


def _to_int32(flat: Any) -> np.ndarray:
    f = np.array(flat, dtype=np.float64)
    t = np.trunc(f)
    t[~np.isfinite(t)] = 0.0
    t = np.mod(t, _INT32_RANGE)
    t[t >= _INT32_LIMIT] -= _INT32_RANGE
    return t.astype(np.int32)


def _to_bool(flat: Any) -> np.ndarray:
    f = np.array(flat, dtype=np.float64)
    rounded = np.floor(f + 0.5)
    return (rounded != 0).astype(np.uint8)


def convert(
    values: NestedSequence,
    dtype: Optional[DTypeLike],
    strict: Optional[bool] = None,
) -> np.ndarray:
    """
    Convert arbitrary numeric input into the backing buffer of `dtype`.

    Parameters
    ----------
    values : NestedSequence
        A scalar, a flat sequence, a nesting of lists/tuples, or an ndarray.
    dtype : DType | str | None
        Target dtype (``None`` selects float32).
    strict : bool, optional
        Enable NaN validation for int32 targets. Defaults to the configured
        debug mode (see `is_debug_mode`).

    Returns
    -------
    np.ndarray
        A one-dimensional buffer. If `values` already is a contiguous 1-D
        buffer of the right storage type it is returned as-is (no copy);
        otherwise the result is a new array.

    Raises
    ------
    UnsupportedConversionError
        If `dtype` is ``string``.
    InvalidConversionError
        In strict mode, if an int32 conversion meets NaN.
    UnknownDtypeError
        If `dtype` is not recognized.
    """
    dt = DType.parse(dtype)
    if dt is DType.STRING:
        raise UnsupportedConversionError(dt)

    if _no_conversion_needed(values, dt):
        logger.debug("convert: reusing %s buffer of %d elements", dt, len(values))
        return values

    flat = _flat_values(values)
    logger.debug("convert: copying %d values into a new %s buffer", len(flat), dt)

    if dt is DType.FLOAT32 or dt is DType.COMPLEX64:
        return _to_float32(flat)
    elif dt is DType.INT32:
        if strict is None:
            strict = is_debug_mode()
        if strict:
            check_conversion_for_nan(flat, dt)
        return _to_int32(flat)
    elif dt is DType.BOOL:
        return _to_bool(flat)
    else:
        assert_never(dt)
