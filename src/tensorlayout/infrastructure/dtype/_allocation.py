"""
Backing-buffer allocation by dtype.

Every function returns a freshly allocated, one-dimensional, C-contiguous
buffer owned by the caller. Numeric buffers are NumPy arrays with the
packed element type of their dtype:

=========== ==============
dtype       storage
=========== ==============
float32     ``np.float32``
int32       ``np.int32``
bool        ``np.uint8``
complex64   ``np.float32`` (zeros/ones only; see `allocate_zeros`)
string      ``list`` (only via `allocate_array`)
=========== ==============
"""

from __future__ import annotations

from typing import Any, List, Optional, Union

import numpy as np
from typing_extensions import assert_never

from ...domain._dtype import DType, DTypeLike
from ...domain._errors import UnknownDtypeError


def allocate(dtype: Optional[DTypeLike], size: int) -> np.ndarray:
    """
    Allocate a zero-initialized numeric buffer.

    Only the packed numeric dtypes are accepted on this path.

    Parameters
    ----------
    dtype : DType | str | None
        ``float32`` (default when ``None``), ``int32`` or ``bool``.
    size : int
        Number of elements.

    Raises
    ------
    UnknownDtypeError
        For ``string``, ``complex64`` or an unrecognized tag.
    """
    dt = DType.parse(dtype)
    if dt is DType.FLOAT32:
        return np.zeros(size, dtype=np.float32)
    elif dt is DType.INT32:
        return np.zeros(size, dtype=np.int32)
    elif dt is DType.BOOL:
        return np.zeros(size, dtype=np.uint8)
    elif dt is DType.STRING or dt is DType.COMPLEX64:
        raise UnknownDtypeError(dtype)
    else:
        assert_never(dt)


def allocate_array(
    dtype: Optional[DTypeLike], size: int
) -> Union[np.ndarray, List[Any]]:
    """
    Allocate a buffer for any dtype that has a concrete storage form,
    including ``string``.

    String buffers are plain lists of `size` ``None`` slots; the numeric
    dtypes behave exactly like `allocate`.
    """
    dt = DType.parse(dtype)
    if dt is DType.STRING:
        return [None] * size
    return allocate(dt, size)


def allocate_zeros(dtype: Optional[DTypeLike], size: int) -> np.ndarray:
    """
    Allocate an all-zero numeric buffer.

    ``complex64`` is accepted here and shares the float32 storage form; the
    imaginary component is handled by higher layers.

    Raises
    ------
    UnknownDtypeError
        For ``string`` or an unrecognized tag.
    """
    dt = DType.parse(dtype)
    if dt is DType.FLOAT32 or dt is DType.COMPLEX64:
        return np.zeros(size, dtype=np.float32)
    elif dt is DType.INT32:
        return np.zeros(size, dtype=np.int32)
    elif dt is DType.BOOL:
        return np.zeros(size, dtype=np.uint8)
    elif dt is DType.STRING:
        raise UnknownDtypeError(dtype)
    else:
        assert_never(dt)


def allocate_ones(dtype: Optional[DTypeLike], size: int) -> np.ndarray:
    """Allocate via `allocate_zeros`, then set every slot to 1."""
    buf = allocate_zeros(dtype, size)
    buf.fill(1)
    return buf
