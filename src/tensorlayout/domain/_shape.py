"""
Shape resolution, stride computation, and squeeze reduction.

This module is the shape half of the layout core. All functions are pure:
they never mutate their inputs and always return freshly built lists.

Conventions
-----------
- A shape is an ordered sequence of non-negative ints. Rank 0 is a scalar.
- At most one entry may be the implicit sentinel ``-1`` ("infer me from the
  total element count"), and only `resolve_implicit_shape` accepts it.
- Strides follow row-major order with an implicit innermost stride of 1,
  so a rank-``r`` shape has ``r - 1`` strides.
"""

from __future__ import annotations

from typing import List, NamedTuple, Optional, Sequence

from ._errors import (
    FractionalImplicitDimError,
    InvalidShapeError,
    NonSqueezableAxisError,
    ShapeMismatchError,
    UnresolvableImplicitDimError,
)

IMPLICIT_DIM = -1
"""Sentinel marking the one dimension inferred from the total size."""


class SqueezeResult(NamedTuple):
    """
    Result of `squeeze_shape`.

    Attributes
    ----------
    new_shape : list[int]
        The reduced shape.
    kept_dims : list[int]
        Indices (into the input shape) of the retained dimensions, ascending.
    """

    new_shape: List[int]
    kept_dims: List[int]


def resolve_implicit_shape(shape: Sequence[int], total_size: int) -> List[int]:
    """
    Replace the implicit ``-1`` dimension of `shape` with its inferred size.

    For shape ``[2, -1, 3]`` and ``total_size=24`` the result is
    ``[2, 4, 3]``.

    Parameters
    ----------
    shape : Sequence[int]
        Declared shape. Entries are ``>= 0`` or a single ``-1``.
    total_size : int
        Required number of elements. A value ``<= 0`` means "unknown": the
        size check is skipped for explicit shapes, and an implicit
        dimension cannot be resolved.

    Returns
    -------
    list[int]
        A new, fully concrete shape.

    Raises
    ------
    InvalidShapeError
        If more than one entry is ``-1``, or any entry is below ``-1``.
    ShapeMismatchError
        If the shape has no implicit dim and its product differs from a
        known `total_size`.
    UnresolvableImplicitDimError
        If the explicit dims multiply to zero, or `total_size` is unknown.
    FractionalImplicitDimError
        If `total_size` is not divisible by the explicit product.
    """
    product = 1
    implicit_idx = None

    for i, d in enumerate(shape):
        if d >= 0:
            product *= d
        elif d == IMPLICIT_DIM:
            if implicit_idx is not None:
                raise InvalidShapeError(
                    shape, (implicit_idx, i), "shapes can only have 1 implicit size"
                )
            implicit_idx = i
        else:
            raise InvalidShapeError(shape, (i,), f"shapes can not be < 0, found {d}")

    if implicit_idx is None:
        if total_size > 0 and total_size != product:
            raise ShapeMismatchError(shape, total_size)
        return list(shape)

    if product == 0 or total_size <= 0:
        raise UnresolvableImplicitDimError(shape, total_size)
    if total_size % product != 0:
        raise FractionalImplicitDimError(shape, total_size, product)

    new_shape = list(shape)
    new_shape[implicit_idx] = total_size // product
    return new_shape


def compute_strides(shape: Sequence[int]) -> List[int]:
    """
    Compute row-major strides, in elements, for a concrete shape.

    The innermost dimension has an implicit stride of 1 and is omitted, so
    rank-0 and rank-1 shapes yield ``[]``.

    Examples
    --------
    >>> compute_strides([2, 3, 4])
    [12, 4]
    """
    rank = len(shape)
    if rank < 2:
        return []

    strides = [0] * (rank - 1)
    strides[rank - 2] = shape[rank - 1]
    for i in range(rank - 3, -1, -1):
        strides[i] = strides[i + 1] * shape[i + 1]
    return strides


def element_count(shape: Sequence[int]) -> int:
    """
    Number of elements described by a concrete (sentinel-free) shape.

    A scalar shape ``()`` holds exactly one element.
    """
    size = 1
    for d in shape:
        size *= d
    return size


def is_scalar_shape(shape: Sequence[int]) -> bool:
    """Return True if `shape` has rank 0."""
    return len(shape) == 0


def squeeze_shape(
    shape: Sequence[int], axis: Optional[Sequence[int]] = None
) -> SqueezeResult:
    """
    Reduce a shape by removing size-1 dimensions.

    Parameters
    ----------
    shape : Sequence[int]
        Concrete input shape.
    axis : Sequence[int], optional
        Ascending indices of dimensions to remove. When omitted, every
        size-1 dimension is removed.

    Returns
    -------
    SqueezeResult
        ``(new_shape, kept_dims)``.

    Raises
    ------
    NonSqueezableAxisError
        If a listed axis does not have size 1.

    Notes
    -----
    When `axis` is given, only listed dimensions are removed. Size-1
    dimensions that are not listed are kept, and an empty `axis` keeps
    every dimension. The axis cursor only advances once the scan reaches
    or passes the listed index.

    Examples
    --------
    >>> squeeze_shape([1, 2, 1, 3])
    SqueezeResult(new_shape=[2, 3], kept_dims=[1, 3])
    >>> squeeze_shape([1, 2, 1, 3], axis=[0])
    SqueezeResult(new_shape=[2, 1, 3], kept_dims=[1, 2, 3])
    """
    new_shape: List[int] = []
    kept_dims: List[int] = []
    j = 0

    for i, d in enumerate(shape):
        if axis is not None:
            target = axis[j] if j < len(axis) else None
            if target == i and d != 1:
                raise NonSqueezableAxisError(shape, i)
            if (target is None or target > i) and d == 1:
                new_shape.append(d)
                kept_dims.append(i)
            if target is not None and target <= i:
                j += 1
        if d != 1:
            new_shape.append(d)
            kept_dims.append(i)

    return SqueezeResult(new_shape, kept_dims)
