"""
Shape- and dtype-related exceptions for tensorlayout.

This module defines the error kinds raised by the shape resolver and the
dtype conversion engine. Every error is a synchronous, unrecoverable
failure at this layer: it is raised at the first offending input and is
never caught internally. Each exception keeps the offending values as
attributes so callers can report them without parsing the message.

Hierarchy
---------
- `ShapeError` (ValueError): invalid or inconsistent shapes.
- `DTypeError` (ValueError): unknown dtypes and illegal conversions.
- `ComputationProducedNaNError` (RuntimeError): NaN detected in the result
  of a float32 computation.
- `RetryLimitExceededError` (RuntimeError): a polling helper gave up.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence


def _fmt_shape(shape: Sequence[int]) -> str:
    return "[" + ", ".join(str(d) for d in shape) + "]"


class ShapeError(ValueError):
    """Base class for shape resolution and reduction failures."""


class InvalidShapeError(ShapeError):
    """
    Raised when a shape contains more than one implicit dimension, or a
    dimension smaller than -1.

    Attributes
    ----------
    shape : list[int]
        The offending shape.
    dims : tuple[int, ...]
        Indices of the dimensions that make the shape invalid.
    """

    def __init__(self, shape: Sequence[int], dims: Sequence[int], reason: str) -> None:
        super().__init__(
            f"Invalid shape {_fmt_shape(shape)}: {reason} "
            f"(dims {', '.join(str(d) for d in dims)})."
        )
        self.shape = list(shape)
        self.dims = tuple(dims)


class ShapeMismatchError(ShapeError):
    """
    Raised when a fully explicit shape does not describe the required
    number of elements.
    """

    def __init__(self, shape: Sequence[int], size: int) -> None:
        super().__init__(
            f"Size({size}) must match the product of shape {_fmt_shape(shape)}."
        )
        self.shape = list(shape)
        self.size = size


class UnresolvableImplicitDimError(ShapeError):
    """
    Raised when the implicit dimension cannot be inferred, either because
    the explicit dimensions multiply to zero or because the total size is
    unknown.
    """

    def __init__(self, shape: Sequence[int], size: int) -> None:
        if size <= 0:
            reason = f"the total size ({size}) is unknown"
        else:
            reason = "there are 0 elements"
        super().__init__(
            f"Cannot infer the missing size in {_fmt_shape(shape)} when {reason}."
        )
        self.shape = list(shape)
        self.size = size


class FractionalImplicitDimError(ShapeError):
    """Raised when the inferred implicit dimension would not be an integer."""

    def __init__(self, shape: Sequence[int], size: int, product: int) -> None:
        super().__init__(
            f"The implicit shape can't be a fractional number. "
            f"Got {size} / {product} for shape {_fmt_shape(shape)}."
        )
        self.shape = list(shape)
        self.size = size
        self.product = product


class NonSqueezableAxisError(ShapeError):
    """Raised when squeezing is forced on an axis whose size is not 1."""

    def __init__(self, shape: Sequence[int], axis: int) -> None:
        super().__init__(
            f"Can't squeeze axis {axis} since its dim '{shape[axis]}' is not 1 "
            f"(shape {_fmt_shape(shape)})."
        )
        self.shape = list(shape)
        self.axis = axis


class DTypeError(ValueError):
    """Base class for dtype recognition and conversion failures."""


class UnknownDtypeError(DTypeError):
    """
    Raised when a dtype tag lies outside the set accepted by an operation.

    Attributes
    ----------
    dtype : Any
        The rejected dtype value, as received.
    """

    def __init__(self, dtype: Any) -> None:
        super().__init__(f"Unknown data type {dtype!r}.")
        self.dtype = dtype


class UnsupportedConversionError(DTypeError):
    """Raised when numeric input is asked to become a string buffer."""

    def __init__(self, dtype: Any) -> None:
        super().__init__(f"Cannot convert numeric input to a '{dtype}' buffer.")
        self.dtype = dtype


class InvalidConversionError(DTypeError):
    """Raised when NaN is found in values headed for a dtype that forbids it."""

    def __init__(self, dtype: Any, index: Optional[int] = None) -> None:
        where = "" if index is None else f" Found NaN at index {index}."
        super().__init__(f"NaN is not a valid value for dtype: '{dtype}'.{where}")
        self.dtype = dtype
        self.index = index


class ComputationProducedNaNError(RuntimeError):
    """
    Raised when the float32 result of a named computation contains NaN.

    Attributes
    ----------
    name : str
        Name of the computation (e.g. the op that produced the values).
    index : int
        Position of the first NaN found.
    """

    def __init__(self, name: str, index: int) -> None:
        super().__init__(f"The result of the '{name}' has NaNs (first at index {index}).")
        self.name = name
        self.index = index


class RetryLimitExceededError(RuntimeError):
    """Raised when a polled condition never held within the attempt budget."""

    def __init__(self, attempts: int) -> None:
        super().__init__(f"Condition still false after {attempts} attempts.")
        self.attempts = attempts
