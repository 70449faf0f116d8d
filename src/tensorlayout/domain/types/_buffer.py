"""
Domain-level structural typing for backing buffers and nested input.

This module defines :class:`BufferLike`, a **backend-agnostic Protocol**
describing the flat, fixed-length stores that back tensors, without
introducing a dependency on NumPy in the domain layer. It also names the
aliases used across the package for shapes and arbitrarily nested input.

Typical implementers of `BufferLike` include:
- one-dimensional ``numpy.ndarray`` instances (packed numeric buffers)
- plain Python lists (reference buffers for string tensors)

This protocol is intended for typing and documentation purposes only.
"""

from __future__ import annotations

from typing import Any, Iterator, List, Protocol, Sequence, Tuple, Union, runtime_checkable

Shape = Union[Sequence[int], Tuple[int, ...]]
"""Ordered per-dimension sizes; rank 0 is a scalar."""

Scalar = Union[int, float, bool, str, complex]
"""A single element of tensor input."""

NestedSequence = Union[Scalar, Sequence[Any]]
"""A scalar, or a (possibly ragged) sequence nesting scalars at any depth."""


@runtime_checkable
class BufferLike(Protocol):
    """
    A contiguous, fixed-length store with uniform element type.

    Notes
    -----
    - Length never changes after allocation; only element values may be
      overwritten.
    - The element type is fixed at allocation time.
    """

    def __len__(self) -> int:
        """Number of elements in the buffer."""
        ...

    def __getitem__(self, key: Any) -> Any:
        """Read one element (or a slice of elements)."""
        ...

    def __setitem__(self, key: Any, value: Any) -> None:
        """Overwrite one element (or a slice of elements) in place."""
        ...

    def __iter__(self) -> Iterator[Any]:
        """Iterate over elements in storage order."""
        ...


StringBuffer = List[Any]
"""Reference buffer backing string tensors."""
