"""
Assertion primitives shared by shape and dtype code.

`assert_that` is the generic failure primitive: it raises `AssertionError`
with an eagerly or lazily built message. The remaining helpers are common
preconditions expressed through it.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence, Union

Message = Union[str, Callable[[], str]]


def assert_that(expr: bool, msg: Message) -> None:
    """
    Raise `AssertionError` unless `expr` holds.

    Parameters
    ----------
    expr : bool
        Condition that must be true.
    msg : str | Callable[[], str]
        Error message, or a zero-argument callable producing it. The
        callable is only invoked on failure, so expensive formatting is
        skipped on the happy path.

    Notes
    -----
    Unlike the ``assert`` statement, this check is not stripped under
    ``python -O``.
    """
    if not expr:
        raise AssertionError(msg if isinstance(msg, str) else msg())


def arrays_equal(a: Optional[Sequence[Any]], b: Optional[Sequence[Any]]) -> bool:
    """
    Element-wise equality of two flat sequences.

    The same object is always equal to itself. ``None`` is only equal to
    ``None`` (via identity); sequences of different lengths are unequal.
    """
    if a is b:
        return True
    if a is None or b is None:
        return False
    if len(a) != len(b):
        return False
    return all(x == y for x, y in zip(a, b))


def assert_shapes_match(
    shape_a: Sequence[int], shape_b: Sequence[int], error_message_prefix: str = ""
) -> None:
    """Assert two shapes are identical, naming both in the failure message."""
    assert_that(
        arrays_equal(list(shape_a), list(shape_b)),
        lambda: f"{error_message_prefix} Shapes {list(shape_a)} and "
        f"{list(shape_b)} must match".lstrip(),
    )


def assert_non_null(value: Any) -> None:
    """Assert the input to a tensor constructor is not ``None``."""
    assert_that(
        value is not None,
        "The input to the tensor constructor must be a non-null value.",
    )
