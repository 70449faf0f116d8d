from ._buffer import BufferLike, NestedSequence, Scalar, Shape, StringBuffer

__all__ = [
    BufferLike.__name__,
    "NestedSequence",
    "Scalar",
    "Shape",
    "StringBuffer",
]
