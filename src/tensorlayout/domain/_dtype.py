"""
Logical element-type (dtype) abstraction.

This module defines `DType`, the closed enumeration of logical element
types a tensor may carry, independent of the physical storage that backs
it. It also provides `DType.parse`, which validates and normalizes the
user-facing forms a dtype may arrive in (enum member, string tag, or
``None`` for the default).

The design intentionally avoids backend-specific dependencies so the enum
can be shared by the domain and infrastructure layers.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from ._errors import UnknownDtypeError


class DType(Enum):
    """
    Enumeration of supported logical element types.

    Attributes
    ----------
    FLOAT32 : DType
        32-bit IEEE floating point. The default dtype.
    INT32 : DType
        32-bit signed integer.
    BOOL : DType
        Boolean, stored as one byte per element.
    STRING : DType
        Text. Backed by a reference sequence rather than a packed buffer.
    COMPLEX64 : DType
        Complex number with float32 components.
    """

    FLOAT32 = "float32"
    INT32 = "int32"
    BOOL = "bool"
    STRING = "string"
    COMPLEX64 = "complex64"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, dtype: Optional[DTypeLike]) -> DType:
        """
        Normalize a dtype argument into a `DType` member.

        Parameters
        ----------
        dtype : DType | str | None
            A `DType` member, its string tag (e.g. ``"int32"``), or ``None``
            which selects `DType.FLOAT32`.

        Returns
        -------
        DType
            The matching enum member.

        Raises
        ------
        UnknownDtypeError
            If `dtype` is not a member and not a recognized tag.
        """
        if dtype is None:
            return cls.FLOAT32
        if isinstance(dtype, cls):
            return dtype
        if isinstance(dtype, str):
            try:
                return cls(dtype)
            except ValueError:
                pass
        raise UnknownDtypeError(dtype)


DTypeLike = Union[DType, str]
"""Accepted spellings of a dtype argument."""
