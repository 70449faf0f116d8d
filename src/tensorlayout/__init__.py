"""
tensorlayout: shape and dtype algebra for tensor-like arrays.

Resolves shapes (including one implicit ``-1`` dimension), computes strides,
element counts and squeeze reductions, and converts input data into
dtype-correct contiguous backing buffers.
"""

from .domain._dtype import DType
from .domain._errors import (
    ComputationProducedNaNError,
    DTypeError,
    FractionalImplicitDimError,
    InvalidConversionError,
    InvalidShapeError,
    NonSqueezableAxisError,
    RetryLimitExceededError,
    ShapeError,
    ShapeMismatchError,
    UnknownDtypeError,
    UnresolvableImplicitDimError,
    UnsupportedConversionError,
)
from .domain._shape import (
    IMPLICIT_DIM,
    SqueezeResult,
    compute_strides,
    element_count,
    is_scalar_shape,
    resolve_implicit_shape,
    squeeze_shape,
)
from .domain.utils import (
    arrays_equal,
    assert_non_null,
    assert_shapes_match,
    assert_that,
    bytes_from_string_array,
)
from .infrastructure._config import is_debug_mode
from .infrastructure.dtype import (
    allocate,
    allocate_array,
    allocate_ones,
    allocate_zeros,
    bytes_per_element,
    check_computation_for_nan,
    check_conversion_for_nan,
    convert,
    has_encoding_loss,
    infer_dtype,
    is_typed_array,
)
from .infrastructure.utils import flatten

__all__ = [
    "IMPLICIT_DIM",
    ComputationProducedNaNError.__name__,
    DType.__name__,
    DTypeError.__name__,
    FractionalImplicitDimError.__name__,
    InvalidConversionError.__name__,
    InvalidShapeError.__name__,
    NonSqueezableAxisError.__name__,
    RetryLimitExceededError.__name__,
    ShapeError.__name__,
    ShapeMismatchError.__name__,
    SqueezeResult.__name__,
    UnknownDtypeError.__name__,
    UnresolvableImplicitDimError.__name__,
    UnsupportedConversionError.__name__,
    allocate.__name__,
    allocate_array.__name__,
    allocate_ones.__name__,
    allocate_zeros.__name__,
    arrays_equal.__name__,
    assert_non_null.__name__,
    assert_shapes_match.__name__,
    assert_that.__name__,
    bytes_from_string_array.__name__,
    bytes_per_element.__name__,
    check_computation_for_nan.__name__,
    check_conversion_for_nan.__name__,
    compute_strides.__name__,
    convert.__name__,
    element_count.__name__,
    flatten.__name__,
    has_encoding_loss.__name__,
    infer_dtype.__name__,
    is_debug_mode.__name__,
    is_scalar_shape.__name__,
    is_typed_array.__name__,
    resolve_implicit_shape.__name__,
    squeeze_shape.__name__,
]
