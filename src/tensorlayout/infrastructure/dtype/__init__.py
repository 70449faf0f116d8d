"""
Dtype conversion engine public API.

Exports
-------
- Allocation: `allocate`, `allocate_array`, `allocate_zeros`, `allocate_ones`
- Conversion: `convert`, `check_conversion_for_nan`, `check_computation_for_nan`
- Properties: `has_encoding_loss`, `bytes_per_element`, `infer_dtype`,
  `is_typed_array`
"""

from ._allocation import allocate, allocate_array, allocate_ones, allocate_zeros
from ._conversion import check_computation_for_nan, check_conversion_for_nan, convert
from ._encoding import bytes_per_element, has_encoding_loss, infer_dtype, is_typed_array

__all__ = [
    allocate.__name__,
    allocate_array.__name__,
    allocate_ones.__name__,
    allocate_zeros.__name__,
    bytes_per_element.__name__,
    check_computation_for_nan.__name__,
    check_conversion_for_nan.__name__,
    convert.__name__,
    has_encoding_loss.__name__,
    infer_dtype.__name__,
    is_typed_array.__name__,
]
