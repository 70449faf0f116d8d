from ._assertions import arrays_equal, assert_non_null, assert_shapes_match, assert_that
from ._math import (
    clamp,
    dist_squared,
    is_int,
    nearest_divisor,
    nearest_larger_even,
    size_to_squarish_shape,
)
from ._predicates import bytes_from_string_array, is_boolean, is_number, is_string, right_pad

__all__ = [
    arrays_equal.__name__,
    assert_non_null.__name__,
    assert_shapes_match.__name__,
    assert_that.__name__,
    bytes_from_string_array.__name__,
    clamp.__name__,
    dist_squared.__name__,
    is_boolean.__name__,
    is_int.__name__,
    is_number.__name__,
    is_string.__name__,
    nearest_divisor.__name__,
    nearest_larger_even.__name__,
    right_pad.__name__,
    size_to_squarish_shape.__name__,
]
