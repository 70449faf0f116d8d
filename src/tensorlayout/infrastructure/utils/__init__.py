from ._array import first_element, flatten, is_nested_container
from ._random import create_shuffled_indices, rand_uniform, shuffle
from ._timing import now, repeated_try

__all__ = [
    create_shuffled_indices.__name__,
    first_element.__name__,
    flatten.__name__,
    is_nested_container.__name__,
    now.__name__,
    rand_uniform.__name__,
    repeated_try.__name__,
    shuffle.__name__,
]
