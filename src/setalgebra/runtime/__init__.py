"""
SetAlgebra Runtime.

The element store, the algebra engine and the named registry.
"""

from setalgebra.runtime.dataset import DataSet, format_element
from setalgebra.runtime.registry import BinaryOperation, SetRegistry, UnaryOperation
from setalgebra.runtime.set_ops import (
    cartesian_product,
    is_equal,
    is_proper_subset,
    is_subset,
    is_superset,
    power_set,
    set_difference,
    set_intersection,
    set_union,
    symmetric_difference,
)

__all__ = [
    "DataSet",
    "format_element",
    "SetRegistry",
    "BinaryOperation",
    "UnaryOperation",
    "set_union",
    "set_intersection",
    "set_difference",
    "symmetric_difference",
    "is_subset",
    "is_superset",
    "is_proper_subset",
    "is_equal",
    "power_set",
    "cartesian_product",
]
