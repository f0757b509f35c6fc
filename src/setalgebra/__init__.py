"""
SetAlgebra - A generic mathematical-set library.

Provides an insertion-ordered set container with standard set algebra
(union, intersection, difference, symmetric difference, subset and
equality tests, power set, Cartesian product), a registry that lets
callers address sets by name, and a small script runner on top.
"""

from setalgebra.runtime.dataset import DataSet
from setalgebra.runtime.registry import SetRegistry
from setalgebra.utils.errors import (
    InvalidOperationError,
    SetAlgebraError,
    SetNotFoundError,
    UnsupportedOperationError,
)

__version__ = "0.1.0"
__all__ = [
    "DataSet",
    "SetRegistry",
    "SetAlgebraError",
    "SetNotFoundError",
    "InvalidOperationError",
    "UnsupportedOperationError",
]
