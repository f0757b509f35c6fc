"""
SetAlgebra Named Registry.

Maps set names to ``DataSet`` values so operations can be addressed by
label. The registry owns its sets: ``add_set`` stores a copy and
``get_set`` hands back a detached copy, so callers can never mutate
stored state through a returned handle.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from enum import Enum

from setalgebra.runtime.dataset import DataSet
from setalgebra.utils.errors import (
    InvalidOperationError,
    SetNotFoundError,
    UnsupportedOperationError,
)
from setalgebra.utils.suggestions import suggest_similar

logger = logging.getLogger("setalgebra.registry")


class BinaryOperation(str, Enum):
    """Binary operations that can be dispatched by name."""

    UNION = "union"
    INTERSECTION = "intersection"
    DIFFERENCE = "difference"
    SYMMETRIC_DIFFERENCE = "symmetric_difference"


class UnaryOperation(str, Enum):
    """Unary operations that can be dispatched by name."""

    POWERSET = "powerset"


class SetRegistry[T]:
    """
    A name-indexed collection of sets.

    At most one set is stored per name. Adding a set under an existing
    name replaces the earlier content in place, so ``set_names()`` keeps
    reporting names in their first registration order. There is no
    removal operation.
    """

    def __init__(self) -> None:
        self._sets: dict[str, DataSet[T]] = {}

    def _lookup(self, name: str) -> DataSet[T]:
        try:
            return self._sets[name]
        except KeyError:
            raise SetNotFoundError(name, suggest_similar(name, list(self._sets))) from None

    def add_set(self, data_set: DataSet[T]) -> None:
        """
        Store a copy of ``data_set`` under its name.

        An existing set with the same name is overwritten, not merged.
        """
        name = data_set.get_name()
        if name in self._sets:
            logger.debug("Overwriting set '%s'", name)
        else:
            logger.debug("Registering set '%s'", name)
        self._sets[name] = data_set.copy()

    def has_set(self, name: str) -> bool:
        """Return True if a set with this name is registered."""
        return name in self._sets

    def get_set(self, name: str) -> DataSet[T]:
        """
        Return a detached copy of the named set.

        Raises:
            SetNotFoundError: If no set has this name
        """
        return self._lookup(name).copy()

    def insert_into(self, name: str, value: T) -> None:
        """
        Insert ``value`` into the stored set with this name.

        Raises:
            SetNotFoundError: If no set has this name
        """
        self._lookup(name).insert(value)

    def set_names(self) -> list[str]:
        """Return the registered names in registration order."""
        return list(self._sets)

    def operate(self, name_a: str, op: str, name_b: str) -> DataSet[T]:
        """
        Apply a binary operation to two named sets.

        Both operands are resolved before the operation token is checked.
        The result is named ``"(name_a op name_b)"``.

        Args:
            name_a: Left operand name
            op: One of ``union``, ``intersection``, ``difference``,
                ``symmetric_difference``
            name_b: Right operand name

        Returns:
            A new set holding the result

        Raises:
            SetNotFoundError: If either operand is not registered
            InvalidOperationError: If ``op`` is not a binary operation
        """
        a = self._lookup(name_a)
        b = self._lookup(name_b)

        try:
            operation = BinaryOperation(op)
        except ValueError:
            raise InvalidOperationError(op) from None

        logger.debug("Dispatching %s on '%s' and '%s'", operation.value, name_a, name_b)

        if operation is BinaryOperation.UNION:
            result = a.union_with(b)
        elif operation is BinaryOperation.INTERSECTION:
            result = a.intersection_with(b)
        elif operation is BinaryOperation.DIFFERENCE:
            result = a.difference_with(b)
        else:
            result = a.symmetric_difference_with(b)

        result.set_name(f"({name_a} {operation.value} {name_b})")
        return result

    def operate_unary(self, name: str, op: str) -> DataSet[DataSet[T]]:
        """
        Apply a unary operation to a named set.

        Only ``powerset`` is defined.

        Raises:
            SetNotFoundError: If the operand is not registered
            UnsupportedOperationError: If ``op`` is anything else
        """
        a = self._lookup(name)

        try:
            operation = UnaryOperation(op)
        except ValueError:
            raise UnsupportedOperationError(op) from None

        logger.debug("Dispatching %s on '%s'", operation.value, name)
        return a.power_set()

    def cartesian_product(self, name_a: str, name_b: str) -> DataSet[tuple[T, T]]:
        """
        Return the Cartesian product of two named sets.

        Raises:
            SetNotFoundError: If either operand is not registered
        """
        a = self._lookup(name_a)
        b = self._lookup(name_b)
        return a.cartesian_product_with(b)

    def is_subset(self, name_a: str, name_b: str) -> bool:
        """Return True if the first named set is a subset of the second."""
        a = self._lookup(name_a)
        b = self._lookup(name_b)
        return a.is_subset_of(b)

    def is_equal(self, name_a: str, name_b: str) -> bool:
        """Return True if two named sets hold the same elements."""
        a = self._lookup(name_a)
        b = self._lookup(name_b)
        return a.is_equal_to(b)

    def size_of(self, name: str) -> int:
        """Return the number of elements in the named set."""
        return self._lookup(name).size()

    def __len__(self) -> int:
        return len(self._sets)

    def __contains__(self, name: object) -> bool:
        return name in self._sets

    def __iter__(self) -> Iterator[str]:
        return iter(self.set_names())
