"""
SetAlgebra Element Store.

This module provides ``DataSet``, a named, order-preserving container of
unique elements. Uniqueness is decided by an explicit equality capability
(a two-argument callable) rather than by hashing, so any element type with
a meaningful equality relation can be stored, including other sets.

The algebra methods (``union_with``, ``power_set``, ...) are thin wrappers
over the pure functions in :mod:`setalgebra.runtime.set_ops`.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Optional

from setalgebra.runtime import set_ops

Equality = Callable[[Any, Any], bool]


def format_element(value: Any) -> str:
    """
    Render a single set element for display.

    Nested sets render as their braces only, pairs as ``(a, b)`` and
    everything else through ``str()``.
    """
    if isinstance(value, DataSet):
        return value.render_contents()
    if isinstance(value, tuple):
        return "(" + ", ".join(format_element(item) for item in value) + ")"
    return str(value)


class DataSet[T]:
    """
    A generic mathematical set backed by a list.

    Elements keep their insertion order and are never sorted. The display
    name is a label only: it takes no part in equality.

    Attributes:
        name: Mutable display name
        equality: Callable deciding whether two elements are the same
    """

    __slots__ = ("_name", "_elements", "_equality")

    # Sets are mutable, so they must not be hashable
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        name: str = "",
        elements: Iterable[T] = (),
        equality: Equality = operator.eq,
    ) -> None:
        self._name = name
        self._elements: list[T] = []
        self._equality = equality
        for value in elements:
            self.insert(value)

    # -------------------------------------------------------------------------
    # Name accessors
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, new_name: str) -> None:
        self._name = new_name

    def get_name(self) -> str:
        """Return the display name of the set."""
        return self._name

    def set_name(self, new_name: str) -> None:
        """Assign a new display name to the set."""
        self._name = new_name

    @property
    def equality(self) -> Equality:
        return self._equality

    # -------------------------------------------------------------------------
    # Primitives
    # -------------------------------------------------------------------------

    def insert(self, value: T) -> None:
        """
        Append a value unless an equal element is already stored.

        Re-inserting an existing value leaves the set unchanged.
        """
        if not self.contains(value):
            self._elements.append(value)

    def contains(self, value: T) -> bool:
        """Return True if some stored element equals ``value``."""
        return any(self._equality(element, value) for element in self._elements)

    def size(self) -> int:
        """Return the number of elements."""
        return len(self._elements)

    def elements(self) -> list[T]:
        """Return a snapshot copy of the elements in insertion order."""
        return list(self._elements)

    def derive(self, name: str = "") -> DataSet[T]:
        """Create an empty set that shares this set's equality relation."""
        return type(self)(name, equality=self._equality)

    def copy(self, name: Optional[str] = None) -> DataSet[T]:
        """Return a detached copy, optionally under a different name."""
        result = self.derive(self._name if name is None else name)
        # Elements are already unique, no need to go through insert()
        result._elements = list(self._elements)
        return result

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render_contents(self) -> str:
        """Render the elements as ``{e1, e2, ...}``."""
        return "{" + ", ".join(format_element(e) for e in self._elements) + "}"

    def render(self) -> str:
        """
        Render the set as ``name = {e1, e2, ...}``.

        The ``name =`` prefix is omitted when the name is empty.
        """
        if self._name:
            return f"{self._name} = {self.render_contents()}"
        return self.render_contents()

    # -------------------------------------------------------------------------
    # Algebra
    # -------------------------------------------------------------------------

    def union_with(self, other: DataSet[T]) -> DataSet[T]:
        """Return A ∪ B."""
        return set_ops.set_union(self, other)

    def intersection_with(self, other: DataSet[T]) -> DataSet[T]:
        """Return A ∩ B."""
        return set_ops.set_intersection(self, other)

    def difference_with(self, other: DataSet[T]) -> DataSet[T]:
        """Return A - B."""
        return set_ops.set_difference(self, other)

    def symmetric_difference_with(self, other: DataSet[T]) -> DataSet[T]:
        """Return A △ B."""
        return set_ops.symmetric_difference(self, other)

    def is_subset_of(self, other: DataSet[T]) -> bool:
        """Return True if every element of this set is in ``other``."""
        return set_ops.is_subset(self, other)

    def is_superset_of(self, other: DataSet[T]) -> bool:
        """Return True if every element of ``other`` is in this set."""
        return set_ops.is_superset(self, other)

    def is_proper_subset_of(self, other: DataSet[T]) -> bool:
        """Return True if this set is a subset of ``other`` but not equal to it."""
        return set_ops.is_proper_subset(self, other)

    def is_equal_to(self, other: DataSet[T]) -> bool:
        """Return True if both sets hold the same elements, in any order."""
        return set_ops.is_equal(self, other)

    def power_set(self) -> DataSet[DataSet[T]]:
        """Return the set of all subsets of this set."""
        return set_ops.power_set(self)

    def cartesian_product_with[U](self, other: DataSet[U]) -> DataSet[tuple[T, U]]:
        """Return A × B as a set of ``(a, b)`` tuples."""
        return set_ops.cartesian_product(self, other)

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[T]:
        return iter(self.elements())

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataSet):
            return NotImplemented
        return self.is_equal_to(other)

    def __or__(self, other: DataSet[T]) -> DataSet[T]:
        if not isinstance(other, DataSet):
            return NotImplemented
        return self.union_with(other)

    def __and__(self, other: DataSet[T]) -> DataSet[T]:
        if not isinstance(other, DataSet):
            return NotImplemented
        return self.intersection_with(other)

    def __sub__(self, other: DataSet[T]) -> DataSet[T]:
        if not isinstance(other, DataSet):
            return NotImplemented
        return self.difference_with(other)

    def __xor__(self, other: DataSet[T]) -> DataSet[T]:
        if not isinstance(other, DataSet):
            return NotImplemented
        return self.symmetric_difference_with(other)

    def __le__(self, other: DataSet[T]) -> bool:
        if not isinstance(other, DataSet):
            return NotImplemented
        return self.is_subset_of(other)

    def __lt__(self, other: DataSet[T]) -> bool:
        if not isinstance(other, DataSet):
            return NotImplemented
        return self.is_proper_subset_of(other)

    def __ge__(self, other: DataSet[T]) -> bool:
        if not isinstance(other, DataSet):
            return NotImplemented
        return self.is_superset_of(other)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"DataSet({self._name!r}, {self._elements!r})"
