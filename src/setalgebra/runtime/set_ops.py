"""
SetAlgebra Set Operations.

This module provides the algebra engine: pure functions over ``DataSet``
operands. They use nothing but the store primitives ``insert``, ``contains``
and ``elements``, never mutate their operands and always build a fresh
result set. Binary results inherit the left operand's equality relation.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import numpy as np

if TYPE_CHECKING:
    from setalgebra.runtime.dataset import DataSet


def set_union[T](a: DataSet[T], b: DataSet[T]) -> DataSet[T]:
    """
    Compute the union of two sets (A ∪ B).

    The union holds A's elements in their original order, followed by
    the elements of B that are not already present.

    Args:
        a: First set
        b: Second set

    Returns:
        A new set named ``"A ∪ B"``

    Examples:
        >>> from setalgebra.runtime.dataset import DataSet
        >>> set_union(DataSet("A", [1, 2]), DataSet("B", [2, 3])).render()
        'A ∪ B = {1, 2, 3}'
    """
    result = a.derive(f"{a.name} ∪ {b.name}")
    for value in a.elements():
        result.insert(value)
    for value in b.elements():
        result.insert(value)
    return result


def set_intersection[T](a: DataSet[T], b: DataSet[T]) -> DataSet[T]:
    """
    Compute the intersection of two sets (A ∩ B).

    The intersection holds A's elements that are also members of B,
    in A's order.

    Args:
        a: First set
        b: Second set

    Returns:
        A new set named ``"A ∩ B"``

    Examples:
        >>> from setalgebra.runtime.dataset import DataSet
        >>> set_intersection(DataSet("A", [1, 2, 3]), DataSet("B", [2, 3, 4])).elements()
        [2, 3]
    """
    result = a.derive(f"{a.name} ∩ {b.name}")
    for value in a.elements():
        if b.contains(value):
            result.insert(value)
    return result


def set_difference[T](a: DataSet[T], b: DataSet[T]) -> DataSet[T]:
    """
    Compute the set difference (A - B).

    Args:
        a: First set (elements to keep)
        b: Second set (elements to remove)

    Returns:
        A new set named ``"A - B"`` with A's elements absent from B

    Examples:
        >>> from setalgebra.runtime.dataset import DataSet
        >>> set_difference(DataSet("A", [1, 2, 3]), DataSet("B", [2, 3, 4])).elements()
        [1]
    """
    result = a.derive(f"{a.name} - {b.name}")
    for value in a.elements():
        if not b.contains(value):
            result.insert(value)
    return result


def symmetric_difference[T](a: DataSet[T], b: DataSet[T]) -> DataSet[T]:
    """
    Compute the symmetric difference of two sets (A △ B).

    The result is (A - B) in A's order followed by (B - A) in B's order.

    Args:
        a: First set
        b: Second set

    Returns:
        A new set named ``"A △ B"``

    Examples:
        >>> from setalgebra.runtime.dataset import DataSet
        >>> symmetric_difference(DataSet("A", [1, 2, 3]), DataSet("B", [2, 3, 4])).elements()
        [1, 4]
    """
    result = a.derive(f"{a.name} △ {b.name}")
    for value in a.elements():
        if not b.contains(value):
            result.insert(value)
    for value in b.elements():
        if not a.contains(value):
            result.insert(value)
    return result


def is_subset[T](a: DataSet[T], b: DataSet[T]) -> bool:
    """
    Check if A is a subset of B (A ⊆ B).

    Note: the empty set is a subset of every set, including itself.

    Args:
        a: The potential subset
        b: The potential superset

    Returns:
        True if every element of a is a member of b
    """
    return all(b.contains(value) for value in a.elements())


def is_superset[T](a: DataSet[T], b: DataSet[T]) -> bool:
    """Check if A is a superset of B (A ⊇ B)."""
    return is_subset(b, a)


def is_equal[T](a: DataSet[T], b: DataSet[T]) -> bool:
    """
    Check if two sets hold the same elements (A = B).

    Equality is mutual inclusion: A ⊆ B and B ⊆ A. Names and element
    order are ignored.

    Args:
        a: First set
        b: Second set

    Returns:
        True if both sets are subsets of each other
    """
    # Under one shared relation, duplicate-free sets of different sizes
    # cannot include each other
    if a.equality is b.equality and a.size() != b.size():
        return False
    return is_subset(a, b) and is_subset(b, a)


def is_proper_subset[T](a: DataSet[T], b: DataSet[T]) -> bool:
    """
    Check if A is a proper subset of B (A ⊂ B).

    Examples:
        >>> from setalgebra.runtime.dataset import DataSet
        >>> is_proper_subset(DataSet("A", [1, 2]), DataSet("B", [1, 2, 3]))
        True
        >>> is_proper_subset(DataSet("A", [1, 2]), DataSet("B", [2, 1]))
        False
    """
    return is_subset(a, b) and not is_subset(b, a)


def subset_masks(n: int) -> np.ndarray:
    """
    Build the membership table used to enumerate subsets.

    Row ``k`` of the returned ``(2**n, n)`` boolean array has column ``i``
    set iff bit ``i`` of ``k`` is set.

    Args:
        n: Number of elements in the source set

    Returns:
        A boolean array with one row per subset
    """
    codes = np.arange(1 << n, dtype=np.uint64)[:, np.newaxis]
    shifts = np.arange(n, dtype=np.uint64)
    return ((codes >> shifts) & np.uint64(1)).astype(bool)


def _subset_equality(x: Any, y: Any) -> bool:
    """Value equality for the members of a power set."""
    return isinstance(y, type(x)) and is_equal(x, y)


def power_set[T](s: DataSet[T]) -> DataSet[DataSet[T]]:
    """
    Compute the power set of a set (P(S) or 2^S).

    Elements are numbered 0..n-1 by insertion order and subset ``k``
    contains element ``i`` iff bit ``i`` of ``k`` is set, so subsets come
    out as {}, {e0}, {e1}, {e0, e1}, ... with members in index order.

    The outer set deduplicates with ``is_equal`` (value equality of the
    inner sets). Distinct bit patterns over a duplicate-free input never
    produce equal subsets, so the result always has exactly 2^n members.

    Args:
        s: The input set

    Returns:
        A set of unnamed subsets, named ``"S Power Set"``

    Note:
        Time and space grow as 2^n. Be cautious with large sets!
    """
    elements = s.elements()
    result = type(s)(f"{s.name} Power Set", equality=_subset_equality)

    for row in subset_masks(len(elements)):
        subset = s.derive()
        for index in np.flatnonzero(row):
            subset.insert(elements[index])
        result.insert(subset)

    return result


def _pair_equality(
    first: Callable[[Any, Any], bool], second: Callable[[Any, Any], bool]
) -> Callable[[Any, Any], bool]:
    """Compare pairs component-wise with each operand's own equality."""

    def equality(x: Any, y: Any) -> bool:
        if not (isinstance(x, tuple) and isinstance(y, tuple)):
            return False
        if len(x) != 2 or len(y) != 2:
            return False
        return first(x[0], y[0]) and second(x[1], y[1])

    return equality


def cartesian_product[T, U](a: DataSet[T], b: DataSet[U]) -> DataSet[tuple[T, U]]:
    """
    Compute the Cartesian product of two sets (A × B).

    Pairs are generated with A as the outer loop and B as the inner loop,
    both in insertion order. Since both operands are duplicate-free the
    result has exactly ``len(a) * len(b)`` pairs.

    Args:
        a: First set
        b: Second set

    Returns:
        A set of ``(x, y)`` tuples named ``"A × B"``

    Examples:
        >>> from setalgebra.runtime.dataset import DataSet
        >>> cartesian_product(DataSet("A", [1, 2]), DataSet("B", ["a"])).elements()
        [(1, 'a'), (2, 'a')]
    """
    result = type(a)(
        f"{a.name} × {b.name}",
        equality=_pair_equality(a.equality, b.equality),
    )
    right = b.elements()
    for x in a.elements():
        for y in right:
            result.insert((x, y))
    return result
