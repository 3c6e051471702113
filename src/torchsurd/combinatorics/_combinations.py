"""Subsets of variable indices."""

import itertools
from typing import Iterable, List, Sequence, Tuple

VariableSet = Tuple[int, ...]


def variable_set(indices: Iterable[int]) -> VariableSet:
    """Canonical key for a set of variable indices: sorted, deduplicated tuple.

    Examples
    --------
    >>> variable_set([2, 1, 2])
    (1, 2)
    """
    result = tuple(sorted({int(i) for i in indices}))
    if any(i < 0 for i in result):
        raise ValueError(f"indices must be non-negative, got {result}")
    return result


def combinations(universe: Sequence[int], size: int) -> List[VariableSet]:
    """All ``size``-element subsets of ``universe`` in lexicographic order.

    Parameters
    ----------
    universe : sequence of int
        Candidate indices. Duplicates are ignored.
    size : int
        Subset size. ``0`` yields the single empty subset and sizes larger
        than the universe yield nothing.

    Returns
    -------
    list of tuple of int
        Sorted subsets.

    Examples
    --------
    >>> combinations([1, 2, 3], 2)
    [(1, 2), (1, 3), (2, 3)]
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")

    return list(itertools.combinations(variable_set(universe), size))


def set_difference(a: Sequence[int], b: Sequence[int]) -> List[int]:
    """Elements of ``a`` not in ``b``, keeping the order of ``a``.

    Examples
    --------
    >>> set_difference([0, 1, 2, 3], [1, 3])
    [0, 2]
    """
    excluded = set(b)
    return [x for x in a if x not in excluded]
