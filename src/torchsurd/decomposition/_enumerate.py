"""Enumeration of source subsets and their specific information."""

from typing import Dict, List, Sequence, Tuple, Union

from torch import Tensor

from torchsurd.combinatorics import VariableSet, combinations
from torchsurd.information import specific_information

from ._max_order import MaxOrder, as_max_order


def enumerate_variable_sets(
    n_vars: int,
    max_order: Union[MaxOrder, int, str] = "full",
) -> Tuple[int, List[VariableSet]]:
    """Source subsets of size ``1..k`` for a system of ``n_vars`` sources.

    Parameters
    ----------
    n_vars : int
        Number of source variables (dimensions ``1..n_vars`` of the joint).
    max_order : MaxOrder, int or {"full", "pairwise"}, default="full"
        Cap on the subset size.

    Returns
    -------
    k : int
        Effective order after clamping to ``[1, n_vars]``.
    combs : list of tuple of int
        Subsets ordered by size, then lexicographically.

    Examples
    --------
    >>> enumerate_variable_sets(3, 2)
    (2, [(1,), (2,), (3,), (1, 2), (1, 3), (2, 3)])
    """
    k = as_max_order(max_order).resolve(n_vars)

    universe = range(1, n_vars + 1)
    combs = []
    for size in range(1, k + 1):
        combs.extend(combinations(universe, size))

    return k, combs


def specific_information_map(
    joint: Tensor,
    combs: Sequence[VariableSet],
) -> Tuple[Dict[VariableSet, Tensor], Dict[VariableSet, float]]:
    r"""Specific information and mutual information of every subset.

    Parameters
    ----------
    joint : Tensor
        Normalized joint distribution, target on dimension 0.
    combs : sequence of tuple of int
        Source subsets.

    Returns
    -------
    specific : dict
        ``specific[s][t]`` is :math:`i(T = t; S)`.
    mutual : dict
        ``mutual[s]`` is :math:`I(T; S) = \sum_t p(t)\, i(T = t; S)`.
    """
    p_target = joint.sum(dim=tuple(range(1, joint.dim())))

    specific = {}
    mutual = {}
    for s in combs:
        values = specific_information(joint, s)
        specific[s] = values
        mutual[s] = float((values * p_target).sum())

    return specific, mutual
