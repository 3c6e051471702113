"""Sorting, exclusion and differencing of specific-information values."""

from typing import Sequence

import torch
from torch import Tensor


def stable_arg_sort(values: Tensor) -> Tensor:
    """Indices that sort ``values`` ascending; ties keep their input order.

    Examples
    --------
    >>> stable_arg_sort(torch.tensor([0.3, 0.1, 0.3, 0.0]))
    tensor([3, 1, 0, 2])
    """
    return torch.sort(values, stable=True).indices


def first_difference(values: Tensor) -> Tensor:
    """First differences with the first element kept as is.

    ``out[0] = values[0]`` and ``out[i] = values[i] - values[i - 1]``.

    Examples
    --------
    >>> first_difference(torch.tensor([1.0, 3.0, 6.0]))
    tensor([1., 2., 3.])
    """
    if values.numel() == 0:
        return values.clone()
    return torch.diff(values, prepend=values.new_zeros(1))


def exclude_dominated(values: Tensor, cardinalities: Sequence[int]) -> Tensor:
    """Zero out subsets that carry less information than a smaller subset.

    For each level ``l = 1 .. max(cardinalities) - 1`` the threshold is the
    largest value among entries of cardinality ``l``, read after the
    previous level has been processed. Entries of cardinality ``l + 1`` below
    that threshold are set to zero, since a subset of size ``l`` already
    provides at least as much information.

    Parameters
    ----------
    values : Tensor
        One-dimensional specific-information values.
    cardinalities : sequence of int
        Subset size of each entry of ``values``.

    Returns
    -------
    Tensor
        A new tensor; ``values`` is not modified.

    Examples
    --------
    >>> exclude_dominated(torch.tensor([0.2, 0.5, 0.4, 0.7]), [1, 1, 2, 2])
    tensor([0.2000, 0.5000, 0.0000, 0.7000])
    """
    result = values.clone()
    lengths = torch.as_tensor(list(cardinalities), device=values.device)

    if lengths.numel() != values.numel():
        raise ValueError(
            f"cardinalities has {lengths.numel()} entries, "
            f"values has {values.numel()}"
        )

    if lengths.numel() == 0:
        return result

    for level in range(1, int(lengths.max())):
        at_level = lengths == level
        if not bool(at_level.any()):
            continue
        threshold = result[at_level].max()
        suppressed = (lengths == level + 1) & (result < threshold)
        result = torch.where(suppressed, torch.zeros_like(result), result)

    return result
