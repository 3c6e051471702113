"""Joint distribution of integer-coded samples."""

from typing import Optional, Sequence

import torch
from torch import Tensor


def joint_distribution(
    target: Tensor,
    sources: Sequence[Tensor],
    *,
    num_states: Optional[Sequence[int]] = None,
) -> Tensor:
    r"""Estimate a joint probability tensor from discrete samples.

    Counts the co-occurrences of the target and source labels and normalizes
    them, producing the input layout expected by
    :func:`torchsurd.decomposition.surd_states`: the target on dimension 0 and
    one source per following dimension.

    Parameters
    ----------
    target : Tensor
        Integer labels of the target variable, shape ``(n_samples,)``.
    sources : sequence of Tensor
        Integer labels of each source variable, each of shape
        ``(n_samples,)``.
    num_states : sequence of int, optional
        Number of states of the target followed by each source. Defaults to
        ``max(label) + 1`` per variable.

    Returns
    -------
    Tensor
        ``float64`` tensor of shape ``(n_target, n_source_1, ...)`` summing
        to 1.

    Examples
    --------
    >>> x = torch.tensor([0, 1, 0, 1])
    >>> y = torch.tensor([0, 1, 1, 0])
    >>> joint_distribution(x ^ y, [x, y]).shape
    torch.Size([2, 2, 2])

    Notes
    -----
    Samples must already be discretized; continuous data has to be binned
    beforehand.
    """
    variables = [target, *sources]

    if not sources:
        raise ValueError("sources must contain at least one tensor")

    for v in variables:
        if not isinstance(v, Tensor):
            raise TypeError(
                f"samples must be Tensors, got {type(v).__name__}"
            )
        if v.dim() != 1:
            raise ValueError(
                f"samples must be 1-dimensional, got {v.dim()} dimensions"
            )
        if v.dtype.is_floating_point or v.dtype.is_complex:
            raise TypeError(f"samples must be integer labels, got {v.dtype}")

    n_samples = target.shape[0]
    if n_samples == 0:
        raise ValueError("samples must not be empty")
    if any(v.shape[0] != n_samples for v in variables):
        raise ValueError("all sample tensors must have the same length")
    if any(bool((v < 0).any()) for v in variables):
        raise ValueError("labels must be non-negative")

    if num_states is None:
        shape = [int(v.max()) + 1 for v in variables]
    else:
        shape = [int(n) for n in num_states]
        if len(shape) != len(variables):
            raise ValueError(
                f"num_states must have {len(variables)} entries, "
                f"got {len(shape)}"
            )
        for v, n in zip(variables, shape):
            if int(v.max()) >= n:
                raise ValueError(
                    f"label {int(v.max())} out of range for {n} states"
                )

    flat = torch.zeros(n_samples, dtype=torch.int64, device=target.device)
    for v, n in zip(variables, shape):
        flat = flat * n + v.to(torch.int64)

    size = 1
    for n in shape:
        size *= n

    counts = torch.bincount(flat, minlength=size).to(torch.float64)

    return (counts / n_samples).reshape(shape)
