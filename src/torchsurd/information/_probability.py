"""Elementary operations on discrete probability tensors."""

from typing import Sequence

import torch
from torch import Tensor


def marginalize(
    p: Tensor,
    dims: Sequence[int],
    *,
    keepdim: bool = False,
) -> Tensor:
    r"""Sum a probability tensor over the given dimensions.

    Unlike ``Tensor.sum``, an empty ``dims`` returns ``p`` unchanged instead
    of reducing every dimension.

    Parameters
    ----------
    p : Tensor
        Probability tensor.
    dims : sequence of int
        Dimensions to sum out. Duplicates are ignored.
    keepdim : bool, default=False
        Keep the summed dimensions with size 1.

    Returns
    -------
    Tensor
        Marginal distribution over the remaining dimensions.

    Examples
    --------
    >>> p = torch.tensor([[0.1, 0.2], [0.3, 0.4]])
    >>> marginalize(p, [1])
    tensor([0.3000, 0.7000])
    >>> marginalize(p, []) is p
    True
    """
    if not isinstance(p, Tensor):
        raise TypeError(f"p must be a Tensor, got {type(p).__name__}")

    dims = sorted({d if d >= 0 else p.dim() + d for d in dims})

    for d in dims:
        if d < 0 or d >= p.dim():
            raise IndexError(
                f"dim {d} out of range for tensor with {p.dim()} dimensions"
            )

    if not dims:
        return p

    return p.sum(dim=tuple(dims), keepdim=keepdim)


def safe_divide(numerator: Tensor, denominator: Tensor) -> Tensor:
    r"""Broadcasting division that maps a zero denominator to zero.

    .. math::

        \operatorname{safe\_divide}(a, b) =
        \begin{cases}
            a / b & b \neq 0 \\
            0 & b = 0
        \end{cases}

    For probability tensors a zero denominator only occurs together with a
    zero numerator, so this implements the ``0 / 0 = 0`` convention.

    Examples
    --------
    >>> safe_divide(torch.tensor([1.0, 0.0]), torch.tensor([2.0, 0.0]))
    tensor([0.5000, 0.0000])
    """
    zero = denominator == 0
    quotient = numerator / torch.where(
        zero, torch.ones_like(denominator), denominator
    )
    return torch.where(zero, torch.zeros_like(quotient), quotient)


def log2_zero_guard(x: Tensor) -> Tensor:
    r"""Elementwise base-2 logarithm with :math:`\log_2(0) = 0`.

    Non-positive entries map to zero so that terms weighted by a zero
    probability never produce ``nan`` or ``-inf``.

    Examples
    --------
    >>> log2_zero_guard(torch.tensor([0.0, 0.5, 4.0]))
    tensor([ 0., -1.,  2.])
    """
    positive = x > 0
    return torch.where(
        positive,
        torch.log2(torch.where(positive, x, torch.ones_like(x))),
        torch.zeros_like(x),
    )
