"""Entropy of a marginal of a joint distribution."""

import math
from typing import Optional, Sequence

from torch import Tensor

from ._probability import log2_zero_guard, marginalize


def joint_entropy(
    p: Tensor,
    dims: Sequence[int],
    *,
    base: Optional[float] = 2.0,
) -> float:
    r"""Compute the Shannon entropy of the variables indexed by ``dims``.

    The joint distribution is first marginalized onto ``dims`` and then

    .. math::

        H(X_{\text{dims}}) = -\sum_x p(x) \log p(x)

    with the convention :math:`0 \log 0 = 0`.

    Parameters
    ----------
    p : Tensor
        Normalized joint probability tensor; each dimension is one variable.
    dims : sequence of int
        Dimensions (variables) whose joint entropy is computed.
    base : float or None, default=2.0
        Logarithm base. ``2`` gives bits, ``None`` gives nats.

    Returns
    -------
    float
        The entropy.

    Examples
    --------
    >>> p = torch.full((2, 2), 0.25, dtype=torch.float64)
    >>> joint_entropy(p, [0])
    1.0
    >>> joint_entropy(p, [0, 1])
    2.0
    """
    if not isinstance(p, Tensor):
        raise TypeError(f"p must be a Tensor, got {type(p).__name__}")

    if base is not None and (base <= 0 or base == 1):
        raise ValueError(
            f"base must be positive and not equal to 1, got {base}"
        )

    keep = {d if d >= 0 else p.dim() + d for d in dims}
    marginal = marginalize(p, [d for d in range(p.dim()) if d not in keep])

    h = 0.0 - float((marginal * log2_zero_guard(marginal)).sum())

    if base is None:
        return h * math.log(2.0)

    if base != 2:
        return h / math.log2(base)

    return h
