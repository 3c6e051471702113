"""Conditional entropy of variables in a joint distribution."""

from typing import Optional, Sequence

from torch import Tensor

from ._joint_entropy import joint_entropy


def conditional_entropy(
    p: Tensor,
    target_dims: Sequence[int],
    condition_dims: Sequence[int],
    *,
    base: Optional[float] = 2.0,
) -> float:
    r"""Compute :math:`H(X \mid Y)` from a joint probability tensor.

    .. math::

        H(X \mid Y) = H(X, Y) - H(Y)

    Parameters
    ----------
    p : Tensor
        Normalized joint probability tensor.
    target_dims : sequence of int
        Dimensions of :math:`X`.
    condition_dims : sequence of int
        Dimensions of :math:`Y`. An empty sequence gives :math:`H(X)`.
    base : float or None, default=2.0
        Logarithm base.

    Returns
    -------
    float
        The conditional entropy.

    Examples
    --------
    >>> # Y is a copy of X: no uncertainty left
    >>> p = torch.tensor([[0.5, 0.0], [0.0, 0.5]], dtype=torch.float64)
    >>> conditional_entropy(p, [0], [1])
    0.0

    See Also
    --------
    joint_entropy : Entropy of a marginal.
    """
    both = list(target_dims) + [
        d for d in condition_dims if d not in target_dims
    ]
    return joint_entropy(p, both, base=base) - joint_entropy(
        p, condition_dims, base=base
    )
