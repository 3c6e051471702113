"""Specific mutual information of each target state."""

from typing import Sequence

from torch import Tensor

from ._probability import log2_zero_guard, marginalize, safe_divide


def specific_information(joint: Tensor, sources: Sequence[int]) -> Tensor:
    r"""Compute the specific information every target state gets from ``sources``.

    For each state :math:`t` of the target (dimension 0):

    .. math::

        i(T = t; S) = \sum_{s} p(s \mid t)
            \log_2 \frac{p(t \mid s)}{p(t)}

    where :math:`S` is the joint variable formed by the source dimensions in
    ``sources``. Divisions follow the ``0 / 0 = 0`` convention and
    :math:`\log_2 0` is taken as 0, so configurations with zero mass
    contribute nothing.

    Parameters
    ----------
    joint : Tensor
        Normalized joint probability tensor with the target on dimension 0 and
        one source variable on each remaining dimension.
    sources : sequence of int
        Source dimensions (1-based, as in ``joint``) forming :math:`S`.

    Returns
    -------
    Tensor
        Shape ``(n_target_states,)``, in bits.

    Examples
    --------
    >>> # T is a copy of S1
    >>> joint = torch.tensor([[0.5, 0.0], [0.0, 0.5]], dtype=torch.float64)
    >>> specific_information(joint, [1])
    tensor([1., 1.], dtype=torch.float64)

    Notes
    -----
    The expectation over target states,
    :math:`\sum_t p(t)\, i(T = t; S)`, equals the mutual information
    :math:`I(T; S)`.
    """
    if not isinstance(joint, Tensor):
        raise TypeError(f"joint must be a Tensor, got {type(joint).__name__}")

    if joint.dim() < 2:
        raise ValueError(
            f"joint must have at least 2 dimensions, got {joint.dim()}"
        )

    source_dims = list(range(1, joint.dim()))
    sources = set(sources)
    if not sources:
        raise ValueError("sources must not be empty")
    if not sources.issubset(source_dims):
        raise ValueError(
            f"sources must be within {source_dims}, got {sorted(sources)}"
        )

    others = [d for d in source_dims if d not in sources]

    p_ts = marginalize(joint, others, keepdim=True)
    p_s = p_ts.sum(dim=0, keepdim=True)
    p_t = marginalize(joint, source_dims, keepdim=True)

    p_t_given_s = safe_divide(p_ts, p_s)
    p_s_given_t = safe_divide(p_ts, p_t)

    log_ratio = log2_zero_guard(p_t_given_s) - log2_zero_guard(p_t)

    return (p_s_given_t * log_ratio).sum(dim=tuple(source_dims))
