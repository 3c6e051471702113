"""State-dependent causal and non-causal information maps."""

from typing import Sequence, Tuple

import torch
from torch import Tensor

from torchsurd.combinatorics import set_difference
from torchsurd.information import log2_zero_guard, marginalize, safe_divide


def _conditional(
    joint_t: Tensor,
    p_sources: Tensor,
    variables: Sequence[int],
) -> Tensor:
    # p(t | variables) with size-1 dimensions for every other source
    others = set_difference(range(joint_t.dim()), variables)
    return safe_divide(
        marginalize(joint_t, others, keepdim=True),
        marginalize(p_sources, others, keepdim=True),
    )


def state_slice(
    joint: Tensor,
    current: Sequence[int],
    previous: Sequence[int],
    target_state: int,
    *,
    keepdim: bool = False,
) -> Tuple[Tensor, Tensor]:
    r"""Causal and non-causal information map of one target state.

    Computes, for every configuration of the sources in
    :math:`A \cup B` (``current`` and ``previous``),

    .. math::

        p(t, a, b) \log_2 \frac{p(t \mid a)}{p(t \mid b)}

    and splits it by the sign of the log ratio. When ``previous`` is empty,
    :math:`p(t \mid b)` is the marginal :math:`p(t)`.

    Parameters
    ----------
    joint : Tensor
        Normalized joint distribution, target on dimension 0.
    current : sequence of int
        Source dimensions (1-based) of the information term being classified.
    previous : sequence of int
        Source dimensions (1-based) of the term preceding it in the sorted
        order. May be empty.
    target_state : int
        Index ``t`` of the target state.
    keepdim : bool, default=False
        If ``True`` the result spans every source dimension: the log ratio
        is spread over the sources outside ``current`` and ``previous``
        with the full joint :math:`p(t, a, b, c)` as weight. Summing over
        those sources gives the ``keepdim=False`` result.

    Returns
    -------
    causal : Tensor
        :math:`p(t, a, b) \max(\log_2 r, 0)`.
    non_causal : Tensor
        :math:`p(t, a, b) \min(\log_2 r, 0)`.

    Without ``keepdim`` both are indexed by the configurations of
    ``current`` and ``previous`` in ascending source order.
    """
    if not isinstance(joint, Tensor):
        raise TypeError(f"joint must be a Tensor, got {type(joint).__name__}")

    n_target_states = joint.shape[0]
    if not -n_target_states <= target_state < n_target_states:
        raise IndexError(
            f"target_state {target_state} out of range for "
            f"{n_target_states} target states"
        )

    n_sources = joint.dim() - 1
    for v in (*current, *previous):
        if not 1 <= v <= n_sources:
            raise ValueError(
                f"source dimension {v} out of range [1, {n_sources}]"
            )

    if not current:
        raise ValueError("current must not be empty")

    # Source dimensions shift down by one once the target is selected.
    current = sorted({v - 1 for v in current})
    previous = sorted({v - 1 for v in previous})

    joint_t = joint[target_state]
    p_sources = joint.sum(dim=0)

    p_t_given_current = _conditional(joint_t, p_sources, current)

    if previous:
        p_t_given_previous = _conditional(joint_t, p_sources, previous)
    else:
        p_t_given_previous = joint_t.sum()

    log_ratio = log2_zero_guard(
        safe_divide(p_t_given_current, p_t_given_previous)
    )

    # log_ratio is constant along the uninvolved sources.
    causal = joint_t * torch.clamp(log_ratio, min=0.0)
    non_causal = joint_t * torch.clamp(log_ratio, max=0.0)

    if not keepdim:
        involved = set(current) | set(previous)
        others = set_difference(range(joint_t.dim()), involved)
        causal = marginalize(causal, others)
        non_causal = marginalize(non_causal, others)

    return causal, non_causal
