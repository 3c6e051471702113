"""Redundant, unique and synergistic decomposition of one target state."""

from typing import Dict, Mapping, NamedTuple, Sequence

import torch
from torch import Tensor

from torchsurd.combinatorics import VariableSet

from ._ordering import exclude_dominated, first_difference, stable_arg_sort
from ._state_slice import state_slice

_INFO_TOLERANCE = 1e-14


class PerStateResult(NamedTuple):
    """Contributions of a single target state.

    Scalar maps hold this state's share of the aggregate information (in
    bits, already weighted by ``p(t)``); tensor maps hold the state
    slices computed by :func:`state_slice` with ``keepdim=True``, spanning
    every source dimension.
    """

    target_state: int
    redundant_info: Dict[VariableSet, float]
    unique_info: Dict[VariableSet, float]
    synergistic_info: Dict[VariableSet, float]
    causal_redundant_states: Dict[VariableSet, Tensor]
    causal_unique_states: Dict[VariableSet, Tensor]
    causal_synergistic_states: Dict[VariableSet, Tensor]
    non_causal_redundant_states: Dict[VariableSet, Tensor]
    non_causal_unique_states: Dict[VariableSet, Tensor]
    non_causal_synergistic_states: Dict[VariableSet, Tensor]


def decompose_state(
    target_state: int,
    combs: Sequence[VariableSet],
    specific: Mapping[VariableSet, Tensor],
    p_target: Tensor,
    joint: Tensor,
) -> PerStateResult:
    r"""Classify the information increments of one target state.

    The specific information :math:`i(T = t; S)` of every subset is sorted
    ascending, subsets dominated by a smaller subset are zeroed (see
    :func:`exclude_dominated`), and the values are re-sorted and differenced.
    Walking the increments in order:

    - a multi-variable subset contributes **synergy** to itself;
    - the last single variable contributes **unique** information;
    - every earlier single variable contributes **redundancy** shared by
      the variables not yet visited, and is then removed from that pool.

    Increments below ``1e-14`` bits are skipped.

    Parameters
    ----------
    target_state : int
        Index ``t`` of the target state.
    combs : sequence of tuple of int
        Source subsets.
    specific : mapping
        Specific information per subset, shape ``(n_target_states,)``.
    p_target : Tensor
        Marginal :math:`p(t)`, shape ``(n_target_states,)``.
    joint : Tensor
        Normalized joint distribution.

    Returns
    -------
    PerStateResult
    """
    n_vars = joint.dim() - 1
    p_t = float(p_target[target_state])

    values = torch.stack([specific[s][target_state] for s in combs])

    order = stable_arg_sort(values)
    labels = [combs[i] for i in order.tolist()]
    sorted_values = exclude_dominated(values[order], [len(s) for s in labels])

    order = stable_arg_sort(sorted_values)
    final_labels = [labels[i] for i in order.tolist()]
    increments = first_difference(sorted_values[order]).tolist()

    last_single = max(
        (i for i, s in enumerate(final_labels) if len(s) == 1), default=-1
    )

    result = PerStateResult(target_state, *({} for _ in range(9)))
    red_vars = tuple(range(1, n_vars + 1))

    for i, s in enumerate(final_labels):
        info = increments[i] * p_t
        if abs(info) < _INFO_TOLERANCE:
            continue

        previous = final_labels[i - 1] if i > 0 else ()
        causal, non_causal = state_slice(
            joint, s, previous, target_state, keepdim=True
        )

        # Each subset appears once and red_vars shrinks at every redundant
        # step, so no key is written twice.
        if len(s) > 1:
            result.synergistic_info[s] = info
            result.causal_synergistic_states[s] = causal
            result.non_causal_synergistic_states[s] = non_causal
        elif i == last_single:
            result.unique_info[s] = info
            result.causal_unique_states[s] = causal
            result.non_causal_unique_states[s] = non_causal
        else:
            result.redundant_info[red_vars] = info
            result.causal_redundant_states[red_vars] = causal
            result.non_causal_redundant_states[red_vars] = non_causal
            red_vars = tuple(v for v in red_vars if v != s[0])

    return result
