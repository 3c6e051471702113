"""Merging of per-state results into the final decomposition."""

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence

import torch
from torch import Tensor

from torchsurd.combinatorics import VariableSet

from ._per_state import PerStateResult
from ._result import SurdResult

_SCALAR_FIELDS = ("redundant_info", "unique_info", "synergistic_info")

_TENSOR_FIELDS = (
    "causal_redundant_states",
    "causal_unique_states",
    "causal_synergistic_states",
    "non_causal_redundant_states",
    "non_causal_unique_states",
    "non_causal_synergistic_states",
)


def _stack(slices: List[Optional[Tensor]]) -> Tensor:
    # States that skipped the key contributed exactly zero.
    template = next(s for s in slices if s is not None)
    return torch.stack(
        [torch.zeros_like(template) if s is None else s for s in slices],
        dim=0,
    )


def merge_states(
    results: Sequence[PerStateResult],
    mutual_info: Mapping[VariableSet, float],
    info_leak: float,
) -> SurdResult:
    """Combine per-state results into a :class:`SurdResult`.

    Scalar contributions are summed per key. State slices are stacked per
    key along a new leading dimension indexed by target state, so entry
    ``t`` of every stacked map belongs to state ``t``. States that did not
    contribute to a key get a zero slice.

    Parameters
    ----------
    results : sequence of PerStateResult
        One result per target state ``0 .. n_target_states - 1``, in any
        order.
    mutual_info : mapping
        Mutual information per subset.
    info_leak : float
        Information leak of the distribution.

    Returns
    -------
    SurdResult

    Raises
    ------
    ValueError
        If a target state is repeated or missing from ``results``.
    """
    ordered = sorted(results, key=lambda r: r.target_state)

    states = [r.target_state for r in ordered]
    if len(set(states)) != len(states):
        raise ValueError(f"duplicate target states in results: {states}")
    if states != list(range(len(states))):
        raise ValueError(
            f"results must cover target states 0 .. {len(states) - 1}, "
            f"got {states}"
        )

    merged = {}

    for field in _SCALAR_FIELDS:
        totals: Dict[VariableSet, float] = {}
        for r in ordered:
            for key, value in getattr(r, field).items():
                totals[key] = totals.get(key, 0.0) + value
        merged[field] = MappingProxyType(totals)

    for field in _TENSOR_FIELDS:
        grouped: Dict[VariableSet, List[Optional[Tensor]]] = {}
        for r in ordered:
            for key, value in getattr(r, field).items():
                slots = grouped.setdefault(key, [None] * len(ordered))
                slots[r.target_state] = value
        merged[field] = MappingProxyType(
            {key: _stack(slices) for key, slices in grouped.items()}
        )

    return SurdResult(
        mutual_info=MappingProxyType(dict(mutual_info)),
        info_leak=float(info_leak),
        **merged,
    )
