from typing import Mapping, NamedTuple

from torch import Tensor

from torchsurd.combinatorics import VariableSet


class SurdResult(NamedTuple):
    """Result of the SURD-states decomposition.

    All mappings are read-only and keyed by sorted tuples of 1-based source
    dimensions. Information values are in bits.

    Parameters
    ----------
    redundant_info : Mapping[tuple of int, float]
        Redundant information shared by each pool of sources.
    unique_info : Mapping[tuple of int, float]
        Unique information of single sources.
    synergistic_info : Mapping[tuple of int, float]
        Synergistic information of source combinations.
    mutual_info : Mapping[tuple of int, float]
        Mutual information :math:`I(T; S)` of every enumerated subset.
    info_leak : float
        Fraction of the target entropy not explained by the sources.
    causal_redundant_states, causal_unique_states, causal_synergistic_states : Mapping[tuple of int, Tensor]
        Positive (causal) state-dependent maps of shape
        ``(n_target_states, n_1, ..., n_N)``. Entry ``t`` of the leading
        dimension belongs to target state ``t`` and is zero when that state
        did not contribute to the key.
    non_causal_redundant_states, non_causal_unique_states, non_causal_synergistic_states : Mapping[tuple of int, Tensor]
        Negative (non-causal) counterparts, same layout.
    """

    redundant_info: Mapping[VariableSet, float]
    unique_info: Mapping[VariableSet, float]
    synergistic_info: Mapping[VariableSet, float]
    mutual_info: Mapping[VariableSet, float]
    info_leak: float
    causal_redundant_states: Mapping[VariableSet, Tensor]
    causal_unique_states: Mapping[VariableSet, Tensor]
    causal_synergistic_states: Mapping[VariableSet, Tensor]
    non_causal_redundant_states: Mapping[VariableSet, Tensor]
    non_causal_unique_states: Mapping[VariableSet, Tensor]
    non_causal_synergistic_states: Mapping[VariableSet, Tensor]
