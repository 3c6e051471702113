"""SURD-states decomposition of mutual information."""

from ._aggregate import merge_states
from ._enumerate import enumerate_variable_sets, specific_information_map
from ._exceptions import EmptyTensorError, InvalidOperationError, SurdError
from ._max_order import MaxOrder
from ._ordering import exclude_dominated, first_difference, stable_arg_sort
from ._per_state import PerStateResult, decompose_state
from ._preprocess import PreprocessResult, preprocess
from ._result import SurdResult
from ._state_slice import state_slice
from ._surd_states import surd_states

__all__ = [
    "EmptyTensorError",
    "InvalidOperationError",
    "MaxOrder",
    "PerStateResult",
    "PreprocessResult",
    "SurdError",
    "SurdResult",
    "decompose_state",
    "enumerate_variable_sets",
    "exclude_dominated",
    "first_difference",
    "merge_states",
    "preprocess",
    "specific_information_map",
    "stable_arg_sort",
    "state_slice",
    "surd_states",
]
