"""SURD-states decomposition operator."""

from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import List, Literal, Optional, Union

from torch import Tensor

from ._aggregate import merge_states
from ._enumerate import enumerate_variable_sets, specific_information_map
from ._max_order import MaxOrder
from ._per_state import PerStateResult, decompose_state
from ._preprocess import preprocess
from ._result import SurdResult


def surd_states(
    p_raw: Tensor,
    max_order: Union[MaxOrder, int, Literal["full", "pairwise"]] = "full",
    *,
    missing: Literal["raise", "ignore"] = "raise",
    num_workers: Optional[int] = None,
) -> SurdResult:
    r"""Decompose mutual information into synergistic, unique and redundant parts.

    Implements the SURD-states decomposition [1]_ of the mutual information
    between a target variable :math:`T` and sources
    :math:`S_1, \ldots, S_N`, both per target state and aggregated.

    For every subset :math:`S` of at most ``k`` sources, the specific
    information

    .. math::

        i(T = t; S) = \sum_s p(s \mid t) \log_2 \frac{p(t \mid s)}{p(t)}

    is computed. For each target state the values are sorted, subsets that
    do not exceed the best smaller subset are discarded, and the increments
    between consecutive values are assigned to redundant, unique or
    synergistic components. Each increment is also resolved into a
    state-dependent map

    .. math::

        p(t, a, b) \log_2 \frac{p(t \mid a)}{p(t \mid b)}

    split into a causal part (positive log ratio) and a non-causal part
    (negative log ratio).

    Parameters
    ----------
    p_raw : Tensor
        Joint probability distribution (or co-occurrence counts) of discrete
        variables. Dimension 0 is the target; each further dimension is one
        source. Normalized internally.
    max_order : MaxOrder, int or {"full", "pairwise"}, default="full"
        Largest subset size considered. Capping the order reduces the cost
        from :math:`O(2^N)` to :math:`O(N^k)`. Orders above ``N`` are clamped.
    missing : {"raise", "ignore"}, default="raise"
        Handling of ``nan`` entries in ``p_raw``:

        - ``"raise"``: reject them
        - ``"ignore"``: treat them as unobserved cells carrying no mass
    num_workers : int or None, default=None
        Number of threads evaluating target states concurrently. ``None`` or
        ``1`` evaluates them sequentially. The result does not depend on
        this setting.

    Returns
    -------
    SurdResult
        Aggregated information maps, the information leak and the
        state-dependent causal and non-causal maps.

    Raises
    ------
    EmptyTensorError
        If ``p_raw`` has no elements.
    InvalidOperationError
        If the total mass of ``p_raw`` is below ``1e-14``.

    Examples
    --------
    >>> p = torch.tensor(
    ...     [[[0.1, 0.2], [0.0, 0.2]], [[0.3, 0.0], [0.1, 0.1]]],
    ...     dtype=torch.float64,
    ... )
    >>> result = surd_states(p)
    >>> (1, 2) in result.synergistic_info
    True

    >>> # XOR: the target is only predictable from both sources together
    >>> xor = torch.zeros(2, 2, 2, dtype=torch.float64)
    >>> xor[0, 0, 0] = xor[0, 1, 1] = xor[1, 0, 1] = xor[1, 1, 0] = 0.25
    >>> round(surd_states(xor).synergistic_info[(1, 2)], 6)
    1.0

    Notes
    -----
    - The input must already be discretized.
    - Sum of redundant, unique and synergistic information equals the
      mutual information with all enumerated sources when
      ``max_order`` covers every source.
    - An information leak of 1 means the sources explain nothing about the
      target.

    See Also
    --------
    torchsurd.information.joint_distribution : Build ``p_raw`` from samples.
    torchsurd.analysis.surd_report : Human-readable summary of a result.

    References
    ----------
    .. [1] Martínez-Sánchez, Á., Arranz, G., & Lozano-Durán, A. (2024).
           Decomposing causality into its synergistic, unique, and redundant
           components. Nature Communications, 15, 9296.
    """
    if num_workers is not None:
        if isinstance(num_workers, bool) or not isinstance(num_workers, int):
            raise TypeError(
                f"num_workers must be an int or None, "
                f"got {type(num_workers).__name__}"
            )
        if num_workers < 1:
            raise ValueError(
                f"num_workers must be at least 1, got {num_workers}"
            )

    joint, info_leak = preprocess(p_raw, missing=missing)

    n_vars = joint.dim() - 1
    n_target_states = joint.shape[0]

    _, combs = enumerate_variable_sets(n_vars, max_order)
    specific, mutual = specific_information_map(joint, combs)

    p_target = joint.sum(dim=tuple(range(1, joint.dim())))

    args = (combs, specific, p_target, joint)

    if num_workers is None or num_workers == 1 or n_target_states == 1:
        results = [decompose_state(t, *args) for t in range(n_target_states)]
    else:
        results = _decompose_parallel(n_target_states, num_workers, args)

    return merge_states(results, mutual, info_leak)


def _decompose_parallel(
    n_target_states: int,
    num_workers: int,
    args: tuple,
) -> List[PerStateResult]:
    results: List[Optional[PerStateResult]] = [None] * n_target_states

    with ThreadPoolExecutor(
        max_workers=min(num_workers, n_target_states)
    ) as executor:
        futures = {
            executor.submit(decompose_state, t, *args): t
            for t in range(n_target_states)
        }

        done, pending = wait(futures, return_when=FIRST_EXCEPTION)

        for future in done:
            error = future.exception()
            if error is not None:
                for other in pending:
                    other.cancel()
                raise error

        for future in futures:
            results[futures[future]] = future.result()

    return results
