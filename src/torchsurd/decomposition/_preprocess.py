"""Validation and normalization of the input distribution."""

from typing import Literal, NamedTuple

import torch
from torch import Tensor

from torchsurd.information import conditional_entropy, joint_entropy

from ._exceptions import EmptyTensorError, InvalidOperationError

_MASS_TOLERANCE = 1e-14


class PreprocessResult(NamedTuple):
    """Normalized distribution and its information leak.

    Parameters
    ----------
    joint : Tensor
        ``float64`` joint distribution summing to 1, target on dimension 0.
    info_leak : float
        :math:`H(T \\mid S_1, \\ldots, S_N) / H(T)` clamped to ``[0, 1]``.
    """

    joint: Tensor
    info_leak: float


def preprocess(
    p_raw: Tensor,
    *,
    missing: Literal["raise", "ignore"] = "raise",
) -> PreprocessResult:
    r"""Validate and normalize a joint distribution and compute its leak.

    The information leak is the fraction of target entropy that no
    combination of observed sources explains:

    .. math::

        \text{leak} = \frac{H(T \mid S_1, \ldots, S_N)}{H(T)}

    It is 0 when :math:`H(T)` vanishes.

    Parameters
    ----------
    p_raw : Tensor
        Unnormalized joint distribution (or counts), target on dimension 0
        and one source variable on each remaining dimension.
    missing : {"raise", "ignore"}, default="raise"
        Handling of ``nan`` entries:

        - ``"raise"``: reject them
        - ``"ignore"``: treat them as unobserved cells carrying no mass

    Returns
    -------
    PreprocessResult
        The normalized ``float64`` copy and the information leak.

    Raises
    ------
    EmptyTensorError
        If ``p_raw`` has no elements.
    InvalidOperationError
        If the total mass is below ``1e-14``.
    """
    if not isinstance(p_raw, Tensor):
        raise TypeError(f"p_raw must be a Tensor, got {type(p_raw).__name__}")

    valid_missing = ("raise", "ignore")
    if missing not in valid_missing:
        raise ValueError(
            f"missing must be one of {valid_missing}, got '{missing}'"
        )

    if p_raw.numel() == 0:
        raise EmptyTensorError("p_raw has no elements")

    if p_raw.dim() < 2:
        raise ValueError(
            f"p_raw must have at least 2 dimensions (target and one source), "
            f"got {p_raw.dim()}"
        )

    if p_raw.is_complex():
        raise TypeError(f"p_raw must be real-valued, got {p_raw.dtype}")

    p = p_raw.detach().to(torch.float64, copy=True)

    nan = torch.isnan(p)
    if bool(nan.any()):
        if missing == "raise":
            raise ValueError(
                "p_raw contains nan entries; pass missing='ignore' to treat "
                "them as unobserved"
            )
        p = torch.where(nan, torch.zeros_like(p), p)

    if not bool(torch.isfinite(p).all()):
        raise ValueError("p_raw must not contain infinite entries")

    if bool((p < 0).any()):
        raise ValueError("p_raw must be non-negative")

    total = float(p.sum())
    if abs(total) < _MASS_TOLERANCE:
        raise InvalidOperationError(
            f"cannot normalize a distribution with total mass {total}"
        )

    p = p / total

    sources = list(range(1, p.dim()))

    h = joint_entropy(p, [0])
    hc = conditional_entropy(p, [0], sources)

    if h > _MASS_TOLERANCE:
        info_leak = min(max(hc / h, 0.0), 1.0)
    else:
        info_leak = 0.0

    return PreprocessResult(p, info_leak)
