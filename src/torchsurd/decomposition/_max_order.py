"""Maximum interaction order of the decomposition."""

import warnings
from dataclasses import dataclass
from typing import Literal, Optional, Union


@dataclass(frozen=True)
class MaxOrder:
    """Largest source-subset size enumerated by the decomposition.

    Enumerating every subset of ``n_vars`` sources costs ``O(2^n_vars)``;
    capping the subset size at ``k`` reduces this to ``O(n_vars^k)``.

    Parameters
    ----------
    k : int or None
        Maximum subset size, or ``None`` for all ``n_vars`` sources.

    Examples
    --------
    >>> MaxOrder.full().resolve(3)
    3
    >>> MaxOrder.capped(2).resolve(3)
    2
    >>> MaxOrder.pairwise().resolve(1)
    1
    """

    k: Optional[int] = None

    def __post_init__(self):
        if self.k is not None:
            if isinstance(self.k, bool) or not isinstance(self.k, int):
                raise TypeError(
                    f"k must be an int or None, got {type(self.k).__name__}"
                )
            if self.k < 1:
                raise ValueError(f"k must be at least 1, got {self.k}")

    @classmethod
    def full(cls) -> "MaxOrder":
        """Use every subset of the sources."""
        return cls(None)

    @classmethod
    def capped(cls, k: int) -> "MaxOrder":
        """Use subsets of at most ``k`` sources."""
        return cls(k)

    @classmethod
    def pairwise(cls) -> "MaxOrder":
        """Use single sources and pairs."""
        return cls(2)

    @property
    def is_full(self) -> bool:
        return self.k is None

    def resolve(self, n_vars: int) -> int:
        """Effective order for a system of ``n_vars`` sources.

        The result is clamped to ``[1, n_vars]``. Capping above ``n_vars``
        emits a ``RuntimeWarning`` unless the order is the pairwise default.
        """
        if n_vars < 1:
            raise ValueError(f"n_vars must be at least 1, got {n_vars}")

        if self.k is None:
            return n_vars

        if self.k > n_vars:
            if self.k != 2:
                warnings.warn(
                    f"max order {self.k} exceeds the number of source "
                    f"variables ({n_vars}); using {n_vars}",
                    RuntimeWarning,
                    stacklevel=2,
                )
            return n_vars

        return self.k


def as_max_order(
    max_order: Union[MaxOrder, int, Literal["full", "pairwise"]],
) -> MaxOrder:
    """Convert the accepted ``max_order`` spellings into a :class:`MaxOrder`."""
    if isinstance(max_order, MaxOrder):
        return max_order

    if isinstance(max_order, str):
        valid = ("full", "pairwise")
        if max_order not in valid:
            raise ValueError(
                f"max_order must be one of {valid}, got '{max_order}'"
            )
        return MaxOrder.full() if max_order == "full" else MaxOrder.pairwise()

    if isinstance(max_order, int) and not isinstance(max_order, bool):
        return MaxOrder.capped(max_order)

    raise TypeError(
        f"max_order must be a MaxOrder, int or str, "
        f"got {type(max_order).__name__}"
    )
