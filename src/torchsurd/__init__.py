"""torchsurd: SURD causal decomposition of information for PyTorch."""

from . import (
    analysis,
    combinatorics,
    decomposition,
    information,
)
from .decomposition import MaxOrder, SurdResult, surd_states

__all__ = [
    "MaxOrder",
    "SurdResult",
    "analysis",
    "combinatorics",
    "decomposition",
    "information",
    "surd_states",
]

__version__ = "0.1.0"
