"""Information-theoretic primitives for discrete joint distributions."""

from ._conditional_entropy import conditional_entropy
from ._joint_distribution import joint_distribution
from ._joint_entropy import joint_entropy
from ._probability import log2_zero_guard, marginalize, safe_divide
from ._specific_information import specific_information

__all__ = [
    "conditional_entropy",
    "joint_distribution",
    "joint_entropy",
    "log2_zero_guard",
    "marginalize",
    "safe_divide",
    "specific_information",
]
