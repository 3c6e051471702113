from ._combinations import (
    VariableSet,
    combinations,
    set_difference,
    variable_set,
)

__all__ = [
    "VariableSet",
    "combinations",
    "set_difference",
    "variable_set",
]
