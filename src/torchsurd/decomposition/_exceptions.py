"""Decomposition module exceptions."""

__all__ = ["SurdError", "EmptyTensorError", "InvalidOperationError"]


class SurdError(ValueError):
    """Base exception for decomposition errors."""

    pass


class EmptyTensorError(SurdError):
    """Raised when the input distribution has no elements."""

    pass


class InvalidOperationError(SurdError):
    """Raised when the input distribution carries too little mass to normalize."""

    pass
