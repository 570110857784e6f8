"""Generic sequence utilities."""

from .sequences import transpose, array_equals

__all__ = [
    "transpose",
    "array_equals",
]
