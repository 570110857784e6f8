"""
Result classes for planar_utils.

This module provides the output data structures:
- LinearSystemKind: Classification of a 2x2 system
- LinearSolution: Detailed outcome of the 2x2 solver
"""

from .solution import LinearSystemKind, LinearSolution

__all__ = [
    "LinearSystemKind",
    "LinearSolution",
]
