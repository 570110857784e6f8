"""
Data models for the planar helpers.

This module provides the core data structures:
- Point: Immutable planar coordinate pair
- LinearEquation / EquationPair: Input records for the 2x2 solver
- ComputeOptions: Validation and solver configuration
"""

from .point import Point, is_closed_loop, close_path
from .equation import LinearEquation, EquationPair
from .options import ComputeOptions

__all__ = [
    # Point
    "Point",
    "is_closed_loop",
    "close_path",

    # Equations
    "LinearEquation",
    "EquationPair",

    # Options
    "ComputeOptions",
]
