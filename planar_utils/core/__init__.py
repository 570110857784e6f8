"""
Core module for planar_utils.

This module contains the pure functions and the data types they accept
and return. Nothing here performs I/O or keeps state between calls.
"""

from .errors import PlanarUtilsError, InvalidArgumentError, DegenerateSystemError

from .models import (
    Point,
    is_closed_loop,
    close_path,
    LinearEquation,
    EquationPair,
    ComputeOptions,
)

from .results import LinearSystemKind, LinearSolution

from .arithmetic import gcd, lcm

from .arrays import transpose, array_equals

from .geometry import (
    shoelace_area,
    signed_doubled_area,
    polygon_perimeter,
    interior_points,
    boundary_points,
    boundary_point_count,
    lattice_interior_points,
)

from .solver import solve_two_linear_eqs, solve_linear_system

__all__ = [
    # Errors
    "PlanarUtilsError",
    "InvalidArgumentError",
    "DegenerateSystemError",

    # Models
    "Point",
    "is_closed_loop",
    "close_path",
    "LinearEquation",
    "EquationPair",
    "ComputeOptions",

    # Results
    "LinearSystemKind",
    "LinearSolution",

    # Arithmetic
    "gcd",
    "lcm",

    # Arrays
    "transpose",
    "array_equals",

    # Geometry
    "shoelace_area",
    "signed_doubled_area",
    "polygon_perimeter",
    "interior_points",
    "boundary_points",
    "boundary_point_count",
    "lattice_interior_points",

    # Solver
    "solve_two_linear_eqs",
    "solve_linear_system",
]
