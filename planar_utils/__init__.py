"""
Planar Utils - numeric and planar-geometry helpers

Small pure functions: integer gcd/lcm, matrix transposition, sequence
equality, shoelace area, Manhattan perimeter, Pick's theorem and a
closed-form 2x2 linear solver.

Conventions:
- Polygon paths are closed loops: the first point is repeated at the end
- Pick's theorem needs every boundary lattice point, not just the corners
- Coordinates: X to the right, Y up; counter-clockwise area is positive
- "No unique solution" from the solver is None, not an exception
"""

__version__ = "1.0.0"

from .core.errors import PlanarUtilsError, InvalidArgumentError, DegenerateSystemError
from .core.models import Point, LinearEquation, EquationPair, ComputeOptions
from .core.results import LinearSystemKind, LinearSolution
from .core.arithmetic import gcd, lcm
from .core.arrays import transpose, array_equals
from .core.geometry import (
    shoelace_area,
    polygon_perimeter,
    interior_points,
    boundary_points,
    lattice_interior_points,
)
from .core.solver import solve_two_linear_eqs, solve_linear_system

__all__ = [
    # Version
    "__version__",

    # Errors
    "PlanarUtilsError",
    "InvalidArgumentError",
    "DegenerateSystemError",

    # Models
    "Point",
    "LinearEquation",
    "EquationPair",
    "ComputeOptions",

    # Results
    "LinearSystemKind",
    "LinearSolution",

    # Functions
    "gcd",
    "lcm",
    "transpose",
    "array_equals",
    "shoelace_area",
    "polygon_perimeter",
    "interior_points",
    "boundary_points",
    "lattice_interior_points",
    "solve_two_linear_eqs",
    "solve_linear_system",
]
