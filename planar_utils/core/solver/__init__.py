"""planar_utils.core.solver

Closed-form 2x2 linear solver.
"""

from .linear_2x2 import solve_two_linear_eqs, solve_linear_system

__all__ = [
    "solve_two_linear_eqs",
    "solve_linear_system",
]
