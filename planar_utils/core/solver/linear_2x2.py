"""planar_utils.core.solver.linear_2x2

Closed-form solver for two linear equations in two unknowns.

The system ``a1*x + b1*y = c1``, ``a2*x + b2*y = c2`` is reduced by one
Gaussian elimination step:

  factor = -a2 / a1
  row2  += factor * row1      ->  (0, b2', c2')

then ``y = c2' / b2'`` and ``x = (c1 - b1*y) / a1``.

After elimination the reduced x coefficient is exactly zero, so the only
degenerate case left is ``b2' == 0``: coincident lines when ``c2' == 0``,
parallel lines otherwise. Neither is an error.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from ..errors import DegenerateSystemError
from ..models.equation import EquationPair
from ..models.options import ComputeOptions
from ..results.solution import LinearSolution, LinearSystemKind

logger = logging.getLogger(__name__)


def solve_linear_system(eqs, options: Optional[ComputeOptions] = None) -> LinearSolution:
    """Solve and classify a system of two linear equations.

    Args:
        eqs: An EquationPair or a sequence ``[[a1, b1, c1], [a2, b2, c2]]``.
            Never modified.
        options: Solver options (defaults if None)

    Returns:
        LinearSolution with kind UNIQUE and ``x``, ``y`` set, or kind
        COINCIDENT / INCONSISTENT with no coordinates.

    Raises:
        InvalidArgumentError: If ``eqs`` is not two 3-coefficient equations
        DegenerateSystemError: If ``a1 == 0`` and pivoting is disabled, or
            both x coefficients are zero
    """
    options = options or ComputeOptions.default()
    pair = EquationPair.coerce(eqs)

    pivoted = False
    if pair.first.a == 0:
        if pair.second.a == 0:
            raise DegenerateSystemError(
                "Both equations have a zero x coefficient; x is not determined by the system",
                equations=pair,
            )
        if not options.allow_pivoting:
            raise DegenerateSystemError(
                "Leading coefficient a1 is zero and pivoting is disabled",
                equations=pair,
            )
        logger.debug("a1 == 0, swapping equations before elimination")
        pair = pair.swapped()
        pivoted = True

    first, second = pair.first, pair.second

    factor = -second.a / first.a
    b2 = second.b + factor * first.b
    c2 = second.c + factor * first.c

    tol = options.zero_tolerance
    if abs(b2) <= tol:
        kind = LinearSystemKind.COINCIDENT if abs(c2) <= tol else LinearSystemKind.INCONSISTENT
        logger.debug("No unique solution (%s): reduced row (0, %r, %r)", kind.value, b2, c2)
        return LinearSolution(kind=kind, pivoted=pivoted)

    y = c2 / b2
    x = (first.c - first.b * y) / first.a
    return LinearSolution(kind=LinearSystemKind.UNIQUE, x=x, y=y, pivoted=pivoted)


def solve_two_linear_eqs(eqs, options: Optional[ComputeOptions] = None) -> Optional[Tuple[float, float]]:
    """Solve two linear equations, returning ``(x, y)`` or None.

    None means the system has no unique solution (coincident or parallel
    lines). See :func:`solve_linear_system` for the classified result.
    """
    return solve_linear_system(eqs, options).as_tuple()
