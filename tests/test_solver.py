"""Tests for the closed-form 2x2 linear solver.

Covers the unique case, both "no unique solution" outcomes, pivoting when
the first x coefficient is zero, and the case where the second equation's
original y coefficient is zero.
"""

import pytest
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from planar_utils.core.errors import DegenerateSystemError, InvalidArgumentError
from planar_utils.core.models import ComputeOptions, EquationPair, LinearEquation
from planar_utils.core.results import LinearSolution, LinearSystemKind
from planar_utils.core.solver import solve_linear_system, solve_two_linear_eqs


class TestSolveTwoLinearEqs:
    """Tests for solve_two_linear_eqs."""

    def test_unique_solution(self):
        """x + y = 3, x - y = 1  =>  x = 2, y = 1."""
        assert solve_two_linear_eqs([[1, 1, 3], [1, -1, 1]]) == (2, 1)

    def test_coincident_lines_return_none(self):
        assert solve_two_linear_eqs([[1, 2, 3], [2, 4, 6]]) is None

    def test_parallel_lines_return_none(self):
        assert solve_two_linear_eqs([[1, 2, 3], [2, 4, 7]]) is None

    def test_fractional_solution(self):
        x, y = solve_two_linear_eqs([[2, 3, 7], [5, -1, 4]])
        assert x == pytest.approx(19 / 17)
        assert y == pytest.approx(27 / 17)

    def test_solution_satisfies_both_equations(self):
        pair = EquationPair.coerce([[3.5, -1.25, 2.0], [-0.75, 4.0, 9.5]])
        x, y = solve_two_linear_eqs(pair)
        assert pair.first.evaluate(x, y) == pytest.approx(0.0, abs=1e-12)
        assert pair.second.evaluate(x, y) == pytest.approx(0.0, abs=1e-12)

    def test_original_b2_zero(self):
        """Second equation has no y term; elimination still leaves b2' != 0."""
        assert solve_two_linear_eqs([[1, 1, 3], [2, 0, 4]]) == (2, 1)

    def test_accepts_tuples_and_equation_pair(self):
        eqs = ((1, 1, 3), (1, -1, 1))
        pair = EquationPair(LinearEquation(1, 1, 3), LinearEquation(1, -1, 1))
        assert solve_two_linear_eqs(eqs) == solve_two_linear_eqs(pair) == (2, 1)

    def test_input_not_modified(self):
        eqs = [[1, 1, 3], [1, -1, 1]]
        solve_two_linear_eqs(eqs)
        assert eqs == [[1, 1, 3], [1, -1, 1]]

    def test_wrong_number_of_equations(self):
        with pytest.raises(InvalidArgumentError, match="exactly 2 equations"):
            solve_two_linear_eqs([[1, 1, 3]])

    def test_wrong_number_of_coefficients(self):
        with pytest.raises(InvalidArgumentError, match="exactly 3 coefficients"):
            solve_two_linear_eqs([[1, 1, 3], [1, -1]])


class TestLeadingCoefficient:
    """Zero a1 handling."""

    def test_zero_a1_pivots(self):
        """2y = 4, x + y = 3  =>  x = 1, y = 2."""
        solution = solve_linear_system([[0, 2, 4], [1, 1, 3]])
        assert solution.kind is LinearSystemKind.UNIQUE
        assert solution.pivoted is True
        assert solution.as_tuple() == (1, 2)

    def test_zero_a1_without_pivoting_raises(self):
        options = ComputeOptions(allow_pivoting=False)
        with pytest.raises(DegenerateSystemError, match="pivoting is disabled") as exc_info:
            solve_two_linear_eqs([[0, 2, 4], [1, 1, 3]], options)
        assert exc_info.value.equations == EquationPair.coerce([[0, 2, 4], [1, 1, 3]])

    def test_both_x_coefficients_zero_raises(self):
        with pytest.raises(DegenerateSystemError, match="zero x coefficient"):
            solve_two_linear_eqs([[0, 1, 2], [0, 3, 4]])

    def test_degenerate_error_is_zero_division(self):
        with pytest.raises(ZeroDivisionError):
            solve_two_linear_eqs([[0, 1, 2], [0, 3, 4]])


class TestSolveLinearSystem:
    """Tests for the classified solver result."""

    def test_unique(self):
        solution = solve_linear_system([[1, 1, 3], [1, -1, 1]])
        assert solution == LinearSolution(kind=LinearSystemKind.UNIQUE, x=2.0, y=1.0)
        assert solution.is_unique

    def test_coincident(self):
        solution = solve_linear_system([[1, 2, 3], [2, 4, 6]])
        assert solution.kind is LinearSystemKind.COINCIDENT
        assert solution.x is None and solution.y is None
        assert solution.as_tuple() is None

    def test_inconsistent(self):
        solution = solve_linear_system([[1, 2, 3], [2, 4, 7]])
        assert solution.kind is LinearSystemKind.INCONSISTENT
        assert solution.as_tuple() is None

    def test_parallel_after_pivot(self):
        solution = solve_linear_system([[0, 0, 1], [1, 1, 1]])
        # Swapped: x + y = 1, 0 = 1
        assert solution.pivoted is True
        assert solution.kind is LinearSystemKind.INCONSISTENT

    def test_tolerance_treats_near_zero_as_zero(self):
        eqs = [[1.0, 1.0, 1.0], [1.0, 1.0 + 1e-12, 1.0]]
        assert solve_linear_system(eqs).kind is LinearSystemKind.UNIQUE
        loose = ComputeOptions(zero_tolerance=1e-9)
        assert solve_linear_system(eqs, loose).kind is LinearSystemKind.COINCIDENT

    def test_to_dict(self):
        data = solve_linear_system([[1, 2, 3], [2, 4, 7]]).to_dict()
        assert data == {"kind": "inconsistent", "x": None, "y": None, "pivoted": False}
