"""
Linear equation records for the 2x2 solver.

A LinearEquation ``(a, b, c)`` stands for ``a*x + b*y = c``. An
EquationPair holds exactly two of them. Named fields replace the
index-based ``[[a1, b1, c1], [a2, b2, c2]]`` layout; both forms are accepted
by the solver through :meth:`EquationPair.coerce`.
"""

import numbers
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Tuple

from ..errors import InvalidArgumentError


@dataclass(frozen=True)
class LinearEquation:
    """
    One linear equation ``a*x + b*y = c``.

    Attributes:
        a: Coefficient of x
        b: Coefficient of y
        c: Right-hand side
    """

    a: float
    b: float
    c: float

    def __post_init__(self):
        for name in ("a", "b", "c"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise InvalidArgumentError(
                    f"Coefficient {name} must be a real number, got {value!r}",
                    argument=name,
                    value=value,
                )

    @property
    def coefficients(self) -> Tuple[float, float, float]:
        return (self.a, self.b, self.c)

    def evaluate(self, x: float, y: float) -> float:
        """Return the residual ``a*x + b*y - c`` at (x, y)."""
        return self.a * x + self.b * y - self.c

    def to_dict(self) -> Dict[str, Any]:
        return {"a": self.a, "b": self.b, "c": self.c}

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> 'LinearEquation':
        """
        Create an equation from an ``(a, b, c)`` sequence.

        Raises:
            InvalidArgumentError: If ``values`` does not hold exactly 3 numbers
        """
        if isinstance(values, cls):
            return values
        try:
            coeffs = tuple(values)
        except TypeError:
            raise InvalidArgumentError(
                f"Equation must be a sequence (a, b, c), got {values!r}",
                argument="equation",
                value=values,
            ) from None
        if len(coeffs) != 3:
            raise InvalidArgumentError(
                f"Equation must have exactly 3 coefficients, got {len(coeffs)}",
                argument="equation",
                value=values,
            )
        return cls(a=coeffs[0], b=coeffs[1], c=coeffs[2])


@dataclass(frozen=True)
class EquationPair:
    """A system of two linear equations in x and y."""

    first: LinearEquation
    second: LinearEquation

    def __iter__(self):
        yield self.first
        yield self.second

    @property
    def determinant(self) -> float:
        """Determinant of the coefficient matrix ``[[a1, b1], [a2, b2]]``."""
        return self.first.a * self.second.b - self.second.a * self.first.b

    def swapped(self) -> 'EquationPair':
        """Return the same system with the equations in the other order."""
        return EquationPair(first=self.second, second=self.first)

    def to_list(self) -> List[List[float]]:
        return [list(self.first.coefficients), list(self.second.coefficients)]

    @classmethod
    def coerce(cls, value: Any) -> 'EquationPair':
        """
        Build an EquationPair from a pair or any sequence of two equations.

        Raises:
            InvalidArgumentError: If ``value`` does not describe exactly two equations
        """
        if isinstance(value, cls):
            return value
        try:
            rows = list(value)
        except TypeError:
            raise InvalidArgumentError(
                f"Expected two equations, got {value!r}",
                argument="eqs",
                value=value,
            ) from None
        if len(rows) != 2:
            raise InvalidArgumentError(
                f"Expected exactly 2 equations, got {len(rows)}",
                argument="eqs",
                value=value,
            )
        return cls(
            first=LinearEquation.from_sequence(rows[0]),
            second=LinearEquation.from_sequence(rows[1]),
        )
