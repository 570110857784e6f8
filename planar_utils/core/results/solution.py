"""
Result classes for the 2x2 linear solver.

A system either has a unique solution or it does not. "No unique solution"
is split into coincident lines (infinitely many solutions) and parallel
lines (none).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class LinearSystemKind(Enum):
    """
    Classification of a two-equation linear system.

    - UNIQUE: Lines intersect in exactly one point
    - COINCIDENT: Both equations describe the same line
    - INCONSISTENT: Lines are parallel and distinct
    """
    UNIQUE = "unique"
    COINCIDENT = "coincident"
    INCONSISTENT = "inconsistent"


@dataclass(frozen=True)
class LinearSolution:
    """
    Outcome of solving a two-equation linear system.

    Attributes:
        kind: Classification of the system
        x: Solved x, None unless kind is UNIQUE
        y: Solved y, None unless kind is UNIQUE
        pivoted: True if the equations were swapped before elimination
    """

    kind: LinearSystemKind
    x: Optional[float] = None
    y: Optional[float] = None
    pivoted: bool = False

    @property
    def is_unique(self) -> bool:
        return self.kind is LinearSystemKind.UNIQUE

    def as_tuple(self) -> Optional[Tuple[float, float]]:
        """Return ``(x, y)`` for a unique solution, otherwise None."""
        if not self.is_unique:
            return None
        return (self.x, self.y)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize solution to dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "kind": self.kind.value,
            "x": self.x,
            "y": self.y,
            "pivoted": self.pivoted,
        }
