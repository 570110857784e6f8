"""
Computation options for the planar helpers.

This module defines the switches that control input validation for the
polygon functions and the pivot/tolerance behaviour of the 2x2 solver.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict

from ..errors import InvalidArgumentError


@dataclass
class ComputeOptions:
    """
    Configuration options shared by the geometry and solver functions.

    Attributes:
        zero_tolerance: Absolute magnitude at or below which a reduced
            coefficient counts as zero in the solver (default: 0.0, exact)
        allow_pivoting: Swap the equations when the first x coefficient is
            zero instead of raising (default: True)
        require_closed_loop: Reject polygon paths whose first and last
            points differ (default: True)
        strict_boundary: Verify in interior_points that every edge is a
            single lattice step (default: False, trust the caller)
    """

    zero_tolerance: float = 0.0
    allow_pivoting: bool = True
    require_closed_loop: bool = True
    strict_boundary: bool = False

    def __post_init__(self):
        """Validate options after initialization."""
        if math.isnan(self.zero_tolerance) or self.zero_tolerance < 0:
            raise InvalidArgumentError(
                f"zero_tolerance must be a non-negative number, got {self.zero_tolerance!r}",
                argument="zero_tolerance",
                value=self.zero_tolerance,
            )

    @classmethod
    def default(cls) -> 'ComputeOptions':
        """Create options with default values."""
        return cls()

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize options to dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "zero_tolerance": self.zero_tolerance,
            "allow_pivoting": self.allow_pivoting,
            "require_closed_loop": self.require_closed_loop,
            "strict_boundary": self.strict_boundary,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ComputeOptions':
        """
        Create options from a dictionary.

        Missing keys fall back to defaults.
        """
        return cls(
            zero_tolerance=float(data.get("zero_tolerance", 0.0)),
            allow_pivoting=_parse_bool(data.get("allow_pivoting", True)),
            require_closed_loop=_parse_bool(data.get("require_closed_loop", True)),
            strict_boundary=_parse_bool(data.get("strict_boundary", False)),
        )


def _parse_bool(value: Any) -> bool:
    """Parse a value to boolean, handling string representations."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.lower() in ('true', '1', 'yes', 'y')
    return bool(value)
