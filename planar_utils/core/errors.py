"""planar_utils.core.errors

Exception types raised by the helper functions.

Invalid input is reported as a ``ValueError`` subclass so callers that
already catch ``ValueError`` keep working. A system whose leading
coefficients cannot be used for elimination is reported as a
``ZeroDivisionError`` subclass.

"No unique solution" for a linear system is a regular result, not an
exception.
"""

from __future__ import annotations

from typing import Any, Optional


class PlanarUtilsError(Exception):
    """Base class for all errors raised by planar_utils."""


class InvalidArgumentError(PlanarUtilsError, ValueError):
    """An argument does not satisfy the function's preconditions.

    Attributes:
        argument: Name of the offending argument (None if not applicable)
        value: The offending value
    """

    def __init__(self, message: str, argument: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.argument = argument
        self.value = value


class DegenerateSystemError(PlanarUtilsError, ZeroDivisionError):
    """Gaussian elimination cannot start because no usable pivot exists.

    Attributes:
        equations: The EquationPair that was being solved
    """

    def __init__(self, message: str, equations: Any = None):
        super().__init__(message)
        self.equations = equations
