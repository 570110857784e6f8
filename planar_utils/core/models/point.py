"""
Point class for planar geometry helpers.

Conventions:
- Coordinates: X to the right, Y up - right-handed system
- Values are kept as given (ints stay ints) so lattice arithmetic stays exact
- A Point unpacks like an ``(x, y)`` tuple
"""

import numbers
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Sequence

from ..errors import InvalidArgumentError


@dataclass(frozen=True)
class Point:
    """
    Immutable planar point.

    Attributes:
        x: Horizontal coordinate
        y: Vertical coordinate
    """

    x: float
    y: float

    def __post_init__(self):
        """Validate coordinates after initialization."""
        for name in ("x", "y"):
            value = getattr(self, name)
            if not _is_real(value):
                raise InvalidArgumentError(
                    f"Point {name} must be a real number, got {value!r}",
                    argument=name,
                    value=value,
                )

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __len__(self) -> int:
        return 2

    def __getitem__(self, index):
        return (self.x, self.y)[index]

    @property
    def is_lattice(self) -> bool:
        """Check if both coordinates are integers."""
        return _is_integral(self.x) and _is_integral(self.y)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize point to dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Point':
        """
        Create a Point from a dictionary.

        Raises:
            KeyError: If "x" or "y" is missing
            InvalidArgumentError: If a coordinate is not a real number
        """
        return cls(x=data["x"], y=data["y"])

    @classmethod
    def coerce(cls, value: Any) -> 'Point':
        """Build a Point from a Point or any 2-element sequence."""
        if isinstance(value, cls):
            return value
        try:
            coords = tuple(value)
        except TypeError:
            raise InvalidArgumentError(
                f"Point must be a sequence of two numbers, got {value!r}",
                argument="point",
                value=value,
            ) from None
        if len(coords) != 2:
            raise InvalidArgumentError(
                f"Point must have exactly 2 coordinates, got {len(coords)}",
                argument="point",
                value=value,
            )
        return cls(x=coords[0], y=coords[1])

    def __repr__(self) -> str:
        return f"Point({self.x!r}, {self.y!r})"


def is_closed_loop(points: Sequence[Sequence[float]]) -> bool:
    """Check that a path has at least one edge and ends where it starts."""
    if len(points) < 2:
        return False
    return tuple(points[0]) == tuple(points[-1])


def close_path(points: Sequence[Sequence[float]]) -> List[Sequence[float]]:
    """
    Return the path as a closed loop.

    The first point is appended when the path is not already closed. A
    single point is closed into a degenerate one-edge loop.

    Raises:
        InvalidArgumentError: If ``points`` is empty
    """
    if len(points) == 0:
        raise InvalidArgumentError("Cannot close an empty path", argument="points", value=points)
    path = list(points)
    if len(path) >= 2 and tuple(path[0]) == tuple(path[-1]):
        return path
    path.append(path[0])
    return path


def _is_real(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_integral(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, numbers.Integral):
        return True
    return isinstance(value, numbers.Real) and float(value).is_integer()
