"""planar_utils.core.geometry.polygon

Area, perimeter and Pick's theorem for closed polygon paths.

Conventions:
  - A path is a closed loop: first point == last point
  - Points are any 2-sequences (tuples, lists, Point, rows of an (n, 2) array)
  - Integer coordinates are kept as Python ints (object arrays) so the
    doubled area is exact at any magnitude; halving happens last

Implementation detail:
  - Shoelace sum is ``x[:-1]*y[1:] - x[1:]*y[:-1]`` over the loop, so the
    closing edge comes from the repeated final point.
"""

from __future__ import annotations

import logging
from numbers import Integral
from typing import Optional, Sequence

import numpy as np

from ..arithmetic import gcd
from ..errors import InvalidArgumentError
from ..models.options import ComputeOptions

logger = logging.getLogger(__name__)


def as_point_array(points: Sequence[Sequence[float]], require_closed_loop: bool = True) -> np.ndarray:
    """Validate a polygon path and return it as an ``(n, 2)`` array.

    Integer input becomes an object array of Python ints; anything else
    numeric is float64.

    Raises:
        InvalidArgumentError: On fewer than 2 points, non-2D points,
            non-numeric coordinates or (when required) an open path
    """
    rows = []
    for i, p in enumerate(points):
        try:
            row = tuple(p)
        except TypeError:
            raise InvalidArgumentError(
                f"Point {i} is not a coordinate pair: {p!r}", argument="points", value=p
            ) from None
        if len(row) != 2:
            raise InvalidArgumentError(
                f"Point {i} must have 2 coordinates, got {len(row)}", argument="points", value=p
            )
        rows.append(row)

    if len(rows) < 2:
        raise InvalidArgumentError(
            f"A polygon path needs at least 2 points (one edge), got {len(rows)}",
            argument="points",
            value=points,
        )

    if all(_is_int(v) for row in rows for v in row):
        # Python ints in an object array: products never wrap
        arr = np.array([[int(x), int(y)] for x, y in rows], dtype=object)
    else:
        if any(isinstance(v, (bool, np.bool_)) for row in rows for v in row):
            raise InvalidArgumentError(
                "Polygon coordinates must be numeric, got booleans", argument="points", value=points
            )
        try:
            arr = np.asarray(rows, dtype=np.float64)
        except (TypeError, ValueError):
            raise InvalidArgumentError(
                "Polygon coordinates must be numeric", argument="points", value=points
            ) from None

    if require_closed_loop and not np.array_equal(arr[0], arr[-1]):
        raise InvalidArgumentError(
            f"Polygon path is not closed: first point {rows[0]} != last point {rows[-1]}",
            argument="points",
            value=points,
        )

    return arr


def signed_doubled_area(points: Sequence[Sequence[float]], options: Optional[ComputeOptions] = None) -> float:
    """Twice the signed area of a closed loop.

    Positive for counter-clockwise loops, negative for clockwise ones. An
    int for integer coordinates.
    """
    options = options or ComputeOptions.default()
    arr = as_point_array(points, require_closed_loop=options.require_closed_loop)
    return cross_sum(arr)


def shoelace_area(points: Sequence[Sequence[float]], options: Optional[ComputeOptions] = None) -> float:
    """Absolute area of a closed loop by the shoelace formula.

    The loop direction does not matter.
    """
    return abs(signed_doubled_area(points, options)) / 2


def polygon_perimeter(points: Sequence[Sequence[float]], options: Optional[ComputeOptions] = None) -> float:
    """Manhattan perimeter ``sum(|dx| + |dy|)`` of a closed loop.

    Equals the Euclidean perimeter only when every edge is axis-aligned.
    """
    options = options or ComputeOptions.default()
    arr = as_point_array(points, require_closed_loop=options.require_closed_loop)
    return _as_scalar(np.abs(np.diff(arr, axis=0)).sum())


def interior_points(points: Sequence[Sequence[float]], options: Optional[ComputeOptions] = None) -> float:
    """Strictly interior lattice points by Pick's theorem, ``A - B/2 + 1``.

    ``B`` is taken as ``len(points) - 1``: the loop must list every
    boundary lattice point, not just the corners. Use
    :func:`~planar_utils.core.geometry.lattice.boundary_points` to expand a
    corner-only polygon first. With ``options.strict_boundary`` each edge is
    checked to be a single lattice step.

    Raises:
        InvalidArgumentError: If the path is invalid, or strict checking is
            on and an edge skips lattice points
    """
    options = options or ComputeOptions.default()
    if options.strict_boundary:
        _check_unit_lattice_steps(points, options)

    area = shoelace_area(points, options)
    boundary = len(points) - 1
    return area - boundary / 2 + 1


def _check_unit_lattice_steps(points: Sequence[Sequence[float]], options: ComputeOptions) -> None:
    arr = lattice_array(as_point_array(points, require_closed_loop=options.require_closed_loop), points)

    steps = np.diff(arr, axis=0)
    for i, (dx, dy) in enumerate(steps.tolist()):
        g = gcd(abs(dx), abs(dy))
        if g != 1:
            logger.debug("Edge %d (%s, %s) spans %d lattice steps", i, dx, dy, g)
            raise InvalidArgumentError(
                f"Edge {i} from {tuple(points[i])} to {tuple(points[i + 1])} is not a single "
                f"lattice step; expand the boundary before applying Pick's theorem",
                argument="points",
                value=points,
            )


def cross_sum(arr: np.ndarray) -> float:
    """Signed shoelace sum ``sum(x_i*y_{i+1} - x_{i+1}*y_i)`` of a point array."""
    x = arr[:, 0]
    y = arr[:, 1]
    return _as_scalar((x[:-1] * y[1:] - x[1:] * y[:-1]).sum())


def lattice_array(arr: np.ndarray, points) -> np.ndarray:
    """Return a point array of Python ints, rejecting non-lattice coordinates."""
    if arr.dtype.kind == "f":
        if not np.all(np.isfinite(arr)) or not np.array_equal(arr, np.round(arr)):
            raise InvalidArgumentError(
                "Lattice points need integer coordinates", argument="points", value=points
            )
        arr = np.array([[int(x), int(y)] for x, y in arr.tolist()], dtype=object)
    return arr


def _as_scalar(value):
    # object arrays sum to plain Python numbers, numeric arrays to numpy scalars
    return value.item() if isinstance(value, np.generic) else value


def _is_int(value) -> bool:
    return isinstance(value, Integral) and not isinstance(value, (bool, np.bool_))
