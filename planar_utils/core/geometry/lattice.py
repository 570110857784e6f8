"""Lattice-polygon helpers (corner-only input).

These functions take a closed loop of integer corners and recover the full
boundary that :func:`interior_points` expects, or apply Pick's theorem
directly with a gcd-based boundary count.
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from ..arithmetic import gcd
from ..models.point import Point
from .polygon import as_point_array, cross_sum, lattice_array


def _lattice_array(corners: Sequence[Sequence[int]]) -> np.ndarray:
    return lattice_array(as_point_array(corners), corners)


def boundary_point_count(corners: Sequence[Sequence[int]]) -> int:
    """Number of lattice points on the boundary of a closed corner loop.

    Each edge contributes ``gcd(|dx|, |dy|)`` points (its start point plus
    the interior lattice points along it).
    """
    arr = _lattice_array(corners)
    return sum(gcd(abs(dx), abs(dy)) for dx, dy in np.diff(arr, axis=0).tolist())


def boundary_points(corners: Sequence[Sequence[int]]) -> List[Point]:
    """Expand a closed corner loop into every boundary lattice point.

    The result is itself a closed loop and is suitable input for
    :func:`interior_points`. Repeated consecutive corners are collapsed.
    """
    arr = _lattice_array(corners)
    path: List[Point] = []
    for (x1, y1), (x2, y2) in zip(arr[:-1].tolist(), arr[1:].tolist()):
        dx = x2 - x1
        dy = y2 - y1
        g = gcd(abs(dx), abs(dy))
        if g == 0:
            continue
        sx, sy = dx // g, dy // g
        for k in range(g):
            path.append(Point(x1 + k * sx, y1 + k * sy))

    if not path:
        x0, y0 = arr[0].tolist()
        path.append(Point(x0, y0))
    path.append(path[0])
    return path


def lattice_interior_points(corners: Sequence[Sequence[int]]) -> int:
    """Interior lattice points of a simple lattice polygon given by its corners.

    Pick's theorem in integer form: ``I = (2A - B + 2) / 2``.
    """
    arr = _lattice_array(corners)
    doubled_area = abs(cross_sum(arr))
    boundary = boundary_point_count(corners)
    return (doubled_area - boundary + 2) // 2
