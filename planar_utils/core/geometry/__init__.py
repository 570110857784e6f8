"""Planar polygon geometry (shoelace area, Manhattan perimeter, Pick's theorem)."""

from .polygon import (
    shoelace_area,
    signed_doubled_area,
    polygon_perimeter,
    interior_points,
)
from .lattice import (
    boundary_points,
    boundary_point_count,
    lattice_interior_points,
)

__all__ = [
    "shoelace_area",
    "signed_doubled_area",
    "polygon_perimeter",
    "interior_points",
    "boundary_points",
    "boundary_point_count",
    "lattice_interior_points",
]
