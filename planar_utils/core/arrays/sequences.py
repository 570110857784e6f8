"""planar_utils.core.arrays.sequences

Generic sequence helpers.

Elements are opaque: ``transpose`` only moves them, ``array_equals`` compares
scalars by value and everything else by identity.
"""

from __future__ import annotations

from numbers import Number
from typing import List, Sequence, TypeVar

from ..errors import InvalidArgumentError

T = TypeVar("T")

_SCALAR_TYPES = (Number, str, bytes, type(None))


def transpose(matrix: Sequence[Sequence[T]]) -> List[List[T]]:
    """Turn a list of rows into a list of columns.

    Rows may be any sequence (lists, tuples, strings). Column ``i`` of the
    input becomes row ``i`` of the output.

    Raises:
        InvalidArgumentError: If the matrix is empty or its rows differ in length
    """
    if len(matrix) == 0:
        raise InvalidArgumentError("Cannot transpose an empty matrix", argument="matrix", value=matrix)

    width = len(matrix[0])
    for i, row in enumerate(matrix):
        if len(row) != width:
            raise InvalidArgumentError(
                f"Ragged matrix: row {i} has length {len(row)}, expected {width}",
                argument="matrix",
                value=row,
            )

    return [[row[col] for row in matrix] for col in range(width)]


def array_equals(a: Sequence[T], b: Sequence[T]) -> bool:
    """Check two sequences for equal length and pairwise-equal elements.

    Scalars (numbers, strings, bytes, None) compare by value. Any other
    element, including lists and numpy arrays, compares by identity; the
    function never descends into elements.
    """
    if len(a) != len(b):
        return False
    return all(_element_equals(x, y) for x, y in zip(a, b))


def _element_equals(x, y) -> bool:
    if x is y:
        return True
    if isinstance(x, _SCALAR_TYPES) and isinstance(y, _SCALAR_TYPES):
        return bool(x == y)
    return False
