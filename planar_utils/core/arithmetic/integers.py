"""planar_utils.core.arithmetic.integers

Integer gcd / lcm.

The sign of a gcd follows Python's ``%`` operator; no normalisation is
applied to negative inputs. Python ints are unbounded, so ``lcm`` never
overflows.
"""

from __future__ import annotations

from numbers import Integral

from ..errors import InvalidArgumentError


def _require_integer(value, argument: str) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidArgumentError(
            f"{argument} must be an integer, got {value!r}",
            argument=argument,
            value=value,
        )
    return int(value)


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm.

    ``gcd(a, 0) == a``; otherwise ``gcd(a, b) == gcd(b, a % b)``.
    """
    a = _require_integer(a, "a")
    b = _require_integer(b, "b")
    while b != 0:
        a, b = b, a % b
    return a


def lcm(*numbers: int) -> int:
    """Least common multiple of one or more integers.

    Folds left with ``acc * n // gcd(acc, n)``. A running value whose gcd
    with the next term is 0 (both zero) yields 0.

    Raises:
        InvalidArgumentError: If called with no arguments or a non-integer
    """
    if not numbers:
        raise InvalidArgumentError("lcm requires at least one number", argument="numbers", value=())

    acc = _require_integer(numbers[0], "numbers[0]")
    for i, n in enumerate(numbers[1:], start=1):
        n = _require_integer(n, f"numbers[{i}]")
        g = gcd(acc, n)
        acc = 0 if g == 0 else acc * n // g
    return acc
