"""Integer arithmetic primitives."""

from .integers import gcd, lcm

__all__ = [
    "gcd",
    "lcm",
]
