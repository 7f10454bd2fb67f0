"""
Distance Engine — squared Euclidean distance over the prime field.

No square roots: comparisons stay in squared form, which is monotonic in
the true distance for non-negative values.

The field cannot tell a truly large result from one that wrapped around
the modulus, so every squared distance must be paired with the magnitude
checks below before it is compared against anything.
"""

from typing import Tuple

from geoproof.core.field import MODULUS, PrimeField
from geoproof.core.geometry import Point


def axis_deltas(point_a: Point, point_b: Point) -> Tuple[int, int, int]:
    """Signed per-axis differences a - b (exact while |a - b| < MODULUS / 2)."""
    return (
        PrimeField.to_signed(PrimeField.sub(point_a.x, point_b.x)),
        PrimeField.to_signed(PrimeField.sub(point_a.y, point_b.y)),
        PrimeField.to_signed(PrimeField.sub(point_a.z, point_b.z)),
    )


def squared_distance(point_a: Point, point_b: Point) -> int:
    """(xa-xb)² + (ya-yb)² + (za-zb)² computed in the field."""
    dx = PrimeField.sub(point_a.x, point_b.x)
    dy = PrimeField.sub(point_a.y, point_b.y)
    dz = PrimeField.sub(point_a.z, point_b.z)
    return PrimeField.add(
        PrimeField.add(PrimeField.square(dx), PrimeField.square(dy)),
        PrimeField.square(dz),
    )


def is_safe_magnitude(value: int, bound: int) -> bool:
    """True if the canonical representative of ``value`` lies in [0, bound)."""
    return 0 <= value % MODULUS < bound


def deltas_within_bound(point_a: Point, point_b: Point, bound: int) -> bool:
    """
    Every per-axis |Δ| is below ``bound``.

    With bound² · 3 below MODULUS / 2 this guarantees the field sum of
    squares equals the integer sum of squares (no wraparound).
    """
    return all(abs(delta) < bound for delta in axis_deltas(point_a, point_b))
