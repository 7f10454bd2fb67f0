"""
Point data model for the proximity predicate.

A Point is three field elements, semantically integer micrometer
coordinates after an external projection and shift. Points are private
witnesses: they are hashed into commitments but never disclosed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List

from geoproof.core.field import PrimeField


@dataclass(frozen=True)
class Point:
    """Immutable (x, y, z) triple of canonical field elements."""
    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", PrimeField.reduce(self.x))
        object.__setattr__(self, "y", PrimeField.reduce(self.y))
        object.__setattr__(self, "z", PrimeField.reduce(self.z))

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y
        yield self.z

    def __repr__(self) -> str:
        # Witness data stays out of reprs that end up in logs and tracebacks.
        return "Point(<hidden>)"

    def as_list(self) -> List[int]:
        """Coordinates in hash-input order [x, y, z]."""
        return [self.x, self.y, self.z]


def make_point(x: int, y: int, z: int) -> Point:
    return Point(x, y, z)


def translate(point: Point, vector: Point) -> Point:
    """
    Shift ``point`` by ``vector`` (coordinate-wise field addition).

    Callers apply a private shift before committing so that commitments to
    the same location cannot be linked across claims.
    """
    return Point(
        PrimeField.add(point.x, vector.x),
        PrimeField.add(point.y, vector.y),
        PrimeField.add(point.z, vector.z),
    )
