"""
Proximity claim schemas.

Field elements travel as ints or decimal strings (the shape proving
backends use for public signals) and are validated into canonical
non-negative ints below the field modulus.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator

from geoproof.core.crypto.commitment import PointHasher, commit
from geoproof.core.field import MODULUS
from geoproof.core.geometry import Point


def _parse_field_element(value: Union[int, str]) -> int:
    if isinstance(value, bool):
        raise ValueError("Field elements must be integers, not booleans")
    if isinstance(value, str):
        value = value.strip()
        if not value.isdigit():
            raise ValueError("Field elements must be non-negative decimal strings")
        value = int(value)
    if not isinstance(value, int):
        raise ValueError("Field elements must be integers")
    if not 0 <= value < MODULUS:
        raise ValueError("Field element out of range [0, MODULUS)")
    return value


class PointWitness(BaseModel):
    """Private point coordinates (already projected and shifted)."""
    model_config = ConfigDict(frozen=True)

    x: int
    y: int
    z: int = 0

    @field_validator("x", "y", "z", mode="before")
    @classmethod
    def validate_field_element(cls, v):
        return _parse_field_element(v)

    def to_point(self) -> Point:
        return Point(self.x, self.y, self.z)

    def __repr__(self) -> str:
        return "PointWitness(<hidden>)"


class ProximityWitness(BaseModel):
    point_a: PointWitness
    point_b: PointWitness


class ProximityClaim(BaseModel):
    """Public statement: the points behind these commitments lie within ``threshold``."""
    commitment_a: int
    commitment_b: int
    threshold: int

    @field_validator("commitment_a", "commitment_b", "threshold", mode="before")
    @classmethod
    def validate_field_element(cls, v):
        return _parse_field_element(v)

    def public_inputs(self) -> List[str]:
        """Public signals in circuit order, as decimal strings."""
        return [str(self.commitment_a), str(self.commitment_b), str(self.threshold)]

    @classmethod
    def from_points(
        cls,
        point_a: Point,
        point_b: Point,
        threshold: int,
        hasher: Optional[PointHasher] = None,
    ) -> "ProximityClaim":
        """Build the honest claim for two witness points."""
        return cls(
            commitment_a=commit(point_a, hasher),
            commitment_b=commit(point_b, hasher),
            threshold=threshold,
        )
