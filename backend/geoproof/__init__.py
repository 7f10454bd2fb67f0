"""
GEOPROOF — zero-knowledge proximity predicate.

Proves that two committed, hidden 3D points lie closer than a public
threshold. Coordinates are integer micrometers (already projected and
shifted by the caller) living in the BN254 scalar field.

Public API:
    - Point, make_point, translate:  Witness data model.
    - commit, verify_commitment:     Commitment binding.
    - squared_distance:              Field-exact squared distance.
    - check_proximity:               Predicate evaluation -> ProximityVerdict.
    - assert_proximity:              Same, raising ConstraintViolation.
"""

__version__ = "0.1.0"

from geoproof.core.crypto import commit, get_hasher, verify_commitment
from geoproof.core.field import MODULUS
from geoproof.core.geometry import Point, make_point, translate
from geoproof.core.proximity import (
    ConstraintGate,
    ConstraintViolation,
    ProximityCircuit,
    ProximityVerdict,
    assert_proximity,
    check_proximity,
    squared_distance,
)
from geoproof.schemas.proximity import ProximityClaim, ProximityWitness

__all__ = [
    "MODULUS",
    "Point",
    "make_point",
    "translate",
    "commit",
    "get_hasher",
    "verify_commitment",
    "squared_distance",
    "check_proximity",
    "assert_proximity",
    "ProximityCircuit",
    "ProximityVerdict",
    "ProximityClaim",
    "ProximityWitness",
    "ConstraintGate",
    "ConstraintViolation",
    "__version__",
]
