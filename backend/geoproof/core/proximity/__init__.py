from geoproof.core.proximity.distance import (
    axis_deltas,
    deltas_within_bound,
    is_safe_magnitude,
    squared_distance,
)
from geoproof.core.proximity.errors import ConstraintGate, ConstraintViolation
from geoproof.core.proximity.predicate import (
    ProximityCircuit,
    ProximityVerdict,
    assert_proximity,
    check_proximity,
)

__all__ = [
    "axis_deltas",
    "deltas_within_bound",
    "is_safe_magnitude",
    "squared_distance",
    "ConstraintGate",
    "ConstraintViolation",
    "ProximityCircuit",
    "ProximityVerdict",
    "assert_proximity",
    "check_proximity",
]
