from enum import Enum
from typing import Any, Dict, Optional


class ConstraintGate(str, Enum):
    """Gates of the proximity predicate, in evaluation order."""
    THRESHOLD = "threshold"
    BINDING_A = "binding_a"
    BINDING_B = "binding_b"
    OVERFLOW = "overflow"
    PROXIMITY = "proximity"


class ConstraintViolation(Exception):
    """
    Raised when a proximity gate is not satisfied.

    Equivalent to an unsatisfied circuit assertion: the whole evaluation is
    rejected, there is no partial result. ``reason`` and ``details`` only
    ever carry public values.
    """

    def __init__(
        self,
        gate: ConstraintGate,
        reason: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.gate = gate
        self.reason = reason
        self.details = details or {}
        super().__init__(f"CONSTRAINT VIOLATION [{gate.value}]: {reason}")
