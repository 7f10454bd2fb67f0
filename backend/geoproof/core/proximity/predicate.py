"""
Proximity Predicate — GEOPROOF core contract.

Proves "the two committed points are closer than the public threshold"
while the points themselves stay hidden witnesses.

═══════════════════════════════════════════════════════════════════════════════
GATES (evaluated in order, all-or-nothing)
═══════════════════════════════════════════════════════════════════════════════

  Gate 1 — Threshold:  threshold is strictly positive (signed lift > 0).
  Gate 2 — Binding A:  commitment_a == commit(point_a).
  Gate 3 — Binding B:  commitment_b == commit(point_b).
  Gate 4 — Overflow:   per-axis |Δ| < MAX_COORDINATE_DELTA,
                       d2 < MAX_SAFE_SQUARED_VALUE,
                       t2 < MAX_SAFE_SQUARED_VALUE.
  Gate 5 — Proximity:  d2 < t2.

  d2 = (xa-xb)² + (ya-yb)² + (za-zb)²,  t2 = threshold²  (both in the field)

Each gate maps onto a circuit assertion. The first unsatisfied gate aborts
the evaluation; later gates never run and no partial result exists.

Public:   commitment_a, commitment_b, threshold
Witness:  point_a, point_b  (never logged, never echoed in verdicts)

Usage:
    verdict = check_proximity(c_a, c_b, point_a, point_b, threshold)
    if verdict.satisfied: ...

    assert_proximity(c_a, c_b, point_a, point_b, threshold)  # raises
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Dict, Optional

from pydantic import BaseModel, Field

from geoproof.core.config import Settings, settings as default_settings
from geoproof.core.crypto.commitment import PointHasher, get_hasher, verify_commitment
from geoproof.core.field import PrimeField
from geoproof.core.geometry import Point
from geoproof.core.proximity.distance import (
    deltas_within_bound,
    is_safe_magnitude,
    squared_distance,
)
from geoproof.core.proximity.errors import ConstraintGate, ConstraintViolation
from geoproof.schemas.proximity import ProximityClaim, ProximityWitness

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════════
# DATA MODELS
# ═══════════════════════════════════════════════════════════════════════════════

class ProximityVerdict(BaseModel):
    """Outcome of one predicate evaluation. Carries public values only."""
    satisfied: bool = False
    gate_results: Dict[str, bool] = Field(default_factory=dict)
    failed_gate: Optional[ConstraintGate] = None
    reason: str = ""
    commitment_a: int = 0
    commitment_b: int = 0
    threshold: int = 0
    hasher: str = ""
    checked_at: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    latency_ms: float = 0.0


# ═══════════════════════════════════════════════════════════════════════════════
# PROXIMITY CIRCUIT
# ═══════════════════════════════════════════════════════════════════════════════

class ProximityCircuit:
    """
    Gate-by-gate evaluator of the proximity predicate.

    Holds only immutable configuration (hash backend and numeric bounds);
    every evaluation is independent, so one instance may be shared freely.
    """

    def __init__(
        self,
        hasher: Optional[PointHasher] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self._settings = settings or default_settings
        self._hasher = hasher or get_hasher(settings=self._settings)

    @property
    def hasher(self) -> PointHasher:
        return self._hasher

    # ── Entry Points ──

    def evaluate(
        self,
        commitment_a: int,
        commitment_b: int,
        point_a: Point,
        point_b: Point,
        threshold: int,
    ) -> ProximityVerdict:
        """
        Run every gate and report the outcome as a verdict.

        A failed gate yields ``satisfied=False`` with the gate and reason
        recorded; nothing is raised.
        """
        return self._run(
            commitment_a, commitment_b, point_a, point_b, threshold,
            raise_on_violation=False,
        )

    def enforce(
        self,
        commitment_a: int,
        commitment_b: int,
        point_a: Point,
        point_b: Point,
        threshold: int,
    ) -> ProximityVerdict:
        """
        Assertion-style evaluation.

        Raises:
            ConstraintViolation: If any gate is not satisfied.
        """
        return self._run(
            commitment_a, commitment_b, point_a, point_b, threshold,
            raise_on_violation=True,
        )

    def evaluate_claim(
        self, claim: ProximityClaim, witness: ProximityWitness,
    ) -> ProximityVerdict:
        """Evaluate a validated public claim against its private witness."""
        return self.evaluate(
            claim.commitment_a,
            claim.commitment_b,
            witness.point_a.to_point(),
            witness.point_b.to_point(),
            claim.threshold,
        )

    # ── Evaluation ──

    def _run(
        self,
        commitment_a: int,
        commitment_b: int,
        point_a: Point,
        point_b: Point,
        threshold: int,
        raise_on_violation: bool,
    ) -> ProximityVerdict:
        t_start = time.perf_counter()

        commitment_a = PrimeField.reduce(commitment_a)
        commitment_b = PrimeField.reduce(commitment_b)
        threshold = PrimeField.reduce(threshold)

        gate_results: Dict[str, bool] = {}
        verdict_kwargs = {
            "commitment_a": commitment_a,
            "commitment_b": commitment_b,
            "threshold": threshold,
            "hasher": self._hasher.name,
        }

        try:
            # ── Gate 1: Threshold Positivity ──
            gate_results[ConstraintGate.THRESHOLD.value] = self._gate_threshold(threshold)

            # ── Gates 2 & 3: Commitment Binding ──
            gate_results[ConstraintGate.BINDING_A.value] = self._gate_binding(
                ConstraintGate.BINDING_A, commitment_a, point_a,
            )
            gate_results[ConstraintGate.BINDING_B.value] = self._gate_binding(
                ConstraintGate.BINDING_B, commitment_b, point_b,
            )

            # ── Squared quantities ──
            d2 = squared_distance(point_a, point_b)
            t2 = PrimeField.square(threshold)

            # ── Gate 4: Overflow Guard ──
            gate_results[ConstraintGate.OVERFLOW.value] = self._gate_overflow(
                point_a, point_b, d2, t2,
            )

            # ── Gate 5: Proximity ──
            gate_results[ConstraintGate.PROXIMITY.value] = self._gate_proximity(d2, t2)

        except ConstraintViolation as exc:
            latency = (time.perf_counter() - t_start) * 1000
            gate_results[exc.gate.value] = False

            verdict = ProximityVerdict(
                satisfied=False,
                gate_results=gate_results,
                failed_gate=exc.gate,
                reason=exc.reason,
                latency_ms=round(latency, 3),
                **verdict_kwargs,
            )
            logger.warning(
                f"[PROXIMITY] {self._settings.PROJECT_NAME} REJECTED — gate={exc.gate.value} "
                f"reason='{exc.reason}' commitments={commitment_a:#x}/"
                f"{commitment_b:#x} ({latency:.2f}ms)"
            )
            if raise_on_violation:
                raise
            return verdict

        latency = (time.perf_counter() - t_start) * 1000
        verdict = ProximityVerdict(
            satisfied=True,
            gate_results=gate_results,
            latency_ms=round(latency, 3),
            **verdict_kwargs,
        )
        logger.info(
            f"[PROXIMITY] {self._settings.PROJECT_NAME}: points committed as {commitment_a:#x} and "
            f"{commitment_b:#x} are within {threshold} units ({latency:.2f}ms)"
        )
        return verdict

    # ── Gate Implementations ──

    def _gate_threshold(self, threshold: int) -> bool:
        if not PrimeField.is_positive(threshold):
            raise ConstraintViolation(
                gate=ConstraintGate.THRESHOLD,
                reason="Threshold must be strictly positive",
                details={"threshold": threshold},
            )
        return True

    def _gate_binding(
        self, gate: ConstraintGate, commitment: int, point: Point,
    ) -> bool:
        if not verify_commitment(commitment, point, self._hasher):
            raise ConstraintViolation(
                gate=gate,
                reason=f"Commitment {commitment:#x} does not bind the supplied point",
                details={"commitment": commitment, "hasher": self._hasher.name},
            )
        return True

    def _gate_overflow(self, point_a: Point, point_b: Point, d2: int, t2: int) -> bool:
        max_delta = self._settings.MAX_COORDINATE_DELTA
        max_squared = self._settings.MAX_SAFE_SQUARED_VALUE

        if not deltas_within_bound(point_a, point_b, max_delta):
            raise ConstraintViolation(
                gate=ConstraintGate.OVERFLOW,
                reason="Coordinate difference exceeds the safe magnitude",
                details={"quantity": "axis_delta", "bound": max_delta},
            )
        if not is_safe_magnitude(d2, max_squared):
            raise ConstraintViolation(
                gate=ConstraintGate.OVERFLOW,
                reason="Squared distance exceeds the safe magnitude",
                details={"quantity": "squared_distance", "bound": max_squared},
            )
        if not is_safe_magnitude(t2, max_squared):
            raise ConstraintViolation(
                gate=ConstraintGate.OVERFLOW,
                reason="Squared threshold exceeds the safe magnitude",
                details={"quantity": "squared_threshold", "bound": max_squared},
            )
        return True

    def _gate_proximity(self, d2: int, t2: int) -> bool:
        if not d2 < t2:
            raise ConstraintViolation(
                gate=ConstraintGate.PROXIMITY,
                reason="Distance is not below the threshold",
            )
        return True


# ═══════════════════════════════════════════════════════════════════════════════
# FUNCTIONAL SURFACE
# ═══════════════════════════════════════════════════════════════════════════════

def check_proximity(
    commitment_a: int,
    commitment_b: int,
    point_a: Point,
    point_b: Point,
    threshold: int,
    *,
    hasher: Optional[PointHasher] = None,
    settings: Optional[Settings] = None,
) -> ProximityVerdict:
    """Evaluate the proximity predicate once; see ProximityCircuit.evaluate."""
    circuit = ProximityCircuit(hasher=hasher, settings=settings)
    return circuit.evaluate(commitment_a, commitment_b, point_a, point_b, threshold)


def assert_proximity(
    commitment_a: int,
    commitment_b: int,
    point_a: Point,
    point_b: Point,
    threshold: int,
    *,
    hasher: Optional[PointHasher] = None,
    settings: Optional[Settings] = None,
) -> ProximityVerdict:
    """Like check_proximity, but raises ConstraintViolation on failure."""
    circuit = ProximityCircuit(hasher=hasher, settings=settings)
    return circuit.enforce(commitment_a, commitment_b, point_a, point_b, threshold)
