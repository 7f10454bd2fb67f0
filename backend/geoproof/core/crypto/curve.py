"""
Grumpkin Curve — Pedersen hashing backbone.

Grumpkin is the short-Weierstrass curve

    y² = x³ − 17

defined over the BN254 scalar field. Its point coordinates are therefore
elements of the same field the proximity circuit computes in, which makes a
Pedersen hash over Grumpkin cheap to express as circuit constraints and
lets the hash output (an x-coordinate) serve directly as a field-element
commitment.

═══════════════════════════════════════════════════════════════════════════════
GENERATOR DERIVATION
═══════════════════════════════════════════════════════════════════════════════

  G_i = hash_to_curve(domain, i)      (try-and-increment over BLAKE2b-256)

  Nobody knows log_{G_j}(G_i) because every generator is derived from a
  hash ("nothing-up-my-sleeve"). Grumpkin has cofactor 1, so every affine
  point found this way generates the full prime-order group.

Points are affine (x, y) tuples; the point at infinity is None.
Dependencies: standard library only.
"""

from __future__ import annotations

import hashlib
import logging
from functools import lru_cache
from typing import Optional, Sequence, Tuple

from geoproof.core.field import MODULUS, PrimeField, sqrt_mod

logger = logging.getLogger(__name__)

AffinePoint = Optional[Tuple[int, int]]

# ═══════════════════════════════════════════════════════════════════════════════
# CURVE PARAMETERS
# ═══════════════════════════════════════════════════════════════════════════════

CURVE_B: int = MODULUS - 17

# Group order equals the BN254 base-field prime (Grumpkin / BN254 cycle).
CURVE_ORDER: int = (
    21888242871839275222246405745257275088696311157297823662689037894645226208583
)

_MAX_HASH_TO_CURVE_ATTEMPTS: int = 256


def is_on_curve(point: AffinePoint) -> bool:
    if point is None:
        return True
    x, y = point
    return (y * y - (x * x * x + CURVE_B)) % MODULUS == 0


def point_neg(point: AffinePoint) -> AffinePoint:
    if point is None:
        return None
    x, y = point
    return (x, PrimeField.neg(y))


def point_add(p1: AffinePoint, p2: AffinePoint) -> AffinePoint:
    """Affine addition (a = 0 curve)."""
    if p1 is None:
        return p2
    if p2 is None:
        return p1

    x1, y1 = p1
    x2, y2 = p2

    if x1 == x2:
        if (y1 + y2) % MODULUS == 0:
            return None
        # Doubling: λ = 3x² / 2y
        lam = PrimeField.div(3 * x1 * x1, 2 * y1)
    else:
        lam = PrimeField.div(y2 - y1, x2 - x1)

    x3 = (lam * lam - x1 - x2) % MODULUS
    y3 = (lam * (x1 - x3) - y1) % MODULUS
    return (x3, y3)


def scalar_mul(point: AffinePoint, scalar: int) -> AffinePoint:
    """Double-and-add, most significant bit first."""
    scalar %= CURVE_ORDER
    if point is None or scalar == 0:
        return None

    result: AffinePoint = None
    for bit in bin(scalar)[2:]:
        result = point_add(result, result)
        if bit == "1":
            result = point_add(result, point)
    return result


def hash_to_curve(domain: str, index: int) -> Tuple[int, int]:
    """
    Deterministically map (domain, index) to a Grumpkin point.

    Candidate x-coordinates are drawn from BLAKE2b-256 over
    domain ‖ index ‖ counter until x³ − 17 is a quadratic residue. The even
    square root is taken as y so the result is unique.
    """
    for counter in range(_MAX_HASH_TO_CURVE_ATTEMPTS):
        h = hashlib.blake2b(digest_size=32)
        h.update(domain.encode("utf-8"))
        h.update(index.to_bytes(4, "big"))
        h.update(counter.to_bytes(4, "big"))
        x = int.from_bytes(h.digest(), "big") % MODULUS

        y = sqrt_mod(x * x * x + CURVE_B, MODULUS)
        if y is None:
            continue
        if y % 2 == 1:
            y = MODULUS - y
        return (x, y)

    raise RuntimeError(f"hash_to_curve exhausted attempts for {domain!r}/{index}")


@lru_cache(maxsize=32)
def derive_generators(domain: str, count: int) -> Tuple[Tuple[int, int], ...]:
    """Independent generators G_0..G_{count-1} for a domain separator."""
    generators = tuple(hash_to_curve(domain, i) for i in range(count))
    logger.debug(f"[CURVE] Derived {count} generators for domain '{domain}'")
    return generators


@lru_cache(maxsize=32)
def length_generator(domain: str) -> Tuple[int, int]:
    """Generator binding the input length, kept apart from the value generators."""
    return hash_to_curve(f"{domain}-LENGTH", 0)


def pedersen_hash(values: Sequence[int], domain: str) -> int:
    """
    Pedersen hash of a sequence of field elements.

        P = Σ v_i · G_i + n · H_len
        hash = x(P)

    Collision resistance reduces to the discrete-log problem on Grumpkin.
    Returns 0 in the (negligible) case P is the point at infinity.
    """
    generators = derive_generators(domain, len(values))

    acc: AffinePoint = None
    for value, generator in zip(values, generators):
        acc = point_add(acc, scalar_mul(generator, value))
    acc = point_add(acc, scalar_mul(length_generator(domain), len(values)))

    if acc is None:
        return 0
    return acc[0]
