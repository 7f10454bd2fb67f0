"""
Prime Field Arithmetic — BN254 scalar field.

Every coordinate, commitment and threshold handled by the proximity
predicate lives in this field. The modulus is the scalar-field order of the
BN254 (alt_bn128) curve, the native field of most arithmetic-circuit
proving backends, so a value computed here equals the value the compiled
circuit computes.

Values are plain Python ints in canonical range [0, MODULUS).
"""

from __future__ import annotations

from typing import Optional

# ═══════════════════════════════════════════════════════════════════════════════
# FIELD PARAMETERS
# ═══════════════════════════════════════════════════════════════════════════════

MODULUS: int = (
    21888242871839275222246405745257275088548364400416034343698204186575808495617
)

# Largest value whose signed lift is still non-negative.
HALF_MODULUS: int = MODULUS // 2


class PrimeField:
    """
    Finite field arithmetic modulo the BN254 scalar prime.
    """

    @staticmethod
    def reduce(a: int) -> int:
        if isinstance(a, bool) or not isinstance(a, int):
            raise TypeError(f"Field elements must be int, got {type(a).__name__}")
        return a % MODULUS

    @staticmethod
    def add(a: int, b: int) -> int:
        return (a + b) % MODULUS

    @staticmethod
    def sub(a: int, b: int) -> int:
        return (a - b) % MODULUS

    @staticmethod
    def mul(a: int, b: int) -> int:
        return (a * b) % MODULUS

    @staticmethod
    def square(a: int) -> int:
        return (a * a) % MODULUS

    @staticmethod
    def neg(a: int) -> int:
        return (-a) % MODULUS

    @staticmethod
    def inv(n: int) -> int:
        """Modular inverse via Fermat's little theorem."""
        if n % MODULUS == 0:
            raise ZeroDivisionError("Zero has no inverse in the field")
        return pow(n, MODULUS - 2, MODULUS)

    @staticmethod
    def div(a: int, b: int) -> int:
        return PrimeField.mul(a, PrimeField.inv(b))

    @staticmethod
    def to_signed(a: int) -> int:
        """
        Signed lift of a field element.

        Values in the upper half of the field are read as negatives, so a
        field difference (a - b) lifts back to the integer a - b whenever
        |a - b| <= HALF_MODULUS.
        """
        a %= MODULUS
        return a - MODULUS if a > HALF_MODULUS else a

    @staticmethod
    def is_positive(a: int) -> bool:
        """True if the signed lift of ``a`` is strictly greater than zero."""
        return PrimeField.to_signed(a) > 0


def sqrt_mod(n: int, p: int) -> Optional[int]:
    """
    Square root modulo an odd prime ``p`` (Tonelli-Shanks).

    Returns one root r with r*r == n (mod p), or None if n is a
    non-residue. The other root is p - r.
    """
    n %= p
    if n == 0:
        return 0
    if pow(n, (p - 1) // 2, p) != 1:
        return None
    if p % 4 == 3:
        return pow(n, (p + 1) // 4, p)

    # p - 1 = q * 2^s with q odd
    q, s = p - 1, 0
    while q % 2 == 0:
        q //= 2
        s += 1

    z = 2
    while pow(z, (p - 1) // 2, p) != p - 1:
        z += 1

    m = s
    c = pow(z, q, p)
    t = pow(n, q, p)
    r = pow(n, (q + 1) // 2, p)

    while t != 1:
        # Least i with t^(2^i) == 1
        i, t2 = 0, t
        while t2 != 1:
            t2 = (t2 * t2) % p
            i += 1
        b = pow(c, 1 << (m - i - 1), p)
        m = i
        c = (b * b) % p
        t = (t * c) % p
        r = (r * b) % p

    return r
