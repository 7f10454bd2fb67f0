"""
Commitment Binder — the bridge between hidden witnesses and public claims.

A commitment is a single field element computed as a collision-resistant,
one-way hash of a point's coordinate triple [x, y, z]. The proximity
predicate re-derives the commitment of each witness point and compares it
to the published value; that equality check is what lets a verifier trust
which point a proof talks about without ever seeing its coordinates.

The hash is an injectable capability. Any implementation that is
deterministic, collision resistant and expressible as circuit constraints
may be registered:

    - "pedersen": Pedersen hash over Grumpkin (default, circuit-friendly)
    - "blake2b":  BLAKE2b-256 reduced into the field (bitwise hash, costly
                  inside a circuit; useful for off-circuit cross-checks)

Substituting a weak hash breaks the secrecy and integrity of every claim.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
from typing import Callable, Dict, Optional, Protocol, Sequence

from geoproof.core.config import Settings, settings as default_settings
from geoproof.core.crypto.curve import pedersen_hash
from geoproof.core.field import MODULUS, PrimeField
from geoproof.core.geometry import Point

logger = logging.getLogger(__name__)


class PointHasher(Protocol):
    """Capability: deterministic, collision-resistant hash into the field."""

    name: str

    def hash(self, values: Sequence[int]) -> int:
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# HASH BACKENDS
# ═══════════════════════════════════════════════════════════════════════════════

class PedersenHasher:
    """Pedersen hash over Grumpkin with domain-separated generators."""

    name = "pedersen"

    def __init__(self, domain: Optional[str] = None) -> None:
        self.domain = domain or default_settings.PEDERSEN_DOMAIN

    def hash(self, values: Sequence[int]) -> int:
        return pedersen_hash([PrimeField.reduce(v) for v in values], self.domain)


class Blake2bHasher:
    """BLAKE2b-256 over fixed-width big-endian encodings, reduced mod p."""

    name = "blake2b"

    def __init__(self, person: bytes = b"GEOPROOF-COMMIT") -> None:
        self.person = person[:16]

    def hash(self, values: Sequence[int]) -> int:
        h = hashlib.blake2b(digest_size=32, person=self.person)
        h.update(len(values).to_bytes(4, "big"))
        for value in values:
            h.update(PrimeField.reduce(value).to_bytes(32, "big"))
        return int.from_bytes(h.digest(), "big") % MODULUS


_HASHERS: Dict[str, Callable[[Settings], PointHasher]] = {
    PedersenHasher.name: lambda s: PedersenHasher(domain=s.PEDERSEN_DOMAIN),
    Blake2bHasher.name: lambda s: Blake2bHasher(),
}


def register_hasher(name: str, factory: Callable[[Settings], PointHasher]) -> None:
    """Register a hash backend; ``factory`` builds it from the active Settings."""
    _HASHERS[name] = factory
    logger.info(f"[COMMIT] Hash backend '{name}' registered")


def get_hasher(
    name: Optional[str] = None, settings: Optional[Settings] = None,
) -> PointHasher:
    """Resolve a hash backend by name (defaults to settings.COMMITMENT_HASH)."""
    settings = settings or default_settings
    name = name or settings.COMMITMENT_HASH
    try:
        factory = _HASHERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown commitment hash '{name}' (available: {sorted(_HASHERS)})"
        ) from None
    return factory(settings)


# ═══════════════════════════════════════════════════════════════════════════════
# BINDING OPERATIONS
# ═══════════════════════════════════════════════════════════════════════════════

def commit(point: Point, hasher: Optional[PointHasher] = None) -> int:
    """Commitment to ``point``: hash([x, y, z]) as a field element."""
    hasher = hasher or get_hasher()
    return hasher.hash(point.as_list())


def verify_commitment(
    commitment: int,
    point: Point,
    hasher: Optional[PointHasher] = None,
) -> bool:
    """
    Recompute the commitment of ``point`` and compare it with ``commitment``.

    Returns False on mismatch (tampered commitment or wrong witness).
    """
    expected = commit(point, hasher)
    # Constant-time comparison on fixed-width encodings
    return hmac.compare_digest(
        expected.to_bytes(32, "big"),
        PrimeField.reduce(commitment).to_bytes(32, "big"),
    )
