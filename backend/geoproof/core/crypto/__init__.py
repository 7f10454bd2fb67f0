"""
GEOPROOF Commitment subsystem.

Binds private witness points to public field-element commitments.

Public API:
    - commit:             Commitment of a point under a hash backend.
    - verify_commitment:  Binding check (recompute and compare).
    - PedersenHasher:     Circuit-friendly Pedersen hash over Grumpkin.
    - Blake2bHasher:      BLAKE2b-256 reduced into the field.
    - get_hasher:         Resolve a backend by name.
"""

from geoproof.core.crypto.commitment import (
    Blake2bHasher,
    PedersenHasher,
    PointHasher,
    commit,
    get_hasher,
    register_hasher,
    verify_commitment,
)

__all__ = [
    "Blake2bHasher",
    "PedersenHasher",
    "PointHasher",
    "commit",
    "get_hasher",
    "register_hasher",
    "verify_commitment",
]
