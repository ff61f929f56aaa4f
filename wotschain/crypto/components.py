"""Domain separation of one seed into the three WOTS sub-seeds.

The tags are a protocol constant: changing them changes every derived key.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidKeyError
from .hashes import sha256_digest

PRIVATE_SEED_TAG = b"seed"
PUBLIC_SEED_TAG = b"publ"
ADDR_SEED_TAG = b"addr"

COMPONENT_SIZE = 32


@dataclass(frozen=True, slots=True)
class Components:
    """The three sub-seeds a WOTS keypair is built from.

    Args:
        private_seed: Expands into the secret chain starts.
        public_seed: Keys the chaining hash.
        addr_seed: Address words for the chaining hash.
    """

    private_seed: bytes
    public_seed: bytes
    addr_seed: bytes

    def __repr__(self) -> str:
        return "Components(<redacted>)"


def separate_components(seed: bytes) -> Components:
    """Split ``seed`` into ``SHA-256(seed || tag)`` for each domain tag."""

    if len(seed) != COMPONENT_SIZE:
        raise InvalidKeyError("seed must be 32 bytes")
    return Components(
        private_seed=sha256_digest(seed, PRIVATE_SEED_TAG),
        public_seed=sha256_digest(seed, PUBLIC_SEED_TAG),
        addr_seed=sha256_digest(seed, ADDR_SEED_TAG),
    )
