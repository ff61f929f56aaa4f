"""Index-keyed seed derivation.

``derive_seed(master, i)`` = first 32 bytes of the digest stream seeded with
``SHA-512(master || BE64(i))``.
"""

from __future__ import annotations

import struct

from .drbg import DigestRandomGenerator
from .hashes import sha512_digest

SEED_SIZE = 32
MAX_INDEX = 0xFFFFFFFFFFFFFFFF


def derive_seed_stream(master_seed: bytes, index: int) -> tuple[bytes, DigestRandomGenerator]:
    """Derive the secret for ``index`` and return it with its private generator.

    The generator is positioned right after the secret, so further draws
    continue the same index's stream deterministically.
    """

    if not 0 <= index <= MAX_INDEX:
        raise ValueError("index must fit in an unsigned 64-bit integer")

    local_seed = sha512_digest(master_seed, struct.pack(">Q", index))
    prng = DigestRandomGenerator()
    prng.add_seed_material(local_seed)
    return prng.next_bytes(SEED_SIZE), prng


def derive_seed(master_seed: bytes, index: int) -> bytes:
    """Return the 32-byte secret for ``(master_seed, index)``."""

    secret, _ = derive_seed_stream(master_seed, index)
    return secret
