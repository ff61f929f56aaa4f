"""Digest-based deterministic random byte generator.

The generator keeps an append-only seed and a 32-bit counter. Every digest
block is ``SHA-512(seed || BE32(counter))``; the counter advances once per
block. Output is a running cursor over the concatenation of blocks, so call
boundaries never change the stream: ``next_bytes(64)`` equals
``next_bytes(32) + next_bytes(32)`` on identically seeded instances.

Instances are mutable and must not be shared between derivations.
"""

from __future__ import annotations

import struct

from cryptography.hazmat.primitives import hashes

_COUNTER_MASK = 0xFFFFFFFF


class DigestRandomGenerator:
    """Deterministic SHA-512 stream over accumulated seed material."""

    __slots__ = ("_seed", "_digest", "_count")

    def __init__(self) -> None:
        self._seed = bytearray()
        self._digest = b""
        self._count = 0

    @property
    def counter(self) -> int:
        """Number of digest blocks produced so far (modulo 2**32)."""

        return self._count

    def add_seed_material(self, data: bytes) -> None:
        """Append ``data`` to the seed and immediately compute a fresh block.

        Any unread bytes of the previous block are discarded.
        """

        self._seed += data
        self._generate_next_digest()

    def next_bytes(self, length: int) -> bytes:
        """Return exactly ``length`` bytes from the stream."""

        if length < 0:
            raise ValueError("length must be non-negative")

        out = bytearray()
        while len(out) < length:
            if not self._digest:
                self._generate_next_digest()
            take = min(length - len(out), len(self._digest))
            out += self._digest[:take]
            self._digest = self._digest[take:]
        return bytes(out)

    def _generate_next_digest(self) -> None:
        h = hashes.Hash(hashes.SHA512())
        h.update(bytes(self._seed))
        h.update(struct.pack(">I", self._count))
        self._digest = h.finalize()
        self._count = (self._count + 1) & _COUNTER_MASK
