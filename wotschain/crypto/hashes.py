"""Digest primitives.

``sha256_digest`` is the narrow (32-byte) hash and ``sha512_digest`` the wide
(64-byte) hash used throughout the key schedule.
"""

from __future__ import annotations

import hashlib

SHA256_SIZE = 32
SHA512_SIZE = 64


def sha256_digest(*parts: bytes) -> bytes:
    """Return SHA-256 over the concatenation of ``parts``."""

    h = hashlib.sha256()
    for part in parts:
        h.update(part)
    return h.digest()


def sha512_digest(*parts: bytes) -> bytes:
    """Return SHA-512 over the concatenation of ``parts``."""

    h = hashlib.sha512()
    for part in parts:
        h.update(part)
    return h.digest()
