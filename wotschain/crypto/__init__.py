"""Cryptographic building blocks of the WOTS key schedule.

Modules in this package are deliberately small: digests, the digest stream
generator, index-keyed seed derivation, component separation and the WOTS+
primitive. Higher layers (:mod:`wotschain.keypair`, :mod:`wotschain.keychain`)
compose them.
"""

from __future__ import annotations

from .components import Components, separate_components
from .derivation import derive_seed, derive_seed_stream
from .drbg import DigestRandomGenerator
from .errors import (
    CryptoError,
    EntropyError,
    GenerationError,
    InvalidKeyError,
    KeychainExhaustedError,
    KeyReuseError,
)
from .hashes import sha256_digest, sha512_digest
from .random import random_bytes
from .wots import (
    MESSAGE_SIZE,
    PUBLIC_KEY_SIZE,
    SIGNATURE_SIZE,
    wots_pk_from_sig,
    wots_pkgen,
    wots_sign,
)

__all__ = [
    "Components",
    "CryptoError",
    "DigestRandomGenerator",
    "EntropyError",
    "GenerationError",
    "InvalidKeyError",
    "KeychainExhaustedError",
    "KeyReuseError",
    "MESSAGE_SIZE",
    "PUBLIC_KEY_SIZE",
    "SIGNATURE_SIZE",
    "derive_seed",
    "derive_seed_stream",
    "random_bytes",
    "separate_components",
    "sha256_digest",
    "sha512_digest",
    "wots_pk_from_sig",
    "wots_pkgen",
    "wots_sign",
]
