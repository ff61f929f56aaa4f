"""Shared exceptions for :mod:`wotschain.crypto`.

The library raises a small set of domain-specific exceptions to avoid leaking
backend-specific implementation details.
"""

from __future__ import annotations


class CryptoError(Exception):
    """Base error for cryptographic operations."""


class InvalidKeyError(CryptoError):
    """Raised when key, seed or signature material has the wrong shape."""


class GenerationError(CryptoError):
    """Raised when a keypair or keychain cannot be generated."""


class EntropyError(GenerationError):
    """Raised when the operating system cannot supply secure random bytes."""


class KeyReuseError(CryptoError):
    """Raised when a one-time keypair is asked to sign a second time."""


class KeychainExhaustedError(GenerationError):
    """Raised when a keychain has consumed its entire 64-bit index space."""
