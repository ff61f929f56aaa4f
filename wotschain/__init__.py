"""wotschain: deterministic keychains of Winternitz one-time signature keys."""

from __future__ import annotations

import logging

__version__ = "0.1.0"

from .config import Config, KeyConfig, LoggingConfig
from .crypto.errors import (
    CryptoError,
    EntropyError,
    GenerationError,
    InvalidKeyError,
    KeychainExhaustedError,
    KeyReuseError,
)
from .keychain import Keychain, SynchronizedKeychain
from .keypair import Keypair, keygen
from .seeds import RandomSeed, SeedSource, WithSeed

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Config",
    "CryptoError",
    "EntropyError",
    "GenerationError",
    "InvalidKeyError",
    "KeyConfig",
    "Keychain",
    "KeychainExhaustedError",
    "KeyReuseError",
    "Keypair",
    "LoggingConfig",
    "RandomSeed",
    "SeedSource",
    "SynchronizedKeychain",
    "WithSeed",
    "keygen",
]
