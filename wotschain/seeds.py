"""Explicit seed sources for keypair and keychain creation.

Callers choose between a fixed seed (:class:`WithSeed`) and fresh operating
system randomness (:class:`RandomSeed`). Only the latter can fail, with
:class:`~wotschain.crypto.errors.EntropyError`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from .crypto.errors import InvalidKeyError
from .crypto.random import random_bytes

SEED_SIZE = 32

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WithSeed:
    """Use ``seed`` verbatim."""

    seed: bytes

    def __post_init__(self) -> None:
        if len(self.seed) != SEED_SIZE:
            raise InvalidKeyError("seed must be 32 bytes")
        object.__setattr__(self, "seed", bytes(self.seed))

    def __repr__(self) -> str:
        return "WithSeed(<redacted>)"


@dataclass(frozen=True, slots=True)
class RandomSeed:
    """Draw a fresh 32-byte seed from the secure random source."""


SeedSource = Union[WithSeed, RandomSeed]


def resolve_seed(source: SeedSource) -> bytes:
    """Return the 32-byte seed described by ``source``."""

    if isinstance(source, WithSeed):
        return source.seed
    if isinstance(source, RandomSeed):
        logger.debug("drawing %d-byte seed from secure random source", SEED_SIZE)
        return random_bytes(SEED_SIZE)
    raise TypeError(f"unsupported seed source: {type(source).__name__}")
