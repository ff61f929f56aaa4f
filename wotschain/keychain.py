"""Deterministic keychains of one-time keypairs.

A :class:`Keychain` owns a 32-byte master seed and a 64-bit index. Each
:meth:`Keychain.next` call derives the seed for the current index, builds the
keypair and advances the index by one, so the ``n``-th keypair always comes
from index ``n - 1``.

Keychains are single-writer objects. Use :class:`SynchronizedKeychain` when
several threads draw from the same sequence.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from .config import Config
from .crypto.derivation import MAX_INDEX, derive_seed
from .crypto.errors import InvalidKeyError, KeychainExhaustedError
from .keypair import Keypair, keygen
from .seeds import SEED_SIZE, RandomSeed, SeedSource, WithSeed, resolve_seed

logger = logging.getLogger(__name__)

INDEX_SPACE = MAX_INDEX + 1


class Keychain:
    """An infinite, non-repeating sequence of keypairs from one master seed."""

    __slots__ = ("_seed", "_index", "_config")

    def __init__(self, seed: bytes, index: int = 0, *, config: Optional[Config] = None) -> None:
        if len(seed) != SEED_SIZE:
            raise InvalidKeyError("master seed must be 32 bytes")
        if not 0 <= index <= INDEX_SPACE:
            raise ValueError("index must be within the 64-bit index space")
        self._seed = bytes(seed)
        self._index = index
        self._config = config or Config()

    @classmethod
    def new(cls, source: SeedSource = RandomSeed(), *, config: Optional[Config] = None) -> Keychain:
        """Create a keychain at index 0.

        Raises:
            EntropyError: If ``source`` is :class:`RandomSeed` and the secure
                random source fails.
        """

        keychain = cls(resolve_seed(source), config=config)
        logger.debug("created keychain (random seed: %s)", isinstance(source, RandomSeed))
        return keychain

    @classmethod
    def from_state(cls, seed: bytes, index: int, *, config: Optional[Config] = None) -> Keychain:
        """Resume a keychain whose next keypair is the one at ``index``.

        The caller is responsible for never resuming from an index that has
        already been handed out.
        """

        return cls(seed, index, config=config)

    @property
    def seed(self) -> bytes:
        """The master seed."""

        return self._seed

    @property
    def index(self) -> int:
        """Index of the keypair the next :meth:`next` call returns."""

        return self._index

    def next(self) -> Keypair:
        """Derive the keypair at the current index and advance the index.

        Raises:
            KeychainExhaustedError: If every 64-bit index has been used.
        """

        index = self._index
        if index >= INDEX_SPACE:
            raise KeychainExhaustedError("keychain index space exhausted")

        self._index = index + 1
        secret = derive_seed(self._seed, index)
        keypair = keygen(WithSeed(secret[:SEED_SIZE]), config=self._config)
        logger.debug("keychain advanced to index %d", self._index)
        return keypair

    def __iter__(self) -> Keychain:
        return self

    def __next__(self) -> Keypair:
        return self.next()

    def __repr__(self) -> str:
        return f"Keychain(index={self._index})"


class SynchronizedKeychain:
    """A :class:`Keychain` whose :meth:`next` is serialized by a lock."""

    __slots__ = ("_keychain", "_lock")

    def __init__(self, keychain: Keychain) -> None:
        self._keychain = keychain
        self._lock = threading.Lock()

    @property
    def index(self) -> int:
        with self._lock:
            return self._keychain.index

    def next(self) -> Keypair:
        with self._lock:
            return self._keychain.next()

    def __iter__(self) -> SynchronizedKeychain:
        return self

    def __next__(self) -> Keypair:
        return self.next()

    def __repr__(self) -> str:
        return f"SynchronizedKeychain({self._keychain!r})"
