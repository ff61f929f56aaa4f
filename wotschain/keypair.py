"""WOTS keypair assembly.

A :class:`Keypair` bundles the 32-byte seed it was built from, the three
domain-separated components and the 2144-byte public key. It signs at most once
unless one-time enforcement is switched off in :class:`~wotschain.config.Config`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from cryptography.hazmat.primitives import constant_time

from .config import Config
from .crypto.components import Components, separate_components
from .crypto.errors import InvalidKeyError, KeyReuseError
from .crypto.wots import (
    MESSAGE_SIZE,
    SIGNATURE_SIZE,
    wots_pk_from_sig,
    wots_pkgen,
    wots_sign,
)
from .seeds import RandomSeed, SeedSource, WithSeed, resolve_seed

logger = logging.getLogger(__name__)

_BUFFER_TYPES = (bytes, bytearray, memoryview)


@dataclass(slots=True)
class Keypair:
    """A one-time WOTS keypair.

    Args:
        public_key: 2144-byte WOTS public key.
        private_key: The 32-byte seed the keypair was derived from.
        components: Sub-seeds derived from ``private_key``.
        enforce_one_time: Refuse a second :meth:`sign` call.
    """

    public_key: bytes
    private_key: bytes
    components: Components
    enforce_one_time: bool = True
    _signed: bool = field(default=False, init=False, repr=False, compare=False)

    @classmethod
    def from_seed(cls, seed: bytes, *, config: Optional[Config] = None) -> Keypair:
        """Shorthand for ``keygen(WithSeed(seed), config=config)``."""

        return keygen(WithSeed(seed), config=config)

    @property
    def signed(self) -> bool:
        """Whether this keypair has produced a signature."""

        return self._signed

    def sign(self, message: bytes) -> bytes:
        """Sign a 32-byte ``message`` and return the 2144-byte signature.

        Raises:
            KeyReuseError: If the keypair already signed and one-time use is
                enforced.
            InvalidKeyError: If ``message`` is not 32 bytes.
        """

        if len(message) != MESSAGE_SIZE:
            raise InvalidKeyError("message must be 32 bytes")
        if self._signed:
            if self.enforce_one_time:
                raise KeyReuseError("one-time keypair has already signed")
            logger.warning("one-time keypair is signing more than once")

        c = self.components
        signature = wots_sign(message, c.private_seed, c.public_seed, c.addr_seed)
        self._signed = True
        return signature

    def verify(self, message: bytes, signature: bytes) -> bool:
        """Return ``True`` iff ``signature`` over ``message`` recovers this public key.

        Never raises; malformed input is simply a mismatch.
        """

        if not isinstance(message, _BUFFER_TYPES) or not isinstance(signature, _BUFFER_TYPES):
            return False
        message, signature = bytes(message), bytes(signature)
        if len(message) != MESSAGE_SIZE or len(signature) != SIGNATURE_SIZE:
            return False
        c = self.components
        recovered = wots_pk_from_sig(signature, message, c.public_seed, c.addr_seed)
        return constant_time.bytes_eq(recovered, self.public_key)

    def __repr__(self) -> str:
        return f"Keypair(public_key={self.public_key[:8].hex()}..., signed={self._signed})"


def keygen(source: SeedSource = RandomSeed(), *, config: Optional[Config] = None) -> Keypair:
    """Build a keypair from ``source``.

    Raises:
        EntropyError: If ``source`` is :class:`RandomSeed` and the secure random
            source fails.
    """

    config = config or Config()
    seed = resolve_seed(source)
    if not config.enforce_one_time:
        logger.debug("one-time enforcement disabled for new keypair")

    components = separate_components(seed)
    public_key = wots_pkgen(components.private_seed, components.public_seed, components.addr_seed)
    return Keypair(
        public_key=public_key,
        private_key=seed,
        components=components,
        enforce_one_time=config.enforce_one_time,
    )
