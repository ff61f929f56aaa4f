"""Secure randomness utilities."""

from __future__ import annotations

import logging
import os

from .errors import EntropyError

logger = logging.getLogger(__name__)


def random_bytes(length: int) -> bytes:
    """Return ``length`` cryptographically secure random bytes.

    Raises:
        EntropyError: If the operating system randomness source is unavailable.
            The failure is never retried or replaced by a weaker source.
    """

    if length < 0:
        raise ValueError("length must be non-negative")
    try:
        return os.urandom(length)
    except (OSError, NotImplementedError) as e:
        logger.error("secure random source unavailable: %s", e)
        raise EntropyError("secure random source unavailable") from e
