"""Test configuration for the wotschain package."""

import pytest

from wotschain.config import Config, KeyConfig


ZERO_SEED = bytes(32)


@pytest.fixture
def zero_seed() -> bytes:
    """All-zero 32-byte master seed used for golden vectors."""
    return ZERO_SEED


@pytest.fixture
def message() -> bytes:
    """A fixed 32-byte message."""
    return bytes(range(32))


@pytest.fixture
def lenient_config() -> Config:
    """Configuration with one-time enforcement switched off."""
    return Config(keys=KeyConfig(enforce_one_time=False))
