"""Unit tests for wotschain.crypto.random module."""

import pytest

import wotschain.crypto.random as wrandom
from wotschain.crypto import EntropyError, GenerationError, random_bytes


def test_random_bytes_length():
    assert len(random_bytes(32)) == 32
    assert random_bytes(0) == b""


def test_random_bytes_differ():
    assert random_bytes(32) != random_bytes(32)


def test_negative_length():
    with pytest.raises(ValueError):
        random_bytes(-1)


def test_entropy_failure_is_surfaced(monkeypatch):
    def fail(_n):
        raise OSError("no entropy")

    monkeypatch.setattr(wrandom.os, "urandom", fail)
    with pytest.raises(EntropyError) as excinfo:
        random_bytes(32)
    assert isinstance(excinfo.value.__cause__, OSError)
    assert isinstance(excinfo.value, GenerationError)
