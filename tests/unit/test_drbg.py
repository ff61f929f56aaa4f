"""Unit tests for wotschain.crypto.drbg module."""

import pytest

from wotschain.crypto.drbg import DigestRandomGenerator


ABC_BLOCK_0 = bytes.fromhex(
    "7231a01ead7829a9af72bc1022b1021d69302e97d7888bf7e06e00dee9826108"
    "b5a092e9eca7623bde11f0486e3d47c64e78754d9277e6d689557a75b6be7a8b"
)
ABC_BLOCK_1 = bytes.fromhex(
    "f79e6e2ad34ad32a3c37e3dfba8c50bd4605c5bbaf6e1fd9fe1dc6172d9121e0"
    "280bf1c5f6cd4d3c6aba9966d3f68d4d725ff6f5ae9fbafad15c8127ea3f79ca"
)
ABCDEF_BLOCK_1 = bytes.fromhex(
    "af613b3f7ee2a5056e25b316f29ec6c234392dd7f1055701e77a88baaa840574"
    "d4437426d3784aadeced18e84d3cae74c9ff4b63e8fb87615e7b6ba72c93ce16"
)


def _seeded(seed: bytes = b"abc") -> DigestRandomGenerator:
    prng = DigestRandomGenerator()
    prng.add_seed_material(seed)
    return prng


class TestDigestRandomGenerator:
    """Test the SHA-512 digest stream."""

    def test_first_block_is_digest_of_seed_and_counter(self):
        """Test the first 64 bytes equal SHA-512(seed || BE32(0))."""
        assert _seeded().next_bytes(64) == ABC_BLOCK_0

    def test_stream_continues_with_next_counter(self):
        """Test the stream moves on to SHA-512(seed || BE32(1))."""
        assert _seeded().next_bytes(128) == ABC_BLOCK_0 + ABC_BLOCK_1

    def test_call_boundaries_do_not_change_stream(self):
        """Test one 64-byte draw equals two sequential 32-byte draws."""
        one = _seeded().next_bytes(64)
        prng = _seeded()
        two = prng.next_bytes(32) + prng.next_bytes(32)
        assert one == two

    def test_uneven_draws_match_single_draw(self):
        """Test draws that straddle block boundaries."""
        prng = _seeded()
        chunks = [prng.next_bytes(n) for n in (1, 63, 5, 59, 70)]
        assert b"".join(chunks) == _seeded().next_bytes(198)

    def test_reseeding_accumulates_seed_material(self):
        """Test a second seed call hashes the whole accumulated seed."""
        prng = _seeded(b"abc")
        prng.add_seed_material(b"def")
        assert prng.next_bytes(64) == ABCDEF_BLOCK_1

    def test_reseeding_discards_unread_block(self):
        """Test unread bytes are dropped when new seed material arrives."""
        prng = _seeded(b"abc")
        prng.next_bytes(10)
        prng.add_seed_material(b"def")
        assert prng.next_bytes(64) == ABCDEF_BLOCK_1

    def test_counter_advances_per_block(self):
        """Test the counter counts generated blocks."""
        prng = _seeded()
        assert prng.counter == 1
        prng.next_bytes(64)
        assert prng.counter == 1
        prng.next_bytes(1)
        assert prng.counter == 2

    def test_zero_length_draw(self):
        """Test drawing zero bytes leaves the stream untouched."""
        prng = _seeded()
        assert prng.next_bytes(0) == b""
        assert prng.next_bytes(64) == ABC_BLOCK_0

    def test_unseeded_generator_is_deterministic(self):
        """Test an unseeded generator still produces a reproducible stream."""
        assert DigestRandomGenerator().next_bytes(32) == DigestRandomGenerator().next_bytes(32)

    def test_negative_length_rejected(self):
        """Test negative lengths raise ValueError."""
        with pytest.raises(ValueError):
            _seeded().next_bytes(-1)
