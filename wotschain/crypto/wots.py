"""Winternitz one-time signatures (WOTS+).

This is the fixed-size primitive the key schedule feeds: ``n = 32``,
``w = 16``, 67 chains, so public keys and signatures are both 2144 bytes.
The construction follows the XMSS reference code:

- ``PRF(key, x) = SHA-256(toByte(3, 32) || key || x)``
- ``F(key, x) = SHA-256(toByte(0, 32) || key || x)``
- each chain step keys ``F`` and masks its input with two PRF outputs bound to
  the step's hash address.

The 32-byte address seed is read as eight little-endian 32-bit words. Words 5,
6 and 7 are overwritten with the chain index, the hash index and the key/mask
selector, and the address is hashed as eight big-endian words.
"""

from __future__ import annotations

import struct

from .errors import InvalidKeyError
from .hashes import sha256_digest

WOTS_N = 32
WOTS_W = 16
WOTS_LOG_W = 4
WOTS_LEN1 = 64
WOTS_LEN2 = 3
WOTS_LEN = WOTS_LEN1 + WOTS_LEN2
WOTS_SIG_BYTES = WOTS_LEN * WOTS_N

PUBLIC_KEY_SIZE = WOTS_SIG_BYTES
SIGNATURE_SIZE = WOTS_SIG_BYTES
MESSAGE_SIZE = WOTS_N

_PADDING_F = (0).to_bytes(WOTS_N, "big")
_PADDING_PRF = (3).to_bytes(WOTS_N, "big")

_CHAIN_WORD = 5
_HASH_WORD = 6
_KEY_AND_MASK_WORD = 7


def _check(name: str, value: bytes, size: int) -> None:
    if len(value) != size:
        raise InvalidKeyError(f"{name} must be {size} bytes")


def _prf(key: bytes, data: bytes) -> bytes:
    return sha256_digest(_PADDING_PRF, key, data)


def _addr_words(addr_seed: bytes) -> list[int]:
    return list(struct.unpack("<8I", addr_seed))


def _addr_bytes(words: list[int]) -> bytes:
    return struct.pack(">8I", *words)


def _thash_f(data: bytes, public_seed: bytes, addr: list[int]) -> bytes:
    addr[_KEY_AND_MASK_WORD] = 0
    key = _prf(public_seed, _addr_bytes(addr))
    addr[_KEY_AND_MASK_WORD] = 1
    bitmask = _prf(public_seed, _addr_bytes(addr))
    masked = bytes(x ^ y for x, y in zip(data, bitmask))
    return sha256_digest(_PADDING_F, key, masked)


def _gen_chain(
    data: bytes, start: int, steps: int, public_seed: bytes, addr: list[int]
) -> bytes:
    out = data
    for i in range(start, min(start + steps, WOTS_W)):
        addr[_HASH_WORD] = i
        out = _thash_f(out, public_seed, addr)
    return out


def _expand_seed(private_seed: bytes) -> list[bytes]:
    return [_prf(private_seed, i.to_bytes(32, "big")) for i in range(WOTS_LEN)]


def _base_w(data: bytes, out_len: int) -> list[int]:
    digits: list[int] = []
    for byte in data:
        digits.append(byte >> 4)
        digits.append(byte & 0x0F)
    return digits[:out_len]


def chain_lengths(message: bytes) -> list[int]:
    """Return the 67 base-16 digits (message digits plus checksum) for ``message``."""

    _check("message", message, MESSAGE_SIZE)
    digits = _base_w(message, WOTS_LEN1)
    csum = sum(WOTS_W - 1 - d for d in digits)
    csum <<= 8 - ((WOTS_LEN2 * WOTS_LOG_W) % 8)
    csum_bytes = csum.to_bytes((WOTS_LEN2 * WOTS_LOG_W + 7) // 8, "big")
    return digits + _base_w(csum_bytes, WOTS_LEN2)


def wots_pkgen(private_seed: bytes, public_seed: bytes, addr_seed: bytes) -> bytes:
    """Compute the 2144-byte public key for the given sub-seeds."""

    _check("private_seed", private_seed, WOTS_N)
    _check("public_seed", public_seed, WOTS_N)
    _check("addr_seed", addr_seed, WOTS_N)

    addr = _addr_words(addr_seed)
    pk = bytearray()
    for i, sk in enumerate(_expand_seed(private_seed)):
        addr[_CHAIN_WORD] = i
        pk += _gen_chain(sk, 0, WOTS_W - 1, public_seed, addr)
    return bytes(pk)


def wots_sign(
    message: bytes, private_seed: bytes, public_seed: bytes, addr_seed: bytes
) -> bytes:
    """Sign a 32-byte ``message``; returns a 2144-byte signature."""

    _check("private_seed", private_seed, WOTS_N)
    _check("public_seed", public_seed, WOTS_N)
    _check("addr_seed", addr_seed, WOTS_N)
    lengths = chain_lengths(message)

    addr = _addr_words(addr_seed)
    sig = bytearray()
    for i, sk in enumerate(_expand_seed(private_seed)):
        addr[_CHAIN_WORD] = i
        sig += _gen_chain(sk, 0, lengths[i], public_seed, addr)
    return bytes(sig)


def wots_pk_from_sig(
    signature: bytes, message: bytes, public_seed: bytes, addr_seed: bytes
) -> bytes:
    """Recover the public key implied by ``signature`` over ``message``."""

    _check("signature", signature, SIGNATURE_SIZE)
    _check("public_seed", public_seed, WOTS_N)
    _check("addr_seed", addr_seed, WOTS_N)
    lengths = chain_lengths(message)

    addr = _addr_words(addr_seed)
    pk = bytearray()
    for i in range(WOTS_LEN):
        addr[_CHAIN_WORD] = i
        block = signature[i * WOTS_N : (i + 1) * WOTS_N]
        pk += _gen_chain(block, lengths[i], WOTS_W - 1 - lengths[i], public_seed, addr)
    return bytes(pk)
