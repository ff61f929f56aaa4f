#!/usr/bin/env python3
"""Basic wotschain keychain example.

Derives a few one-time keypairs from a fixed master seed, signs a message with
one of them and verifies the signature.
"""

import hashlib
import logging
import sys
from pathlib import Path

# Add the parent directory to the path so we can import wotschain
sys.path.insert(0, str(Path(__file__).parent.parent))

from wotschain import Config, Keychain, KeyReuseError, WithSeed


def main() -> int:
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    config = Config.from_environment()
    config.configure_logging()

    master_seed = bytes(32)
    keychain = Keychain.new(WithSeed(master_seed), config=config)

    print("Deriving keypairs from the all-zero master seed")
    for _ in range(3):
        index = keychain.index
        keypair = keychain.next()
        print(f"   index {index}: public key {keypair.public_key[:16].hex()}...")

    message = hashlib.sha256(b"hello, one-time world").digest()
    signature = keypair.sign(message)
    print(f"\nSigned with the last keypair ({len(signature)} bytes)")
    print(f"   verify: {keypair.verify(message, signature)}")

    try:
        keypair.sign(message)
    except KeyReuseError as e:
        print(f"   second signature refused: {e}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
