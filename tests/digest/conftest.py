"""Shared helpers for the digest pipeline tests."""
from __future__ import annotations

import math
import random

SEED = 42

ABC_DIGEST = "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
EMPTY_DIGEST = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
TWO_BLOCK_MESSAGE = b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq"
TWO_BLOCK_DIGEST = "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1"
TEST_MESSAGE_DIGEST = "0668b515bfc41b90b6a90a6ae8600256e1c76a67d17c78a26127ddeb9b324435"


def signed_zero_bits(num_bits: int) -> int:
    """Zero-bit count computed the C way: truncating remainder on a
    signed difference, then shifted back into [0, 512)."""
    rem = int(math.fmod(447 - num_bits, 512))
    return (rem + 512) % 512


def random_messages(count: int, max_len: int = 300) -> list[bytes]:
    """Seeded random messages of assorted lengths."""
    rng = random.Random(SEED)
    return [rng.randbytes(rng.randint(0, max_len)) for _ in range(count)]
