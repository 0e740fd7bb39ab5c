"""SHA-256 digest: pad, parse, compress every block, serialize.

Each call recomputes over the whole input. There is no incremental
update API; the only process-wide data are the constant tables.
"""
from __future__ import annotations

import struct

from sha256_lite.digest.blocks import parse_blocks
from sha256_lite.digest.compression import compress
from sha256_lite.digest.padding import pad
from sha256_lite.domain.constants import INITIAL_HASH
from sha256_lite.domain.types import Digest, HashState
from sha256_lite.errors import require_bytes

_STATE = struct.Struct(">8I")


def serialize_state(state: HashState) -> Digest:
    """Concatenate the 8 state words as big-endian bytes, in state order."""
    return _STATE.pack(*state)


def sha256(data: bytes) -> Digest:
    """Return the 32-byte SHA-256 digest of data.

    Blocks are folded strictly in order: block i+1 starts from the state
    block i produced.
    """
    message = require_bytes("data", data)
    state = INITIAL_HASH
    for block in parse_blocks(pad(message)):
        state = compress(state, block)
    return serialize_state(state)


def sha256_hex(data: bytes) -> str:
    """SHA-256 as a 64-character lowercase hex string."""
    return sha256(data).hex()
