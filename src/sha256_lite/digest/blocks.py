"""Split a padded message into 16-word blocks."""
from __future__ import annotations

import struct

from sha256_lite.domain.constants import BLOCK_SIZE
from sha256_lite.domain.types import MessageBlock

_BLOCK = struct.Struct(">16I")


def parse_blocks(padded: bytes) -> list[MessageBlock]:
    """Read each 64-byte chunk as 16 big-endian 32-bit words, in order.

    The padder guarantees len(padded) is a multiple of BLOCK_SIZE. A
    trailing partial chunk is a caller bug and surfaces as struct.error.
    """
    return [
        _BLOCK.unpack_from(padded, offset)
        for offset in range(0, len(padded), BLOCK_SIZE)
    ]
