"""Message padding: turn arbitrary bytes into whole 512-bit blocks.

The padded message is

    message || 1 || 0 * k || length

where length is the original message length in bits as a 64-bit
big-endian integer, and k is the smallest non-negative integer with
(bit_length + 1 + k) % 512 == 448. The reasoning is done in bits, but
for byte input k is always 7 mod 8, so the single 1-bit and the first
seven zero bits together are exactly the byte 0x80 and the remaining
zero bits are whole bytes. The output never leaves byte alignment.

An empty message still pads to one full block: 0x80, 55 zero bytes and
a zero length field.
"""
from __future__ import annotations

import struct

from sha256_lite.errors import PaddingInvariantViolation

BLOCK_BITS = 512
LENGTH_FIELD_BITS = 64
_LENGTH_FIELD = struct.Struct(">Q")


def zero_bit_count(num_bits: int) -> int:
    """Number of zero bits k between the 1-bit and the length field.

    Smallest k >= 0 with (num_bits + 1 + k) % 512 == 448. Python's %
    already returns a non-negative result for a positive modulus, so
    there is no need to add 512 and reduce again.

    Boundaries: num_bits % 512 == 447 gives k == 0 (the 1-bit lands
    right before the length field); num_bits % 512 == 448 gives
    k == 511 and spills into an extra block.
    """
    return (BLOCK_BITS - LENGTH_FIELD_BITS - 1 - num_bits) % BLOCK_BITS


def padded_bit_length(num_bits: int) -> int:
    """Total bit length of the padded form of a num_bits message."""
    return num_bits + 1 + zero_bit_count(num_bits) + LENGTH_FIELD_BITS


def pad(data: bytes) -> bytes:
    """Pad data to a multiple of 64 bytes.

    Raises PaddingInvariantViolation if the result would not be a whole
    number of 512-bit blocks. That is an internal check; byte input
    never triggers it.
    """
    num_bits = len(data) * 8
    zero_bits = zero_bit_count(num_bits)
    total_bits = padded_bit_length(num_bits)
    if total_bits % BLOCK_BITS != 0:
        raise PaddingInvariantViolation(total_bits)

    padded = bytearray(data)
    # 1-bit plus the first 7 zero bits
    padded.append(0x80)
    padded.extend(bytes((zero_bits - 7) // 8))
    padded.extend(_LENGTH_FIELD.pack(num_bits))

    if len(padded) * 8 != total_bits:
        raise PaddingInvariantViolation(len(padded) * 8)
    return bytes(padded)
