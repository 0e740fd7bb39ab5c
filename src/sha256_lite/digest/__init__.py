"""Pure-Python SHA-256 pipeline.

Public API:
    pad, zero_bit_count: message padding
    parse_blocks: 512-bit block parser
    message_schedule, compress: compression function
    sha256, sha256_hex, serialize_state: digest function
"""

from sha256_lite.digest.blocks import parse_blocks
from sha256_lite.digest.compression import compress, message_schedule
from sha256_lite.digest.padding import pad, padded_bit_length, zero_bit_count
from sha256_lite.digest.sha256 import serialize_state, sha256, sha256_hex

__all__ = [
    "compress",
    "message_schedule",
    "pad",
    "padded_bit_length",
    "parse_blocks",
    "serialize_state",
    "sha256",
    "sha256_hex",
    "zero_bit_count",
]
