"""Types and fixed constants for the SHA-256 pipeline."""

from sha256_lite.domain.constants import (
    BLOCK_SIZE,
    DIGEST_SIZE,
    INITIAL_HASH,
    IPAD_BYTE,
    OPAD_BYTE,
    ROUND_CONSTANTS,
    WORD_MASK,
)
from sha256_lite.domain.types import (
    Digest,
    HashState,
    MessageBlock,
    MessageSchedule,
    Word,
)

__all__ = [
    "BLOCK_SIZE",
    "DIGEST_SIZE",
    "Digest",
    "HashState",
    "INITIAL_HASH",
    "IPAD_BYTE",
    "MessageBlock",
    "MessageSchedule",
    "OPAD_BYTE",
    "ROUND_CONSTANTS",
    "WORD_MASK",
    "Word",
]
