"""Shared type aliases used across the digest and MAC modules."""
from __future__ import annotations

from typing import TypeAlias

Word: TypeAlias = int  # unsigned 32-bit, always in [0, 2**32)
MessageBlock: TypeAlias = tuple[int, ...]  # exactly 16 words
MessageSchedule: TypeAlias = list[int]  # exactly 64 words, per-block scratch
HashState: TypeAlias = tuple[int, ...]  # exactly 8 words
Digest: TypeAlias = bytes  # exactly 32 bytes
