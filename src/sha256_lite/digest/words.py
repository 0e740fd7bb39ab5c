"""32-bit word operations used by the compression function.

Python ints are unbounded, so every operation that can carry past bit 31
masks with WORD_MASK. Inputs are assumed to already be 32-bit words.

Naming follows FIPS 180-4: the "big" sigmas (Σ0, Σ1) mix the working
variables during the rounds, the "small" sigmas (σ0, σ1) drive the
message schedule recurrence.
"""
from __future__ import annotations

from sha256_lite.domain.constants import WORD_MASK


def rotr(x: int, n: int) -> int:
    """Circular right rotation of a 32-bit word by n bits (0 < n < 32)."""
    return ((x >> n) | (x << (32 - n))) & WORD_MASK


def shr(x: int, n: int) -> int:
    return x >> n


def add32(*words: int) -> int:
    """Sum words modulo 2**32."""
    return sum(words) & WORD_MASK


def ch(x: int, y: int, z: int) -> int:
    """Choose: bits of y where x is set, bits of z where it is not."""
    return (x & y) ^ (~x & z)


def maj(x: int, y: int, z: int) -> int:
    """Majority vote of each bit position."""
    return (x & y) ^ (x & z) ^ (y & z)


def big_sigma0(x: int) -> int:
    return rotr(x, 2) ^ rotr(x, 13) ^ rotr(x, 22)


def big_sigma1(x: int) -> int:
    return rotr(x, 6) ^ rotr(x, 11) ^ rotr(x, 25)


def small_sigma0(x: int) -> int:
    return rotr(x, 7) ^ rotr(x, 18) ^ shr(x, 3)


def small_sigma1(x: int) -> int:
    return rotr(x, 17) ^ rotr(x, 19) ^ shr(x, 10)
