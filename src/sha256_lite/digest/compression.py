"""The SHA-256 compression function.

compress() folds one 16-word message block into the 8-word hash state:

1. Expand the block into a 64-word message schedule.
2. Load the working variables a..h from the current state.
3. Run 64 rounds, each mixing one schedule word and one round constant
   into the working variables.
4. Add the working variables back into the state.

All arithmetic is modulo 2**32. The schedule is a fresh list per block
and the state is returned as a new tuple, so no call ever shares
mutable data with another.
"""
from __future__ import annotations

from sha256_lite.digest.words import (
    add32,
    big_sigma0,
    big_sigma1,
    ch,
    maj,
    small_sigma0,
    small_sigma1,
)
from sha256_lite.domain.constants import ROUND_CONSTANTS, WORD_MASK
from sha256_lite.domain.types import HashState, MessageBlock, MessageSchedule

ROUNDS = 64


def message_schedule(block: MessageBlock) -> MessageSchedule:
    """Expand 16 block words into the 64-word schedule W.

    W[0..15] copy the block; for t >= 16,
    W[t] = σ1(W[t-2]) + W[t-7] + σ0(W[t-15]) + W[t-16].
    """
    w = list(block)
    for t in range(16, ROUNDS):
        w.append(add32(
            small_sigma1(w[t - 2]),
            w[t - 7],
            small_sigma0(w[t - 15]),
            w[t - 16],
        ))
    return w


def compress(state: HashState, block: MessageBlock) -> HashState:
    """Return the hash state after absorbing one block."""
    w = message_schedule(block)
    a, b, c, d, e, f, g, h = state

    for t in range(ROUNDS):
        t1 = add32(h, big_sigma1(e), ch(e, f, g), ROUND_CONSTANTS[t], w[t])
        t2 = add32(big_sigma0(a), maj(a, b, c))
        h = g
        g = f
        f = e
        e = (d + t1) & WORD_MASK
        d = c
        c = b
        b = a
        a = (t1 + t2) & WORD_MASK

    return tuple(
        (old + new) & WORD_MASK
        for old, new in zip(state, (a, b, c, d, e, f, g, h))
    )
