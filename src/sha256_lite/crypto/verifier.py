"""Constant-time verification of HMAC-SHA256 tags.

The expected tag is recomputed and compared to the received one with
hmac.compare_digest from the standard library. compare_digest runs in
time independent of where two equal-length inputs first differ, and
simply returns False for inputs of different lengths, so a truncated or
over-long tag is a normal mismatch rather than an error. A plain ==
would stop at the first differing byte and leak, through timing, how
much of a forged tag was right.

Mismatches are expected outcomes (a bad signature, a tampered message)
and never raise. Only arguments that are not bytes-like raise TypeError.
"""
from __future__ import annotations

import hmac
import logging

from sha256_lite.crypto.mac import (
    derive_pads,
    hmac_sha256,
    hmac_with_pads,
    normalize_key,
)
from sha256_lite.domain.constants import DIGEST_SIZE
from sha256_lite.domain.types import Digest
from sha256_lite.errors import require_bytes

log = logging.getLogger(__name__)


def constant_time_equal(a: bytes, b: bytes) -> bool:
    return hmac.compare_digest(a, b)


def _check_tag(expected: Digest, received_tag: bytes) -> bool:
    if len(received_tag) != DIGEST_SIZE:
        # compare_digest still runs; the length itself is public
        log.debug(
            "Received tag is %d bytes, expected %d",
            len(received_tag), DIGEST_SIZE,
        )
    matched = constant_time_equal(expected, received_tag)
    if not matched:
        log.debug("HMAC tag mismatch")
    return matched


def verify_hmac(data: bytes, received_tag: bytes, key: bytes) -> bool:
    """Return True if received_tag is the HMAC-SHA256 of data under key."""
    received = require_bytes("received_tag", received_tag)
    return _check_tag(hmac_sha256(data, key), received)


class TagVerifier:
    """Signs and verifies messages under one fixed key.

    The key is normalized and split into its inner and outer pads once,
    at construction, instead of on every call. Instances hold no other
    state and can be shared between threads.

    repr() never shows the key.
    """

    __slots__ = ("_inner_key", "_outer_key")

    def __init__(self, key: bytes) -> None:
        self._inner_key, self._outer_key = derive_pads(normalize_key(key))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key=<redacted>)"

    def sign(self, data: bytes) -> Digest:
        """Compute the 32-byte tag for data."""
        message = require_bytes("data", data)
        return hmac_with_pads(message, self._inner_key, self._outer_key)

    def verify(self, data: bytes, received_tag: bytes) -> bool:
        """Return True if received_tag matches data under this key."""
        received = require_bytes("received_tag", received_tag)
        return _check_tag(self.sign(data), received)
