"""HMAC-SHA256 built on the pure-Python digest.

    HMAC(K, m) = H((K' ^ opad) || H((K' ^ ipad) || m))

K' is the key normalized to exactly one block: keys longer than 64
bytes are hashed first, then everything is right-padded with zero
bytes. The nested construction is what makes HMAC resist the
length-extension attacks that break a naive H(key || message).
"""
from __future__ import annotations

from sha256_lite.digest.sha256 import sha256
from sha256_lite.domain.constants import BLOCK_SIZE, IPAD_BYTE, OPAD_BYTE
from sha256_lite.domain.types import Digest
from sha256_lite.errors import require_bytes


def normalize_key(key: bytes) -> bytes:
    """Return key adjusted to exactly BLOCK_SIZE bytes."""
    key = require_bytes("key", key)
    if len(key) > BLOCK_SIZE:
        key = sha256(key)
    return key.ljust(BLOCK_SIZE, b"\x00")


def _xor_pad(normalized_key: bytes, pad_byte: int) -> bytes:
    return bytes(k ^ pad_byte for k in normalized_key)


def derive_pads(normalized_key: bytes) -> tuple[bytes, bytes]:
    """Split a normalized key into its (inner, outer) padded keys."""
    return (
        _xor_pad(normalized_key, IPAD_BYTE),
        _xor_pad(normalized_key, OPAD_BYTE),
    )


def hmac_with_pads(data: bytes, inner_key: bytes, outer_key: bytes) -> Digest:
    inner_hash = sha256(inner_key + data)
    return sha256(outer_key + inner_hash)


def hmac_sha256(data: bytes, key: bytes) -> Digest:
    """Return the 32-byte HMAC-SHA256 tag of data under key.

    Argument order is (data, key), matching verify_hmac(). Note that the
    standard library's hmac.new() takes the key first.
    """
    message = require_bytes("data", data)
    inner_key, outer_key = derive_pads(normalize_key(key))
    return hmac_with_pads(message, inner_key, outer_key)


def hmac_sha256_hex(data: bytes, key: bytes) -> str:
    """HMAC-SHA256 as a 64-character lowercase hex string."""
    return hmac_sha256(data, key).hex()
