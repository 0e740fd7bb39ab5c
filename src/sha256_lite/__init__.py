"""sha256-lite: SHA-256 and HMAC-SHA256 in pure Python.

    >>> from sha256_lite import sha256_hex, hmac_sha256, verify_hmac
    >>> sha256_hex(b"")
    'e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855'
    >>> tag = hmac_sha256(b"payload", b"secret")
    >>> verify_hmac(b"payload", tag, b"secret")
    True
"""

from sha256_lite.crypto import (
    TagVerifier,
    hmac_sha256,
    hmac_sha256_hex,
    normalize_key,
    verify_hmac,
)
from sha256_lite.digest import sha256, sha256_hex
from sha256_lite.domain.constants import BLOCK_SIZE, DIGEST_SIZE
from sha256_lite.errors import PaddingInvariantViolation

__version__ = "0.1.0"

__all__ = [
    "BLOCK_SIZE",
    "DIGEST_SIZE",
    "PaddingInvariantViolation",
    "TagVerifier",
    "hmac_sha256",
    "hmac_sha256_hex",
    "normalize_key",
    "sha256",
    "sha256_hex",
    "verify_hmac",
]
