"""HMAC-SHA256 construction and constant-time tag verification.

Public API:
    normalize_key, hmac_sha256, hmac_sha256_hex: tag computation
    verify_hmac: one-shot constant-time verification
    TagVerifier: sign/verify bound to one key
"""

from sha256_lite.crypto.mac import (
    derive_pads,
    hmac_sha256,
    hmac_sha256_hex,
    normalize_key,
)
from sha256_lite.crypto.verifier import (
    TagVerifier,
    constant_time_equal,
    verify_hmac,
)

__all__ = [
    "TagVerifier",
    "constant_time_equal",
    "derive_pads",
    "hmac_sha256",
    "hmac_sha256_hex",
    "normalize_key",
    "verify_hmac",
]
