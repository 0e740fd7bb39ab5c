"""Exceptions raised by sha256-lite."""
from __future__ import annotations


class PaddingInvariantViolation(AssertionError):
    """Raised when a padded message is not a whole number of 512-bit blocks.

    This cannot happen for byte input under the padding rule; seeing it
    means the padder itself is broken, so it is an AssertionError rather
    than something callers should catch and retry.
    """

    def __init__(self, padded_bits: int) -> None:
        self.padded_bits = padded_bits
        super().__init__(
            f"Padded message is {padded_bits} bits, "
            f"not a multiple of 512"
        )


def require_bytes(name: str, value: object) -> bytes:
    """Return value as immutable bytes, or raise TypeError.

    Accepts bytes, bytearray and memoryview. Text is rejected: callers
    must pick an encoding themselves, the same rule hashlib applies.
    """
    if isinstance(value, str):
        raise TypeError(f"{name} must be bytes-like, got str (encode it first)")
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(
            f"{name} must be bytes-like, got {type(value).__name__}"
        )
    return bytes(value)
