"""Tests for key normalization and the HMAC-SHA256 construction."""
from __future__ import annotations

import hashlib
import hmac
import random

import pytest

from sha256_lite.crypto.mac import (
    derive_pads,
    hmac_sha256,
    hmac_sha256_hex,
    normalize_key,
)
from sha256_lite.digest.sha256 import sha256

from .conftest import HI_THERE_32_BYTE_KEY_TAG, RFC_4231_VECTORS, TEST_KEY


class TestNormalizeKey:
    @pytest.mark.parametrize("length", [0, 1, 20, 32, 63])
    def test_short_key_zero_padded(self, length):
        key = bytes(range(1, length + 1))
        normalized = normalize_key(key)
        assert len(normalized) == 64
        assert normalized == key + bytes(64 - length)

    def test_block_sized_key_untouched(self):
        key = bytes(range(64))
        assert normalize_key(key) == key

    @pytest.mark.parametrize("length", [65, 100, 131, 1000])
    def test_long_key_hashed_then_padded(self, length):
        key = b"k" * length
        assert normalize_key(key) == sha256(key) + bytes(32)

    def test_long_key_equivalent_to_its_digest(self):
        key = b"x" * 200
        assert hmac_sha256(b"msg", key) == hmac_sha256(b"msg", sha256(key))

    def test_str_key_rejected(self):
        with pytest.raises(TypeError, match="key"):
            normalize_key("secret")


class TestDerivePads:
    def test_zero_key_gives_plain_pads(self):
        inner, outer = derive_pads(bytes(64))
        assert inner == b"\x36" * 64
        assert outer == b"\x5c" * 64

    def test_pads_are_xor_of_key(self):
        key = normalize_key(TEST_KEY)
        inner, outer = derive_pads(key)
        assert bytes(i ^ o for i, o in zip(inner, outer)) == b"\x6a" * 64
        assert bytes(k ^ 0x36 for k in key) == inner


class TestKnownAnswers:
    def test_hi_there_32_byte_key(self):
        tag = hmac_sha256(b"Hi There", b"\x0b" * 32)
        assert tag.hex() == HI_THERE_32_BYTE_KEY_TAG

    @pytest.mark.parametrize(("key", "message", "expected"), RFC_4231_VECTORS)
    def test_rfc_4231(self, key, message, expected):
        assert hmac_sha256_hex(message, key) == expected


class TestConstruction:
    def test_nested_hash(self):
        inner, outer = derive_pads(normalize_key(TEST_KEY))
        expected = sha256(outer + sha256(inner + b"payload"))
        assert hmac_sha256(b"payload", TEST_KEY) == expected

    def test_matches_stdlib_hmac(self):
        rng = random.Random(7)
        for _ in range(50):
            key = rng.randbytes(rng.randint(0, 150))
            msg = rng.randbytes(rng.randint(0, 300))
            assert hmac_sha256(msg, key) == hmac.new(key, msg, hashlib.sha256).digest()

    def test_tag_length(self):
        for key in (b"", b"k", b"k" * 64, b"k" * 65):
            assert len(hmac_sha256(b"data", key)) == 32

    def test_differs_from_plain_hash(self):
        assert hmac_sha256(b"data", b"") != sha256(b"data")

    def test_key_changes_tag(self):
        assert hmac_sha256(b"data", b"key-a") != hmac_sha256(b"data", b"key-b")

    def test_empty_key_and_message(self):
        assert hmac_sha256_hex(b"", b"") == (
            "b613679a0814d9ec772f95d778c35fc5ff1697c493715653c6c712144292c5ad"
        )

    def test_str_data_rejected(self):
        with pytest.raises(TypeError, match="data"):
            hmac_sha256("payload", TEST_KEY)
