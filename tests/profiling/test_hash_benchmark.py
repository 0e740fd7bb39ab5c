"""Throughput measurements for the pure-Python digest.

These print real numbers for the current machine. The assertions are
deliberately loose: they catch an accidental quadratic, not a slow CPU.
"""
from __future__ import annotations

import time

import pytest

from sha256_lite.crypto.verifier import TagVerifier
from sha256_lite.digest.sha256 import sha256


@pytest.mark.benchmark
class TestDigestThroughput:
    def test_hash_256_kib(self):
        data = bytes(range(256)) * 1024

        start = time.perf_counter()
        digest = sha256(data)
        elapsed = time.perf_counter() - start

        print(f"\n  sha256: {len(data):,} bytes in {elapsed:.3f}s")
        print(f"  Throughput: {len(data) / elapsed:,.0f} bytes/sec")

        assert len(digest) == 32
        assert elapsed < 30.0, f"Too slow: {elapsed:.1f}s for 256 KiB"

    def test_linear_in_input_size(self):
        """Doubling the input should roughly double the time, not square it."""
        small = bytes(32 * 1024)
        large = bytes(128 * 1024)

        t0 = time.perf_counter()
        sha256(small)
        t_small = time.perf_counter() - t0

        t0 = time.perf_counter()
        sha256(large)
        t_large = time.perf_counter() - t0

        print(f"\n  32 KiB: {t_small:.3f}s, 128 KiB: {t_large:.3f}s")
        assert t_large < t_small * 12


@pytest.mark.benchmark
class TestSignThroughput:
    def test_sign_small_messages(self):
        tv = TagVerifier(b"benchmark-key-32-bytes-exactly!!")
        messages = [f"message-{i}".encode() for i in range(2000)]

        start = time.perf_counter()
        for m in messages:
            tv.sign(m)
        elapsed = time.perf_counter() - start

        print(f"\n  HMAC-SHA256: {len(messages):,} tags in {elapsed:.2f}s")
        print(f"  Throughput: {len(messages) / elapsed:,.0f} tags/sec")
        assert elapsed < 60.0
