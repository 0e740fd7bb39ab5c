"""Throughput harness for the pure-Python SHA-256 and HMAC paths.

Hashes seeded random messages of several sizes with sha256_lite and
with the C implementation behind hashlib, checking every digest against
hashlib along the way. The point is twofold: a cross-implementation
correctness check on realistic inputs, and honest numbers on how far a
pure-Python compression loop sits behind OpenSSL.

Optionally runs the pure-Python side under cProfile so the hotspots
(the 64-round loop, the schedule recurrence) show up by name.
"""
from __future__ import annotations

import cProfile
import hashlib
import hmac
import io
import logging
import pstats
import random
import time
from dataclasses import dataclass, field

from sha256_lite.crypto.mac import hmac_sha256
from sha256_lite.digest.sha256 import sha256

log = logging.getLogger(__name__)

DEFAULT_SIZES: tuple[int, ...] = (0, 64, 1024, 16384)


@dataclass(slots=True)
class SizeTiming:
    """Timings for one message size, in milliseconds over all iterations."""
    size: int
    iterations: int
    pure_hash_ms: float
    stdlib_hash_ms: float
    pure_hmac_ms: float
    stdlib_hmac_ms: float

    @property
    def pure_bytes_per_sec(self) -> float:
        if self.pure_hash_ms <= 0:
            return 0.0
        return self.size * self.iterations / (self.pure_hash_ms / 1000)

    @property
    def slowdown(self) -> float:
        """How many times slower the pure digest is than hashlib."""
        if self.stdlib_hash_ms <= 0:
            return float("inf")
        return self.pure_hash_ms / self.stdlib_hash_ms


@dataclass(slots=True)
class BenchmarkResult:
    """Outcome of a full benchmark run."""
    timings: list[SizeTiming] = field(default_factory=list)
    messages_checked: int = 0
    mismatches: int = 0
    total_time_ms: float = 0.0
    cprofile_stats: str | None = None

    @property
    def all_match(self) -> bool:
        return self.mismatches == 0


def _time_ms(fn, payloads: list[bytes]) -> tuple[float, list[bytes]]:
    out = []
    t0 = time.perf_counter()
    for payload in payloads:
        out.append(fn(payload))
    return (time.perf_counter() - t0) * 1000, out


def run_benchmark(
    sizes: tuple[int, ...] = DEFAULT_SIZES,
    iterations: int = 20,
    seed: int = 42,
    profile: bool = False,
) -> BenchmarkResult:
    """Benchmark and cross-check both implementations.

    For each size, generates `iterations` random messages from a seeded
    RNG (same inputs every run), times sha256_lite against hashlib and
    HMAC against the stdlib hmac module, and counts any digest that
    differs. A mismatch is logged at ERROR with the message size.

    Raises ValueError for a non-positive iteration count or a negative size.
    """
    if iterations <= 0:
        raise ValueError(f"iterations must be positive, got {iterations}")
    if any(size < 0 for size in sizes):
        raise ValueError(f"sizes must be non-negative, got {sizes}")

    rng = random.Random(seed)
    key = rng.randbytes(32)
    result = BenchmarkResult()

    def _pure_hmac(payload: bytes) -> bytes:
        return hmac_sha256(payload, key)

    def _stdlib_hmac(payload: bytes) -> bytes:
        return hmac.new(key, payload, hashlib.sha256).digest()

    def _stdlib_hash(payload: bytes) -> bytes:
        return hashlib.sha256(payload).digest()

    def _run():
        for size in sizes:
            payloads = [rng.randbytes(size) for _ in range(iterations)]
            pure_ms, pure_out = _time_ms(sha256, payloads)
            std_ms, std_out = _time_ms(_stdlib_hash, payloads)
            pure_mac_ms, pure_macs = _time_ms(_pure_hmac, payloads)
            std_mac_ms, std_macs = _time_ms(_stdlib_hmac, payloads)

            bad = sum(1 for x, y in zip(pure_out, std_out) if x != y)
            bad += sum(1 for x, y in zip(pure_macs, std_macs) if x != y)
            if bad:
                log.error("%d digest mismatch(es) at message size %d", bad, size)
            result.mismatches += bad
            result.messages_checked += 2 * len(payloads)
            result.timings.append(SizeTiming(
                size=size,
                iterations=iterations,
                pure_hash_ms=pure_ms,
                stdlib_hash_ms=std_ms,
                pure_hmac_ms=pure_mac_ms,
                stdlib_hmac_ms=std_mac_ms,
            ))
            log.debug("size=%d pure=%.2fms stdlib=%.2fms", size, pure_ms, std_ms)

    t_start = time.perf_counter()
    if profile:
        pr = cProfile.Profile()
        pr.enable()
        _run()
        pr.disable()
        s = io.StringIO()
        ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
        ps.print_stats(20)
        result.cprofile_stats = s.getvalue()
    else:
        _run()
    result.total_time_ms = (time.perf_counter() - t_start) * 1000
    return result
