"""Report generation for benchmark results."""
from __future__ import annotations

from sha256_lite.profiling.harness import BenchmarkResult


def format_report(result: BenchmarkResult, label: str = "SHA-256") -> str:
    """Format a BenchmarkResult as a readable table."""
    lines = [
        f"=== {label} ===",
        f"{'Size (B)':>10} {'Pure (ms)':>12} {'hashlib (ms)':>13} "
        f"{'Slowdown':>9} {'HMAC (ms)':>11} {'hmac (ms)':>11} {'Pure B/s':>12}",
        "-" * 84,
    ]
    for t in result.timings:
        lines.append(
            f"{t.size:>10,} {t.pure_hash_ms:>12.2f} {t.stdlib_hash_ms:>13.3f} "
            f"{t.slowdown:>8.0f}x {t.pure_hmac_ms:>11.2f} "
            f"{t.stdlib_hmac_ms:>11.3f} {t.pure_bytes_per_sec:>12,.0f}"
        )
    lines += [
        "",
        f"Digests checked:   {result.messages_checked:,}",
        f"Mismatches:        {result.mismatches:,}",
        f"Total time:        {result.total_time_ms:.1f} ms",
    ]
    return "\n".join(lines)
