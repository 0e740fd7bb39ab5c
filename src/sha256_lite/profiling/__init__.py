"""Benchmark harness and reporting for sha256-lite."""

from sha256_lite.profiling.harness import (
    DEFAULT_SIZES,
    BenchmarkResult,
    SizeTiming,
    run_benchmark,
)
from sha256_lite.profiling.report import format_report

__all__ = [
    "DEFAULT_SIZES",
    "BenchmarkResult",
    "SizeTiming",
    "format_report",
    "run_benchmark",
]
