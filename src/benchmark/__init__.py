"""
Benchmarking module for traced search algorithms.

Measures trace generation time and comparison counts for KMP and Boyer-Moore
over growing text lengths and plots them against the worst-case bounds.
"""

from .benchmark import (
    BenchmarkConfig,
    BenchmarkResult,
    BenchmarkRunner,
    run_trace_benchmark,
)

__all__ = [
    "BenchmarkConfig",
    "BenchmarkResult",
    "BenchmarkRunner",
    "run_trace_benchmark",
]
