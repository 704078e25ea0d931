"""Developer tools for the aide library."""

from .benchmarks import (
    BenchmarkResult,
    BenchmarkSuite,
    ClassifierBenchmark,
)

__all__ = [
    "BenchmarkResult",
    "BenchmarkSuite",
    "ClassifierBenchmark",
]
