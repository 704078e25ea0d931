"""Performance benchmarking for string inspection.

This module times the classifier and search functions over generated inputs
so that throughput can be tracked across releases and regressions caught
before they ship.
"""

import gc
import statistics
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

import psutil

from batman_aide.shared.logging import get_logger
from batman_aide.text import strings

Operation = Callable[[str], Any]

# Relative change in mean time that counts as an improvement or regression
CHANGE_THRESHOLD = 0.05

DEFAULT_OPERATIONS: Dict[str, Operation] = {
    "is_blank": strings.is_blank,
    "is_alpha": strings.is_alpha,
    "is_alphanumeric": strings.is_alphanumeric,
    "is_numeric": strings.is_numeric,
    "is_mixed_case": strings.is_mixed_case,
    "is_whitespace": strings.is_whitespace,
    "is_ascii_printable": strings.is_ascii_printable,
    "index_of": lambda text: strings.index_of(text, "needle"),
}


@dataclass
class BenchmarkResult:
    """Result of a single benchmark run."""

    operation: str
    test_case: str
    processing_time_ms: float
    memory_used_mb: float
    characters_processed: int
    success: bool
    error_message: Optional[str] = None

    @property
    def characters_per_second(self) -> float:
        """Calculate characters processed per second."""
        if self.processing_time_ms <= 0:
            return 0.0
        return (self.characters_processed * 1000.0) / self.processing_time_ms


@dataclass
class BenchmarkSuite:
    """Collection of benchmark results with statistical analysis."""

    results: List[BenchmarkResult] = field(default_factory=list)
    suite_name: str = "Classifier Benchmark"
    timestamp: float = field(default_factory=time.time)

    def add_result(self, result: BenchmarkResult) -> None:
        self.results.append(result)

    def get_results_by_operation(self, operation: str) -> List[BenchmarkResult]:
        return [r for r in self.results if r.operation == operation]

    def get_results_by_test_case(self, test_case: str) -> List[BenchmarkResult]:
        return [r for r in self.results if r.test_case == test_case]

    def get_statistics(self, operation: str, metric: str) -> Dict[str, float]:
        """Get statistical analysis of ``metric`` for one operation.

        Args:
            operation: Operation name
            metric: A ``BenchmarkResult`` attribute or property name

        Returns:
            min, max, mean, median, stdev and count, or an empty dict when the
            operation has no results
        """
        values = [
            float(getattr(r, metric)) for r in self.get_results_by_operation(operation)
        ]
        if not values:
            return {}

        return {
            "min": min(values),
            "max": max(values),
            "mean": statistics.mean(values),
            "median": statistics.median(values),
            "stdev": statistics.stdev(values) if len(values) > 1 else 0.0,
            "count": len(values),
        }

    def generate_report(self) -> Dict[str, Any]:
        """Generate a summary and per-test-case report."""
        operations = sorted({r.operation for r in self.results})
        test_cases = sorted({r.test_case for r in self.results})

        report: Dict[str, Any] = {
            "suite_name": self.suite_name,
            "timestamp": self.timestamp,
            "total_results": len(self.results),
            "operations": operations,
            "test_cases": test_cases,
            "summary": {},
            "detailed_results": {},
        }

        for operation in operations:
            op_results = self.get_results_by_operation(operation)
            successful = [r for r in op_results if r.success]
            report["summary"][operation] = {
                "total_runs": len(op_results),
                "successful_runs": len(successful),
                "success_rate": len(successful) / len(op_results),
                "performance": self.get_statistics(operation, "characters_per_second"),
                "memory": self.get_statistics(operation, "memory_used_mb"),
            }

        for test_case in test_cases:
            report["detailed_results"][test_case] = {
                r.operation: {
                    "processing_time_ms": r.processing_time_ms,
                    "memory_used_mb": r.memory_used_mb,
                    "characters_per_second": r.characters_per_second,
                    "success": r.success,
                    "error": r.error_message,
                }
                for r in self.get_results_by_test_case(test_case)
            }

        return report


class ClassifierBenchmark:
    """Throughput benchmark for the string inspection functions."""

    def __init__(
        self,
        operations: Optional[Dict[str, Operation]] = None,
        test_cases: Optional[Dict[str, str]] = None,
        correlation_id: Optional[str] = None,
        warmup_runs: int = 3,
        benchmark_runs: int = 10,
        iterations: int = 100,
    ) -> None:
        """Initialize benchmark.

        Args:
            operations: Functions to time, keyed by name
            test_cases: Inputs to time them on, keyed by name
            correlation_id: Optional correlation ID for tracking
            warmup_runs: Number of untimed runs before benchmarking
            benchmark_runs: Number of timed runs to average
            iterations: Calls per run
        """
        if warmup_runs < 0:
            raise ValueError("warmup_runs must be >= 0")
        if benchmark_runs <= 0:
            raise ValueError("benchmark_runs must be > 0")
        if iterations <= 0:
            raise ValueError("iterations must be > 0")

        self.operations = dict(operations or DEFAULT_OPERATIONS)
        self.test_cases = dict(test_cases or self._create_test_cases())
        self.correlation_id = correlation_id
        self.warmup_runs = warmup_runs
        self.benchmark_runs = benchmark_runs
        self.iterations = iterations
        self.logger = get_logger(__name__, correlation_id, "benchmark")

    def _create_test_cases(self) -> Dict[str, str]:
        return {
            "ascii_letters": "abcdefghijklmnopqrstuvwxyz" * 40,
            "ascii_mixed_case": "The Quick Brown Fox Jumps Over The Lazy Dog " * 25,
            "unicode_letters": "Δελτα中文ж" * 125,
            "unicode_digits": "0123456789१२३٠١" * 70,
            "whitespace": " \t\n\r\u2003\u3000" * 170,
            "needle_at_end": "x" * 1000 + "needle",
        }

    def _measure_memory_usage(self) -> float:
        """Get current resident memory usage in MB."""
        process = psutil.Process()
        return process.memory_info().rss / 1024 / 1024

    def _run_once(self, operation: str, test_case: str, text: str) -> BenchmarkResult:
        func = self.operations[operation]

        gc.collect()
        memory_before = self._measure_memory_usage()
        start_time = time.perf_counter()

        try:
            for _ in range(self.iterations):
                func(text)
            success = True
            error_message = None
        except Exception as e:
            success = False
            error_message = str(e)

        processing_time = (time.perf_counter() - start_time) * 1000
        memory_used = max(0.0, self._measure_memory_usage() - memory_before)

        return BenchmarkResult(
            operation=operation,
            test_case=test_case,
            processing_time_ms=processing_time,
            memory_used_mb=memory_used,
            characters_processed=len(text) * self.iterations,
            success=success,
            error_message=error_message,
        )

    def run_benchmark(self) -> BenchmarkSuite:
        """Run every operation over every test case.

        Returns:
            BenchmarkSuite holding one averaged result per operation and
            test case
        """
        suite = BenchmarkSuite()

        self.logger.info(
            "Starting benchmark suite",
            extra={
                "test_cases": len(self.test_cases),
                "operations": list(self.operations),
                "warmup_runs": self.warmup_runs,
                "benchmark_runs": self.benchmark_runs,
            },
        )

        for test_case, text in self.test_cases.items():
            self.logger.debug(f"Benchmarking test case: {test_case}")

            for operation in self.operations:
                for _ in range(self.warmup_runs):
                    self._run_once(operation, test_case, text)

                runs = [
                    self._run_once(operation, test_case, text)
                    for _ in range(self.benchmark_runs)
                ]
                successful = [r for r in runs if r.success]

                if successful:
                    suite.add_result(BenchmarkResult(
                        operation=operation,
                        test_case=test_case,
                        processing_time_ms=statistics.mean(
                            r.processing_time_ms for r in successful
                        ),
                        memory_used_mb=statistics.mean(
                            r.memory_used_mb for r in successful
                        ),
                        characters_processed=successful[0].characters_processed,
                        success=True,
                    ))
                else:
                    self.logger.warning(
                        f"All runs failed for {operation} on {test_case}",
                        extra={"error": runs[0].error_message},
                    )
                    suite.add_result(BenchmarkResult(
                        operation=operation,
                        test_case=test_case,
                        processing_time_ms=0.0,
                        memory_used_mb=0.0,
                        characters_processed=runs[0].characters_processed,
                        success=False,
                        error_message=runs[0].error_message,
                    ))

        self.logger.info(
            "Benchmark suite completed",
            extra={"total_results": len(suite.results)},
        )
        return suite

    def compare_performance(
        self,
        baseline_suite: BenchmarkSuite,
        current_suite: BenchmarkSuite,
    ) -> Dict[str, Any]:
        """Compare mean processing times between two suites.

        Changes beyond ``CHANGE_THRESHOLD`` in either direction are reported
        as improvements or regressions, keyed ``"<operation>_<test_case>"``.
        """
        comparison: Dict[str, Any] = {
            "baseline_timestamp": baseline_suite.timestamp,
            "current_timestamp": current_suite.timestamp,
            "improvements": {},
            "regressions": {},
            "summary": {},
        }

        for baseline in baseline_suite.results:
            current = next(
                (
                    r for r in current_suite.results
                    if r.operation == baseline.operation
                    and r.test_case == baseline.test_case
                ),
                None,
            )
            if current is None or not (baseline.success and current.success):
                continue
            if baseline.processing_time_ms <= 0:
                continue

            time_change = (
                (current.processing_time_ms - baseline.processing_time_ms)
                / baseline.processing_time_ms
            )
            entry = {
                "baseline_time_ms": baseline.processing_time_ms,
                "current_time_ms": current.processing_time_ms,
                "change_percent": time_change * 100,
            }
            key = f"{baseline.operation}_{baseline.test_case}"

            if time_change < -CHANGE_THRESHOLD:
                comparison["improvements"][key] = entry
            elif time_change > CHANGE_THRESHOLD:
                comparison["regressions"][key] = entry

        comparison["summary"] = {
            "total_improvements": len(comparison["improvements"]),
            "total_regressions": len(comparison["regressions"]),
            "has_regressions": bool(comparison["regressions"]),
        }
        return comparison
