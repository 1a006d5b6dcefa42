"""
Latency statistics and report formatting.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Tuple

import numpy as np

from .errors import DegenerateTimingError, InvalidIterationCountError
from .model_info import ModelInputSpec


@dataclass(frozen=True)
class BenchmarkReport:
    """Summary statistics over the timed iterations of one run."""

    count: int
    total_ms: float
    mean_ms: float
    median_ms: float
    min_ms: float
    max_ms: float
    std_dev_ms: float
    throughput_per_sec: float  # inferences per second


@dataclass(frozen=True)
class BenchmarkResult:
    """Container for a completed benchmark run."""

    model: str
    input_spec: ModelInputSpec
    output_name: str
    samples: Tuple[float, ...]  # milliseconds, call order
    report: BenchmarkReport
    metadata: Dict[str, Any] = field(default_factory=dict)


def compute_report(samples: Sequence[float]) -> BenchmarkReport:
    """Compute latency statistics.

    The median is the element at ``count // 2`` of the sorted samples (the
    upper median for even counts) and the standard deviation is the
    population estimator (divides by ``count``).

    Args:
        samples: Latencies in milliseconds, in call order

    Returns:
        BenchmarkReport for the samples

    Raises:
        InvalidIterationCountError: if ``samples`` is empty
        DegenerateTimingError: if the mean latency is zero
    """
    count = len(samples)
    if count < 1:
        raise InvalidIterationCountError("Cannot compute statistics without samples")

    times = np.asarray(samples, dtype=np.float64)

    total_ms = math.fsum(samples)

    ordered = np.sort(times, kind="stable")
    min_ms = float(ordered[0])
    max_ms = float(ordered[-1])
    median_ms = float(ordered[count // 2])

    # division can round one ulp outside [min, max] for equal samples
    mean_ms = min(max(total_ms / count, min_ms), max_ms)

    deviations = times - mean_ms
    std_dev_ms = math.sqrt(float(np.dot(deviations, deviations)) / count)

    if mean_ms <= 0.0:
        raise DegenerateTimingError(
            f"Mean latency is {mean_ms} ms; throughput is undefined"
        )
    throughput = 1000.0 / mean_ms

    return BenchmarkReport(
        count=count,
        total_ms=total_ms,
        mean_ms=mean_ms,
        median_ms=median_ms,
        min_ms=min_ms,
        max_ms=max_ms,
        std_dev_ms=std_dev_ms,
        throughput_per_sec=throughput,
    )


def format_report(result: BenchmarkResult) -> List[str]:
    """Render a result as the plain-text summary lines."""
    report = result.report
    return [
        "===== Inference Performance Results =====",
        f"Model: {result.model}",
        f"Iterations: {report.count}",
        f"Total time: {report.total_ms:.3f} ms",
        f"Average time: {report.mean_ms:.3f} ms",
        f"Median time: {report.median_ms:.3f} ms",
        f"Min time: {report.min_ms:.3f} ms",
        f"Max time: {report.max_ms:.3f} ms",
        f"Standard deviation: {report.std_dev_ms:.3f} ms",
        f"Throughput: {report.throughput_per_sec:.3f} inferences/second",
    ]


def print_report(result: BenchmarkResult) -> None:
    """Print formatted benchmark results."""
    print()
    for line in format_report(result):
        print(line)
