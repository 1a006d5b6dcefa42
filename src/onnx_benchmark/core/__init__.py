"""
Core benchmark infrastructure.
"""

from .benchmark_runner import BenchmarkConfig, BenchmarkRunner, RunnerState, run_benchmark
from .engine import InferenceEngine, InputDescriptor
from .errors import (
    BenchmarkError,
    DegenerateTimingError,
    InferenceExecutionError,
    InvalidIterationCountError,
    InvalidShapeError,
    ModelIntrospectionError,
    ModelLoadError,
)
from .inputs import create_generator, synthesize_input
from .metrics import BenchmarkReport, BenchmarkResult, compute_report, format_report
from .model_info import ElementType, ModelDescription, ModelInputSpec, probe_model

__all__ = [
    "BenchmarkConfig",
    "BenchmarkRunner",
    "RunnerState",
    "run_benchmark",
    "InferenceEngine",
    "InputDescriptor",
    "BenchmarkError",
    "DegenerateTimingError",
    "InferenceExecutionError",
    "InvalidIterationCountError",
    "InvalidShapeError",
    "ModelIntrospectionError",
    "ModelLoadError",
    "create_generator",
    "synthesize_input",
    "BenchmarkReport",
    "BenchmarkResult",
    "compute_report",
    "format_report",
    "ElementType",
    "ModelDescription",
    "ModelInputSpec",
    "probe_model",
]
