"""
ONNX Inference Benchmark

Latency and throughput measurement for single-input/single-output
inference calls against a loaded ONNX model.
"""

__version__ = "0.1.0"

from .core.benchmark_runner import BenchmarkConfig, BenchmarkRunner, run_benchmark
from .core.metrics import BenchmarkReport, BenchmarkResult, compute_report
from .core.model_info import ModelInputSpec, probe_model
from .engines.onnx_runtime import EngineOptions, OnnxRuntimeEngine

__all__ = [
    "BenchmarkConfig",
    "BenchmarkRunner",
    "run_benchmark",
    "BenchmarkReport",
    "BenchmarkResult",
    "compute_report",
    "ModelInputSpec",
    "probe_model",
    "EngineOptions",
    "OnnxRuntimeEngine",
]
