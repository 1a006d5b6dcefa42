"""
Inference engine adapters.
"""

from .onnx_runtime import OPTIMIZATION_LEVELS, EngineOptions, OnnxRuntimeEngine

__all__ = [
    "EngineOptions",
    "OnnxRuntimeEngine",
    "OPTIMIZATION_LEVELS",
]
