"""
ONNX Runtime implementation of the inference engine interface.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Mapping, Sequence, Tuple, Union

import numpy as np
import onnxruntime as ort

from ..core.engine import InferenceEngine, InputDescriptor
from ..core.errors import ModelLoadError

OPTIMIZATION_LEVELS = {
    "disable": ort.GraphOptimizationLevel.ORT_DISABLE_ALL,
    "basic": ort.GraphOptimizationLevel.ORT_ENABLE_BASIC,
    "extended": ort.GraphOptimizationLevel.ORT_ENABLE_EXTENDED,
    "all": ort.GraphOptimizationLevel.ORT_ENABLE_ALL,
}


@dataclass(frozen=True)
class EngineOptions:
    """ONNX Runtime session settings.

    Args:
        intra_op_num_threads: Threads used within one operator
        graph_optimization_level: One of disable, basic, extended, all
        providers: Execution providers in priority order
        log_severity_level: 0 verbose ... 4 fatal
    """

    intra_op_num_threads: int = 1
    graph_optimization_level: str = "all"
    providers: Tuple[str, ...] = ("CPUExecutionProvider",)
    log_severity_level: int = 2

    def session_options(self) -> ort.SessionOptions:
        if self.graph_optimization_level not in OPTIMIZATION_LEVELS:
            raise ValueError(
                f"Unknown graph optimization level: {self.graph_optimization_level}"
            )

        options = ort.SessionOptions()
        options.intra_op_num_threads = self.intra_op_num_threads
        options.graph_optimization_level = OPTIMIZATION_LEVELS[
            self.graph_optimization_level
        ]
        options.log_severity_level = self.log_severity_level
        options.logid = "ONNXRuntimeBenchmark"
        return options


def _convert_shape(shape: Any) -> Tuple[int, ...]:
    # symbolic ("batch") and unknown (None) dimensions are dynamic
    return tuple(dim if isinstance(dim, int) else -1 for dim in shape)


class OnnxRuntimeEngine(InferenceEngine):
    """Adapter over an ``onnxruntime.InferenceSession``."""

    def __init__(self, session: ort.InferenceSession, model_path: str = ""):
        self.session = session
        self.model_path = model_path
        self._inputs = session.get_inputs()
        self._outputs = session.get_outputs()

    @classmethod
    def from_path(
        cls, model_path: Union[str, Path], options: EngineOptions = EngineOptions()
    ) -> "OnnxRuntimeEngine":
        """Load a model file into a new session.

        Raises:
            ModelLoadError: if ONNX Runtime cannot load the model
        """
        model_path = str(model_path)
        session_options = options.session_options()
        try:
            session = ort.InferenceSession(
                model_path,
                sess_options=session_options,
                providers=list(options.providers),
            )
        except Exception as e:
            raise ModelLoadError(f"Could not load model {model_path}: {e}") from e

        return cls(session, model_path)

    def input_count(self) -> int:
        return len(self._inputs)

    def output_count(self) -> int:
        return len(self._outputs)

    def input_descriptor(self, index: int) -> InputDescriptor:
        if not 0 <= index < len(self._inputs):
            raise IndexError(f"Input index {index} out of range")

        node = self._inputs[index]
        if not node.type.startswith("tensor(") or node.shape is None:
            return InputDescriptor(name=node.name, shape=None, element_type=None)

        return InputDescriptor(
            name=node.name,
            shape=_convert_shape(node.shape),
            element_type=node.type,
        )

    def output_name(self, index: int) -> str:
        if not 0 <= index < len(self._outputs):
            raise IndexError(f"Output index {index} out of range")
        return self._outputs[index].name

    def run(
        self, feeds: Mapping[str, np.ndarray], output_names: Sequence[str]
    ) -> List[Any]:
        return self.session.run(output_names, feeds)

    def describe(self) -> str:
        providers = ", ".join(self.session.get_providers())
        return f"onnxruntime {ort.__version__} ({providers})"
