"""
Model introspection utilities for inference benchmarking.
"""

import platform
from dataclasses import dataclass
from enum import Enum
from functools import reduce
from typing import Any, Dict, Iterator, List, Tuple

import numpy as np
import onnxruntime

from .engine import InferenceEngine, InputDescriptor
from .errors import ModelIntrospectionError


class ElementType(Enum):
    """ONNX tensor element types (TensorProto numbering)."""

    FLOAT = 1
    UINT8 = 2
    INT8 = 3
    UINT16 = 4
    INT16 = 5
    INT32 = 6
    INT64 = 7
    STRING = 8
    BOOL = 9
    FLOAT16 = 10
    DOUBLE = 11
    UINT32 = 12
    UINT64 = 13
    COMPLEX64 = 14
    COMPLEX128 = 15
    BFLOAT16 = 16

    @classmethod
    def from_type_string(cls, type_string: str) -> "ElementType":
        """Parse an ONNX Runtime type string such as ``tensor(float)``.

        Raises:
            ValueError: if the string does not name a tensor element type
        """
        if not type_string.startswith("tensor(") or not type_string.endswith(")"):
            raise ValueError(f"Not a tensor type: {type_string!r}")

        element = type_string[len("tensor(") : -1].upper()
        try:
            return cls[element]
        except KeyError:
            raise ValueError(f"Unknown tensor element type: {type_string!r}") from None

    @property
    def type_string(self) -> str:
        return f"tensor({self.name.lower()})"


@dataclass(frozen=True)
class ModelInputSpec:
    """Name, shape and element type of the model input being fed.

    A dimension ``<= 0`` marks a dynamic axis.
    """

    name: str
    shape: Tuple[int, ...]
    element_type: ElementType

    @property
    def has_dynamic_axes(self) -> bool:
        return any(dim <= 0 for dim in self.shape)

    @property
    def resolved_shape(self) -> Tuple[int, ...]:
        """Shape with every dynamic axis resolved to 1."""
        return tuple(dim if dim > 0 else 1 for dim in self.shape)

    @property
    def element_count(self) -> int:
        return reduce(lambda acc, dim: acc * dim, self.resolved_shape, 1)


@dataclass(frozen=True)
class ModelDescription:
    """Result of probing a model: the first input and the first output name."""

    input_spec: ModelInputSpec
    output_name: str

    def __iter__(self) -> Iterator[Any]:
        return iter((self.input_spec, self.output_name))


def probe_model(engine: InferenceEngine) -> ModelDescription:
    """Read the contract of input 0 and the name of output 0.

    Args:
        engine: Engine holding an already-loaded model

    Returns:
        ModelDescription for the first input/output pair

    Raises:
        ModelIntrospectionError: if the model has no inputs or outputs, or the
            first input has no tensor shape/type metadata
    """
    if engine.input_count() < 1:
        raise ModelIntrospectionError("Model reports no inputs")
    if engine.output_count() < 1:
        raise ModelIntrospectionError("Model reports no outputs")

    descriptor = engine.input_descriptor(0)
    if descriptor.shape is None:
        raise ModelIntrospectionError(
            f"Shape metadata unavailable for input {descriptor.name!r}"
        )
    if descriptor.element_type is None:
        raise ModelIntrospectionError(
            f"Element type unavailable for input {descriptor.name!r}"
        )

    try:
        element_type = ElementType.from_type_string(descriptor.element_type)
    except ValueError as e:
        raise ModelIntrospectionError(
            f"Unsupported type for input {descriptor.name!r}: {e}"
        ) from e

    input_spec = ModelInputSpec(
        name=descriptor.name,
        shape=tuple(int(dim) for dim in descriptor.shape),
        element_type=element_type,
    )
    return ModelDescription(input_spec=input_spec, output_name=engine.output_name(0))


def describe_inputs(engine: InferenceEngine) -> List[InputDescriptor]:
    """Enumerate the descriptors of every model input."""
    return [engine.input_descriptor(i) for i in range(engine.input_count())]


def print_model_info(engine: InferenceEngine) -> None:
    """Print input node information.

    Args:
        engine: Engine holding an already-loaded model
    """
    descriptors = describe_inputs(engine)
    print(f"Number of inputs: {len(descriptors)}")

    for i, descriptor in enumerate(descriptors):
        print(f"Input {i} name: {descriptor.name}")
        if descriptor.shape is None:
            print(f"Input {i} dimensions: unknown")
        else:
            print(f"Input {i} dimensions: {' '.join(str(d) for d in descriptor.shape)}")
        print(f"Input {i} type: {descriptor.element_type or 'unknown'}")


def get_system_info() -> Dict[str, str]:
    """Get system and runtime information."""
    return {
        "platform": platform.platform(),
        "python_version": platform.python_version(),
        "numpy_version": np.__version__,
        "onnxruntime_version": onnxruntime.__version__,
        "onnxruntime_device": onnxruntime.get_device(),
        "providers": ", ".join(onnxruntime.get_available_providers()),
    }
