"""
Capability interface between the harness and an inference runtime.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Mapping, NamedTuple, Optional, Sequence, Tuple

import numpy as np


class InputDescriptor(NamedTuple):
    """Raw metadata an engine reports for one model input.

    ``shape`` and ``element_type`` are None when the engine cannot describe
    the input as a tensor.
    """

    name: str
    shape: Optional[Tuple[int, ...]]
    element_type: Optional[str]


class InferenceEngine(ABC):
    """Minimal surface of a loaded model the harness is allowed to touch."""

    @abstractmethod
    def input_count(self) -> int:
        """Number of model inputs."""

    @abstractmethod
    def output_count(self) -> int:
        """Number of model outputs."""

    @abstractmethod
    def input_descriptor(self, index: int) -> InputDescriptor:
        """Describe input ``index``.

        Raises:
            IndexError: if ``index`` is out of range
        """

    @abstractmethod
    def output_name(self, index: int) -> str:
        """Name of output ``index``.

        Raises:
            IndexError: if ``index`` is out of range
        """

    @abstractmethod
    def run(
        self, feeds: Mapping[str, np.ndarray], output_names: Sequence[str]
    ) -> List[Any]:
        """Execute one inference call.

        Args:
            feeds: Mapping from input name to input tensor
            output_names: Outputs to fetch, in order

        Returns:
            Output tensors in the order of ``output_names``
        """

    def describe(self) -> str:
        """Short human-readable engine description."""
        return type(self).__name__
