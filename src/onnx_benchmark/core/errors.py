"""
Exception types raised by the benchmark harness.
"""

from typing import Optional, Sequence, Tuple


class BenchmarkError(Exception):
    """Base class for all benchmark failures."""


class ModelLoadError(BenchmarkError):
    """The inference engine could not load the model."""


class ModelIntrospectionError(BenchmarkError):
    """The model's input/output metadata is missing or unusable."""


class InvalidShapeError(BenchmarkError, ValueError):
    """The synthesized input would contain no elements."""


class InvalidIterationCountError(BenchmarkError, ValueError):
    """The requested iteration count is not a positive integer."""


class DegenerateTimingError(BenchmarkError):
    """Statistics are undefined for the collected samples."""


class InferenceExecutionError(BenchmarkError):
    """The engine failed while executing an inference call.

    Attributes:
        stage: "warm-up" or "timed"
        iteration: 1-based index of the failing timed call, 0 for warm-up
        cause: message of the underlying engine error
        samples: latencies (ms) recorded before the failure, in call order
    """

    def __init__(
        self,
        stage: str,
        iteration: int,
        cause: str,
        samples: Optional[Sequence[float]] = None,
    ):
        self.stage = stage
        self.iteration = iteration
        self.cause = cause
        self.samples: Tuple[float, ...] = tuple(samples or ())

        if stage == "warm-up":
            location = "warm-up run"
        else:
            location = f"iteration {iteration}"
        super().__init__(f"Inference failed during {location}: {cause}")
