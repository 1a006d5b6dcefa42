"""
Benchmark runner driving warm-up and timed inference calls.
"""

import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional

import numpy as np

from .engine import InferenceEngine
from .errors import InferenceExecutionError, InvalidIterationCountError
from .inputs import create_generator, synthesize_input
from .metrics import BenchmarkReport, BenchmarkResult, compute_report
from .model_info import ModelDescription, probe_model

ProgressCallback = Callable[[int, int], None]


@dataclass(frozen=True)
class BenchmarkConfig:
    """Settings for one benchmark run.

    Args:
        iterations: Number of timed inference calls
        seed: Seed for input synthesis, or None for OS entropy
        progress_interval: Report progress after every this many calls
    """

    iterations: int = 10
    seed: Optional[int] = None
    progress_interval: int = 10

    def __post_init__(self):
        if self.iterations < 1:
            raise InvalidIterationCountError(
                f"Iteration count must be at least 1, got {self.iterations}"
            )
        if self.progress_interval < 1:
            raise ValueError(
                f"Progress interval must be at least 1, got {self.progress_interval}"
            )


class RunnerState(Enum):
    IDLE = "idle"
    WARMED_UP = "warmed_up"
    COMPLETED = "completed"
    FAILED = "failed"


class BenchmarkRunner:
    """Run one warm-up call followed by N timed calls against an engine.

    Calls are strictly sequential on the calling thread. A runner owns its
    input buffer, random generator and samples, so separate runners must be
    used for separate sessions.
    """

    WARMUP_RUNS = 1

    def __init__(
        self,
        engine: InferenceEngine,
        config: Optional[BenchmarkConfig] = None,
        model: Optional[str] = None,
        progress_callback: Optional[ProgressCallback] = None,
        clock: Callable[[], float] = time.perf_counter,
    ):
        """Initialize benchmark runner.

        Args:
            engine: Engine holding an already-loaded model
            config: Run settings, defaults to BenchmarkConfig()
            model: Model identifier used in the result
            progress_callback: Called with (completed, total) during timing
            clock: Monotonic clock returning seconds
        """
        self.engine = engine
        self.config = config if config is not None else BenchmarkConfig()
        self.model = model or engine.describe()
        self.progress_callback = progress_callback
        self._clock = clock

        self._state = RunnerState.IDLE
        self._description: Optional[ModelDescription] = None
        self._input: Optional[np.ndarray] = None
        self._feeds: Dict[str, np.ndarray] = {}
        self._output_names: List[str] = []
        self._samples: List[float] = []

    @property
    def state(self) -> RunnerState:
        return self._state

    @property
    def description(self) -> Optional[ModelDescription]:
        return self._description

    @property
    def input_tensor(self) -> Optional[np.ndarray]:
        return self._input

    @property
    def samples(self) -> List[float]:
        """Recorded latencies in milliseconds, in call order."""
        return list(self._samples)

    def prepare(self) -> ModelDescription:
        """Probe the model, synthesize the input and bind names.

        Idempotent; the input buffer is created once and reused.
        """
        if self._description is not None:
            return self._description

        description = probe_model(self.engine)
        rng = create_generator(self.config.seed)
        self._input = synthesize_input(description.input_spec, rng=rng)

        # bound once, reused unchanged by every call
        self._feeds = {description.input_spec.name: self._input}
        self._output_names = [description.output_name]
        self._description = description
        return description

    def warm_up(self) -> None:
        """Execute the single untimed warm-up call."""
        if self._state is not RunnerState.IDLE:
            raise RuntimeError(f"Cannot warm up a runner in state {self._state.value}")

        self.prepare()
        try:
            self.engine.run(self._feeds, self._output_names)
        except Exception as e:
            self._state = RunnerState.FAILED
            raise InferenceExecutionError("warm-up", 0, str(e)) from e

        self._state = RunnerState.WARMED_UP

    def measure(self) -> List[float]:
        """Execute the timed calls.

        Returns:
            Latencies in milliseconds, in call order
        """
        if self._state is not RunnerState.WARMED_UP:
            raise RuntimeError(
                f"Cannot measure a runner in state {self._state.value}; warm up first"
            )

        engine_run = self.engine.run
        feeds = self._feeds
        output_names = self._output_names
        clock = self._clock
        total = self.config.iterations
        interval = self.config.progress_interval

        samples: List[float] = []
        for i in range(1, total + 1):
            try:
                start = clock()
                outputs = engine_run(feeds, output_names)
                end = clock()
            except Exception as e:
                self._state = RunnerState.FAILED
                raise InferenceExecutionError("timed", i, str(e), samples) from e

            samples.append((end - start) * 1000)  # milliseconds
            # free outputs outside the timed region
            del outputs

            if self.progress_callback is not None and i % interval == 0:
                self.progress_callback(i, total)

        self._samples = samples
        self._state = RunnerState.COMPLETED
        return list(samples)

    def compute_report(self) -> BenchmarkReport:
        """Compute statistics over the completed run."""
        if self._state is not RunnerState.COMPLETED:
            raise RuntimeError("Benchmark has not completed")
        return compute_report(self._samples)

    def run(self) -> BenchmarkResult:
        """Warm up, measure and summarize.

        Returns:
            BenchmarkResult with samples and statistics
        """
        self.warm_up()
        self.measure()
        return self.get_result()

    def get_result(self) -> BenchmarkResult:
        """Package the completed run with its statistics."""
        report = self.compute_report()

        return BenchmarkResult(
            model=self.model,
            input_spec=self._description.input_spec,
            output_name=self._description.output_name,
            samples=tuple(self._samples),
            report=report,
            metadata={
                "warmup_runs": self.WARMUP_RUNS,
                "benchmark_runs": self.config.iterations,
                "seed": self.config.seed,
                "engine": self.engine.describe(),
                "input_elements": int(self._input.size),
            },
        )


def run_benchmark(
    engine: InferenceEngine,
    iterations: int = 10,
    seed: Optional[int] = None,
    model: Optional[str] = None,
    progress_callback: Optional[ProgressCallback] = None,
) -> BenchmarkResult:
    """Benchmark ``engine`` with a fresh runner.

    Args:
        engine: Engine holding an already-loaded model
        iterations: Number of timed calls
        seed: Seed for input synthesis
        model: Model identifier used in the result
        progress_callback: Called with (completed, total) during timing

    Returns:
        BenchmarkResult for the run
    """
    config = BenchmarkConfig(iterations=iterations, seed=seed)
    runner = BenchmarkRunner(
        engine, config, model=model, progress_callback=progress_callback
    )
    return runner.run()
