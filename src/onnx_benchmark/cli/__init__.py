"""
Command-line interface for the ONNX inference benchmark.
"""

from pathlib import Path
from typing import List, Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.benchmark_runner import BenchmarkConfig, BenchmarkRunner
from ..core.errors import BenchmarkError
from ..core.metrics import print_report
from ..core.model_info import get_system_info, print_model_info
from ..engines.onnx_runtime import OPTIMIZATION_LEVELS, EngineOptions, OnnxRuntimeEngine

app = typer.Typer(
    help="ONNX Inference Benchmark - latency and throughput of a single model input"
)
console = Console()
err_console = Console(stderr=True)


@app.command(context_settings={"ignore_unknown_options": True})
def benchmark(
    model_path: Path = typer.Argument(..., help="Path to the ONNX model"),
    iterations: int = typer.Argument(10, help="Number of timed iterations"),
    seed: Optional[int] = typer.Option(
        None, "--seed", "-s", help="Seed for random input synthesis"
    ),
    threads: int = typer.Option(1, "--threads", "-t", help="Intra-op thread count"),
    opt_level: str = typer.Option(
        "all", "--opt-level", help="Graph optimization (disable, basic, extended, all)"
    ),
    providers: List[str] = typer.Option(
        ["CPUExecutionProvider"], "--provider", "-p", help="Execution providers"
    ),
    show_inputs: bool = typer.Option(
        True, "--show-inputs/--no-show-inputs", help="Print model input information"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Measure inference latency of MODEL_PATH over ITERATIONS runs."""
    if opt_level not in OPTIMIZATION_LEVELS:
        raise typer.BadParameter(
            f"must be one of {', '.join(OPTIMIZATION_LEVELS)}",
            param_hint="--opt-level",
        )

    try:
        config = BenchmarkConfig(iterations=iterations, seed=seed)
        options = EngineOptions(
            intra_op_num_threads=threads,
            graph_optimization_level=opt_level,
            providers=tuple(providers),
        )

        if verbose:
            _print_system_info()

        print(f"Loading ONNX model: {model_path}")
        engine = OnnxRuntimeEngine.from_path(model_path, options)

        if show_inputs:
            print_model_info(engine)

        runner = BenchmarkRunner(
            engine,
            config,
            model=str(model_path),
            progress_callback=_print_progress,
        )
        runner.prepare()
        print(f"Generating random input data of size {runner.input_tensor.size}")
        if verbose:
            rprint(f"[blue]Engine: {engine.describe()}[/blue]")

        runner.warm_up()
        print(f"Running {iterations} iterations...")
        runner.measure()
        result = runner.get_result()

    except BenchmarkError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]", highlight=False)
        raise typer.Exit(code=1)
    except Exception as e:
        err_console.print(f"[red]Unexpected error: {escape(str(e))}[/red]", highlight=False)
        raise typer.Exit(code=1)

    print_report(result)


def _print_progress(completed: int, total: int) -> None:
    print(f"Completed {completed} iterations")


def _print_system_info() -> None:
    """Print a table of platform and runtime versions."""
    table = Table(title="System Information")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")

    for key, value in get_system_info().items():
        table.add_row(key, value)

    console.print(table)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
