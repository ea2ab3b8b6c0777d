"""Benchmark CLI commands."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from copybench.cli.decorators import handle_errors
from copybench.config import BenchmarkConfig, create_benchmark_config
from copybench.core.file_operations import (
    BenchmarkResult,
    create_benchmark_runner,
    default_strategy_specs,
)
from copybench.core.file_operations.timer import TaskTimer


def run_benchmark(
    config: BenchmarkConfig, summary: bool = False
) -> list[BenchmarkResult]:
    """Run all default strategies for ``config`` and print their timings."""
    console = Console(highlight=False)
    benchmark = create_benchmark_runner(timer=TaskTimer(console=console))
    results = benchmark.run(config)
    if summary:
        benchmark.print_summary(results, console=console)
    return results


@handle_errors
def run(
    input_file: Annotated[
        Path | None,
        typer.Option("--input", "-i", help="File to copy with every strategy"),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option(
            "--output-dir", "-o", help="Directory receiving filecopy<N>.txt outputs"
        ),
    ] = None,
    block_sizes: Annotated[
        list[int] | None,
        typer.Option(
            "--block-size",
            "-b",
            help="Block size in bytes; repeat for several block-copy tasks",
        ),
    ] = None,
    search_paths: Annotated[
        list[Path] | None,
        typer.Option(
            "--search-path",
            help="Directory searched for a relative input file; repeatable",
        ),
    ] = None,
    trim_final_block: Annotated[
        bool,
        typer.Option(
            "--trim-final-block",
            help="Write only the bytes read on the final short block",
        ),
    ] = False,
    summary: Annotated[
        bool, typer.Option("--summary", help="Print a results table at the end")
    ] = False,
) -> None:
    """Copy the input file with each strategy and print elapsed times."""
    config = create_benchmark_config(
        input_file=input_file,
        output_dir=output_dir,
        block_sizes=block_sizes or None,
        search_paths=search_paths or None,
        trim_final_block=trim_final_block,
    )
    run_benchmark(config, summary=summary)


@handle_errors
def strategies(
    block_sizes: Annotated[
        list[int] | None,
        typer.Option("--block-size", "-b", help="Block size in bytes; repeatable"),
    ] = None,
) -> None:
    """List the tasks a benchmark run would execute."""
    config = create_benchmark_config(block_sizes=block_sizes or None)
    table = Table(title="Copy tasks")
    table.add_column("Task")
    table.add_column("Strategy")
    table.add_column("Output")
    table.add_column("Description")

    for spec in default_strategy_specs(config.block_sizes):
        table.add_row(
            spec.label,
            spec.strategy.value,
            str(config.output_dir / spec.output_name),
            spec.description,
        )

    Console().print(table)


def register_commands(app: typer.Typer) -> None:
    """Register benchmark commands with the main app."""
    app.command(name="run")(run)
    app.command(name="strategies")(strategies)
