"""Benchmark harness comparing the copy strategies on one input file."""

from collections.abc import Iterable, Sequence
from pathlib import Path

import structlog
from rich.console import Console
from rich.table import Table

from copybench.config.models import DEFAULT_BLOCK_SIZES, BenchmarkConfig
from copybench.core.logging import get_struct_logger

from .enums import CopyStrategy
from .models import BenchmarkResult, StrategySpec, format_block_size
from .tasks import FileCopyTask
from .timer import TaskTimer


def default_strategy_specs(
    block_sizes: Iterable[int] = DEFAULT_BLOCK_SIZES,
) -> list[StrategySpec]:
    """Byte copy, one block copy per block size, then line copy.

    Entries are numbered from 1 and write to ``filecopy<N>.txt``.
    """
    specs = [
        StrategySpec(
            label="1.Copy a file byte-by-byte",
            strategy=CopyStrategy.BYTE,
            output_name="filecopy1.txt",
        )
    ]
    for block_size in block_sizes:
        number = len(specs) + 1
        size_label = format_block_size(block_size)
        specs.append(
            StrategySpec(
                label=f"{number}.Copy a file using a byte {size_label}",
                strategy=CopyStrategy.BLOCK,
                output_name=f"filecopy{number}.txt",
                block_size=block_size,
            )
        )
    number = len(specs) + 1
    specs.append(
        StrategySpec(
            label=f"{number}.Copy a file Line-by-Line",
            strategy=CopyStrategy.LINE,
            output_name=f"filecopy{number}.txt",
        )
    )
    return specs


class FileCopyBenchmark:
    """Runs every strategy in turn against the configured input file."""

    def __init__(
        self,
        timer: TaskTimer | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ):
        self.timer = timer or TaskTimer()
        self.logger = logger or get_struct_logger(__name__)

    def build_task(self, spec: StrategySpec, config: BenchmarkConfig) -> FileCopyTask:
        """Create the task for ``spec``, opening its input and output files."""
        return FileCopyTask(
            spec,
            config.input_file,
            config.output_dir / spec.output_name,
            search_paths=config.search_paths,
            encoding=config.encoding,
            line_terminator=config.line_terminator,
            trim_final_block=config.trim_final_block,
        )

    def run(
        self,
        config: BenchmarkConfig,
        specs: Sequence[StrategySpec] | None = None,
        print_results: bool = True,
    ) -> list[BenchmarkResult]:
        """Run each strategy sequentially and collect the results.

        A task's files are opened right before it is measured. The first
        CopyFailedError stops the run and propagates.
        """
        if specs is None:
            specs = default_strategy_specs(config.block_sizes)

        self.logger.info(
            "benchmark_started", input_file=str(config.input_file), tasks=len(specs)
        )
        results: list[BenchmarkResult] = []

        for spec in specs:
            with self.build_task(spec, config) as task:
                if print_results:
                    timing = self.timer.measure_and_print(task)
                else:
                    timing = self.timer.measure(task)
                result = self._to_result(spec, task, timing.elapsed)

            if not result.size_matches:
                self.logger.warning(
                    "output_size_mismatch",
                    task=spec.label,
                    input_size=result.input_size,
                    output_size=result.output_size,
                )
            results.append(result)

        self.logger.info("benchmark_finished", tasks=len(results))
        return results

    def _to_result(
        self, spec: StrategySpec, task: FileCopyTask, duration: float
    ) -> BenchmarkResult:
        assert task.input_path is not None and task.output_path is not None
        return BenchmarkResult(
            label=spec.label,
            strategy=spec.strategy.value,
            duration=duration,
            input_size=_file_size(task.input_path),
            output_size=_file_size(task.output_path),
            block_size=spec.block_size,
        )

    def print_summary(
        self, results: list[BenchmarkResult], console: Console | None = None
    ) -> None:
        """Print a table of all results."""
        if not results:
            return

        table = Table(title="Copy strategy benchmark")
        table.add_column("Task")
        table.add_column("Duration (s)", justify="right")
        table.add_column("Speed", justify="right")
        table.add_column("Output", justify="right")

        for result in results:
            size_note = "" if result.size_matches else " (size differs)"
            table.add_row(
                result.label,
                f"{result.duration:.6f}",
                result.speed_summary,
                f"{result.output_size} B{size_note}",
            )

        (console or self.timer.console).print(table)


def _file_size(path: Path) -> int:
    return path.stat().st_size


def create_benchmark_runner(
    timer: TaskTimer | None = None,
    logger: structlog.stdlib.BoundLogger | None = None,
) -> FileCopyBenchmark:
    """Factory function to create benchmark runner."""
    return FileCopyBenchmark(timer=timer, logger=logger)
