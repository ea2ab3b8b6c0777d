"""File copy strategies and the benchmark harness that times them."""

from .benchmarks import (
    FileCopyBenchmark,
    create_benchmark_runner,
    default_strategy_specs,
)
from .enums import CopyStrategy
from .models import BenchmarkResult, StrategySpec
from .protocols import CopyTaskProtocol
from .strategies import copy_blocks, copy_bytes, copy_lines
from .tasks import FileCopyTask
from .timer import TaskTimer, TaskTiming


__all__ = [
    "BenchmarkResult",
    "copy_blocks",
    "copy_bytes",
    "copy_lines",
    "CopyStrategy",
    "CopyTaskProtocol",
    "create_benchmark_runner",
    "default_strategy_specs",
    "FileCopyBenchmark",
    "FileCopyTask",
    "StrategySpec",
    "TaskTimer",
    "TaskTiming",
]
