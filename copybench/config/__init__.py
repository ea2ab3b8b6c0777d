"""Benchmark configuration."""

from .models import (
    DEFAULT_BLOCK_SIZES,
    DEFAULT_INPUT_FILE,
    DEFAULT_OUTPUT_DIR,
    BenchmarkConfig,
    create_benchmark_config,
)


__all__ = [
    "BenchmarkConfig",
    "create_benchmark_config",
    "DEFAULT_BLOCK_SIZES",
    "DEFAULT_INPUT_FILE",
    "DEFAULT_OUTPUT_DIR",
]
