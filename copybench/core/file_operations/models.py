"""Models for copy tasks and benchmark results."""

from dataclasses import dataclass

from copybench.core.errors import ConfigError

from .enums import CopyStrategy


def format_block_size(block_size: int) -> str:
    """Human-readable block size, e.g. ``4KB`` or ``1500B``."""
    if block_size >= 1024 and block_size % 1024 == 0:
        return f"{block_size // 1024}KB"
    return f"{block_size}B"


@dataclass(frozen=True)
class StrategySpec:
    """One benchmark entry: a strategy, its parameters and its output file."""

    label: str
    strategy: CopyStrategy
    output_name: str
    block_size: int | None = None

    def __post_init__(self) -> None:
        if self.strategy is CopyStrategy.BLOCK:
            if self.block_size is None or self.block_size <= 0:
                raise ConfigError(
                    f"Block strategy '{self.label}' needs a positive block size"
                )
        elif self.block_size is not None:
            raise ConfigError(
                f"Strategy '{self.strategy.value}' does not take a block size"
            )

    @property
    def description(self) -> str:
        if self.strategy is CopyStrategy.BYTE:
            return "Read and write one byte per call"
        if self.strategy is CopyStrategy.BLOCK:
            assert self.block_size is not None
            return (
                f"Read into a reusable {format_block_size(self.block_size)} buffer "
                "and write the whole buffer"
            )
        return "Decode text, copy line by line with a fresh terminator"


@dataclass
class BenchmarkResult:
    """Timing and size figures for one strategy run."""

    label: str
    strategy: str
    duration: float
    input_size: int
    output_size: int
    block_size: int | None = None

    @property
    def throughput_mbps(self) -> float:
        """Input bytes processed per second, in MB/s."""
        if self.duration > 0:
            return (self.input_size / (1024 * 1024)) / self.duration
        return 0.0

    @property
    def speed_summary(self) -> str:
        """Human-readable speed summary."""
        if self.throughput_mbps > 1000:
            return f"{self.throughput_mbps / 1024:.1f} GB/s"
        else:
            return f"{self.throughput_mbps:.1f} MB/s"

    @property
    def size_matches(self) -> bool:
        """Whether the output file has exactly the input's length."""
        return self.input_size == self.output_size
