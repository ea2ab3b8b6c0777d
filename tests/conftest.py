"""Core test fixtures for the copybench project."""

import io
import logging
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from typer.testing import CliRunner

from copybench.config import BenchmarkConfig


class CapturingBytesIO(io.BytesIO):
    """BytesIO that keeps its contents readable after being closed."""

    final: bytes | None = None

    def close(self) -> None:
        if not self.closed:
            self.final = self.getvalue()
        super().close()


class FailingBytesIO(io.BytesIO):
    """BytesIO whose reads and writes raise OSError."""

    def read(self, size: int | None = -1) -> bytes:
        raise OSError("simulated read failure")

    def read1(self, size: int = -1) -> bytes:
        raise OSError("simulated read failure")

    def readinto(self, buffer) -> int:  # type: ignore[no-untyped-def]
        raise OSError("simulated read failure")

    def write(self, data) -> int:  # type: ignore[no-untyped-def]
        raise OSError("simulated write failure")


# ---- Base Fixtures ----


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def restore_logging() -> Generator[None, None, None]:
    """Undo any logging setup a test performed."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
    structlog.reset_defaults()


# ---- File Fixtures ----


@pytest.fixture
def text_lines() -> list[str]:
    """1024 lines of 16 bytes each: 16KB, a multiple of 1KB and 4KB."""
    return [f"line {i:05d} text" for i in range(1024)]


@pytest.fixture
def sample_text_file(tmp_path: Path, text_lines: list[str]) -> Path:
    """A text file whose length is an exact multiple of 4096 bytes."""
    path = tmp_path / "input.txt"
    path.write_bytes("".join(f"{line}\n" for line in text_lines).encode("ascii"))
    assert path.stat().st_size == 16 * 1024
    return path


@pytest.fixture
def uneven_text_file(tmp_path: Path) -> Path:
    """A text file whose length is not a multiple of common block sizes."""
    path = tmp_path / "uneven.txt"
    path.write_bytes(b"Alice was beginning to get very tired\n" * 100)
    return path


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    path = tmp_path / "out"
    path.mkdir()
    return path


@pytest.fixture
def benchmark_config(sample_text_file: Path, output_dir: Path) -> BenchmarkConfig:
    """Config copying the sample file into a temporary output directory."""
    return BenchmarkConfig(
        input_file=sample_text_file,
        output_dir=output_dir,
        block_sizes=[1024, 4096],
        line_terminator="\n",
    )


# ---- Stream Fixtures ----


@pytest.fixture
def capturing_sink() -> CapturingBytesIO:
    """In-memory sink whose contents survive close()."""
    return CapturingBytesIO()


@pytest.fixture
def failing_stream() -> FailingBytesIO:
    """In-memory stream that fails every read and write."""
    return FailingBytesIO()
