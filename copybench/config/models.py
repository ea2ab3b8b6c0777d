"""Configuration model for the copy benchmark."""

import codecs
import os
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError, field_validator

from copybench.core.errors import ConfigError
from copybench.models.base import CopyBenchBaseModel


DEFAULT_INPUT_FILE = "Big-Alice-in-Wonderland.txt"
DEFAULT_OUTPUT_DIR = Path("/tmp")
DEFAULT_BLOCK_SIZES = (1024, 4 * 1024, 64 * 1024)


class BenchmarkConfig(CopyBenchBaseModel):
    """Inputs, outputs and block sizes for one benchmark run."""

    input_file: Path = Field(
        default=Path(DEFAULT_INPUT_FILE),
        description="File to copy with every strategy",
    )
    output_dir: Path = Field(
        default=DEFAULT_OUTPUT_DIR,
        description="Directory receiving filecopy<N>.txt outputs",
    )
    block_sizes: list[int] = Field(
        default_factory=lambda: list(DEFAULT_BLOCK_SIZES),
        description="Block sizes in bytes, one block-copy task per entry",
    )
    encoding: str = Field(
        default="utf-8", description="Text encoding used by the line copy"
    )
    line_terminator: str = Field(
        default=os.linesep,
        description="Terminator written after every line by the line copy",
    )
    search_paths: list[Path] = Field(
        default_factory=list,
        description="Directories searched for a relative input file that "
        "cannot be opened as given",
    )
    trim_final_block: bool = Field(
        default=False,
        description="Write only the bytes read on the final short block",
    )

    @field_validator("block_sizes")
    @classmethod
    def validate_block_sizes(cls, v: list[int]) -> list[int]:
        """Block sizes must be positive."""
        for size in v:
            if size <= 0:
                raise ValueError(f"Block size must be positive, got {size}")
        return v

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Encoding must be known to the codecs registry."""
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e
        return v

    @field_validator("line_terminator")
    @classmethod
    def validate_line_terminator(cls, v: str) -> str:
        if v not in ("\n", "\r\n", "\r"):
            raise ValueError("Line terminator must be one of \\n, \\r\\n or \\r")
        return v


def create_benchmark_config(**overrides: Any) -> BenchmarkConfig:
    """Factory function to build a config, dropping ``None`` overrides.

    Raises:
        ConfigError: If an override fails validation
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    try:
        return BenchmarkConfig(**values)
    except ValidationError as e:
        raise ConfigError(str(e)) from e
