"""Copy tasks: a strategy bound to an input file and an output file."""

import os
from collections.abc import Iterable
from pathlib import Path
from types import TracebackType
from typing import BinaryIO

from copybench.core.errors import CopyFailedError
from copybench.core.logging import get_struct_logger

from .enums import CopyStrategy
from .models import StrategySpec
from .strategies import copy_blocks, copy_bytes, copy_lines


logger = get_struct_logger(__name__)


class FileCopyTask:
    """A runnable copy task that owns its input and output handles.

    Both files are opened when the task is created, so a missing input fails
    here rather than during measurement. Files are opened unbuffered; the
    strategy decides how much to read and write per call.
    """

    def __init__(
        self,
        spec: StrategySpec,
        input_file: str | Path,
        output_file: str | Path,
        search_paths: Iterable[str | Path] = (),
        encoding: str = "utf-8",
        line_terminator: str = os.linesep,
        trim_final_block: bool = False,
    ):
        self.spec = spec
        self.search_paths = [Path(p) for p in search_paths]
        self.encoding = encoding
        self.line_terminator = line_terminator
        self.trim_final_block = trim_final_block

        self.source: BinaryIO | None = None
        self.sink: BinaryIO | None = None
        self.input_path: Path | None = None
        self.output_path: Path | None = None

        self.set_input(input_file)
        try:
            self.set_output(output_file)
        except CopyFailedError:
            self.close()
            raise

    def set_input(self, filename: str | Path) -> None:
        """Open ``filename`` as this task's input.

        The name is tried as given first. A relative name that cannot be
        opened is then looked up in each of ``search_paths`` in order.

        Raises:
            CopyFailedError: If no candidate could be opened
        """
        self._close_source()
        self.input_path = None
        path = Path(filename)
        candidates = [path]
        if not path.is_absolute():
            candidates.extend(base / path for base in self.search_paths)

        for candidate in candidates:
            try:
                self.source = open(candidate, "rb", buffering=0)
            except OSError as e:
                logger.debug(
                    "input_candidate_unavailable", path=str(candidate), error=str(e)
                )
                continue
            self.input_path = candidate
            logger.debug("input_opened", path=str(candidate), task=self.spec.label)
            return

        raise CopyFailedError(f"Don't have {filename}")

    def set_output(self, filename: str | Path) -> None:
        """Open ``filename`` as this task's output, truncating it.

        Raises:
            CopyFailedError: If the file cannot be opened for writing
        """
        self._close_sink()
        self.output_path = None
        path = Path(filename)
        try:
            self.sink = open(path, "wb", buffering=0)
        except OSError as e:
            raise CopyFailedError(f"could not open output file {filename}") from e
        self.output_path = path
        logger.debug("output_opened", path=str(path), task=self.spec.label)

    def run(self) -> None:
        """Run the bound strategy. Hands both handles to it; it closes them.

        Raises:
            CopyFailedError: On any I/O error, or if the task already ran
        """
        source, sink = self.source, self.sink
        if source is None or sink is None:
            raise CopyFailedError(f"{self.spec.label} has no open input or output")
        self.source = None
        self.sink = None

        strategy = self.spec.strategy
        if strategy is CopyStrategy.BYTE:
            copy_bytes(source, sink)
        elif strategy is CopyStrategy.BLOCK:
            assert self.spec.block_size is not None
            copy_blocks(
                source,
                sink,
                self.spec.block_size,
                trim_final_block=self.trim_final_block,
            )
        else:
            copy_lines(
                source,
                sink,
                encoding=self.encoding,
                line_terminator=self.line_terminator,
            )

    def close(self) -> None:
        """Close any handle still held by the task."""
        self._close_source()
        self._close_sink()

    def _close_source(self) -> None:
        if self.source is not None:
            self.source.close()
            self.source = None

    def _close_sink(self) -> None:
        if self.sink is not None:
            self.sink.close()
            self.sink = None

    def __enter__(self) -> "FileCopyTask":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def __str__(self) -> str:
        return self.spec.label

    def __repr__(self) -> str:
        return (
            f"FileCopyTask(label={self.spec.label!r}, "
            f"input={str(self.input_path)!r}, output={str(self.output_path)!r})"
        )
