"""Implementation of file copy strategies.

Each strategy takes ownership of an already opened binary source and sink,
copies until end-of-input and closes both. Any I/O error is re-raised as
CopyFailedError.
"""

import io
import logging
import os
from typing import BinaryIO

from copybench.core.errors import CopyFailedError
from copybench.core.logging import get_struct_logger


logger = get_struct_logger(__name__)


def _copy_failed(strategy: str, error: Exception) -> CopyFailedError:
    exc_info = logging.getLogger(__name__).isEnabledFor(logging.DEBUG)
    logger.error(
        "copy_failed", strategy=strategy, error=str(error), exc_info=exc_info
    )
    return CopyFailedError(f"{strategy} copy failed")


def copy_bytes(source: BinaryIO, sink: BinaryIO) -> int:
    """Copy one byte per read and write call.

    Returns:
        Number of bytes written
    """
    written = 0
    try:
        with source, sink:
            data = source.read(1)
            while data:
                _write_all(sink, data)
                written += 1
                data = source.read(1)
    except OSError as e:
        raise _copy_failed("byte", e) from e

    logger.debug("byte_copy_completed", bytes_written=written)
    return written


def copy_blocks(
    source: BinaryIO,
    sink: BinaryIO,
    block_size: int,
    trim_final_block: bool = False,
) -> int:
    """Copy through a reusable buffer of ``block_size`` bytes.

    Every iteration writes the whole buffer, including after the final short
    read. When ``block_size`` does not divide the input length, the output is
    padded to a multiple of ``block_size`` with whatever the buffer still held
    from the previous read (zeros if there was none). Pass
    ``trim_final_block=True`` to write only the bytes actually read.

    Returns:
        Number of bytes written
    """
    if block_size <= 0:
        raise ValueError(f"block_size must be positive, got {block_size}")

    buffer = bytearray(block_size)
    written = 0
    try:
        with source, sink:
            count = source.readinto(buffer)
            while count:
                if trim_final_block and count < block_size:
                    _write_all(sink, buffer[:count])
                    written += count
                else:
                    _write_all(sink, buffer)
                    written += block_size
                count = source.readinto(buffer)
    except OSError as e:
        raise _copy_failed("block", e) from e

    logger.debug(
        "block_copy_completed",
        block_size=block_size,
        bytes_written=written,
        trim_final_block=trim_final_block,
    )
    return written


def copy_lines(
    source: BinaryIO,
    sink: BinaryIO,
    encoding: str = "utf-8",
    line_terminator: str = os.linesep,
) -> int:
    """Copy text line by line.

    Lines are split on ``\\n``, ``\\r\\n`` or ``\\r`` and each one is written
    back followed by ``line_terminator``, so a missing final newline is added
    and mixed terminators come out uniform. Undecodable bytes become U+FFFD;
    an unknown ``encoding`` fails like any other I/O error.

    Returns:
        Number of lines written
    """
    lines = 0
    try:
        with source, sink:
            reader = io.TextIOWrapper(
                _buffered_reader(source), encoding=encoding, errors="replace"
            )
            writer = io.TextIOWrapper(
                _buffered_writer(sink), encoding=encoding, errors="replace", newline=""
            )
            with reader, writer:
                for line in reader:
                    if line.endswith("\n"):
                        line = line[:-1]
                    writer.write(line)
                    writer.write(line_terminator)
                    lines += 1
    except (OSError, LookupError) as e:
        raise _copy_failed("line", e) from e

    logger.debug("line_copy_completed", lines_written=lines, encoding=encoding)
    return lines


def _write_all(sink: BinaryIO, data: bytes | bytearray) -> None:
    # Raw (unbuffered) files may accept only part of a write
    written = sink.write(data) or 0
    while written < len(data):
        count = sink.write(data[written:])
        if not count:
            raise OSError(f"short write: {written} of {len(data)} bytes")
        written += count


def _buffered_reader(stream: BinaryIO) -> BinaryIO:
    if isinstance(stream, io.RawIOBase):
        return io.BufferedReader(stream)  # type: ignore[return-value]
    return stream


def _buffered_writer(stream: BinaryIO) -> BinaryIO:
    if isinstance(stream, io.RawIOBase):
        return io.BufferedWriter(stream)  # type: ignore[return-value]
    return stream
