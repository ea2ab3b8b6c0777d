"""Protocols for file operations."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CopyTaskProtocol(Protocol):
    """Anything the task timer can run and label."""

    def run(self) -> None:
        """Perform the task."""
        ...

    def __str__(self) -> str:
        """Label shown next to the measured time."""
        ...
