"""copybench - compare file copy strategies by wall-clock time."""

from importlib.metadata import distribution

from .core.file_operations import BenchmarkResult, CopyStrategy, FileCopyTask


__version__ = distribution(__package__ or "copybench").version

__all__ = [
    "BenchmarkResult",
    "CopyStrategy",
    "FileCopyTask",
    "__version__",
]

# Import CLI after setting __version__ to avoid circular imports
from .cli import app, main


__all__ += ["app", "main"]
