"""Exception types for copybench."""


class CopyBenchError(Exception):
    """Base exception for all copybench errors."""


class CopyFailedError(CopyBenchError):
    """A copy task could not open, read or write one of its files.

    Every I/O failure in the copy strategies and tasks surfaces as this one
    type. The underlying error is chained as ``__cause__`` for logging only.
    """


class ConfigError(CopyBenchError):
    """Invalid benchmark configuration."""
