from .errors import ConfigError, CopyBenchError, CopyFailedError
from .logging import get_struct_logger, setup_logging


__all__ = [
    "setup_logging",
    "get_struct_logger",
    "CopyBenchError",
    "CopyFailedError",
    "ConfigError",
]
