"""Error handling decorators for CLI commands."""

import logging
from collections.abc import Callable
from functools import wraps
from typing import Any

import typer

from copybench.core.errors import ConfigError, CopyBenchError, CopyFailedError
from copybench.core.logging import get_struct_logger


__all__ = ["handle_errors"]

logger = get_struct_logger(__name__)


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Log known failures and exit with status 1 instead of a traceback."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except CopyFailedError as e:
            logger.error("copy_failed", error=str(e))
            raise typer.Exit(1) from e
        except ConfigError as e:
            logger.error("configuration_error", error=str(e))
            raise typer.Exit(1) from e
        except CopyBenchError as e:
            logger.error("copybench_error", error=str(e))
            raise typer.Exit(1) from e
        except Exception as e:
            exc_info = logging.getLogger(__name__).isEnabledFor(logging.DEBUG)
            logger.error("unexpected_error", error=str(e), exc_info=exc_info)
            raise typer.Exit(1) from e

    return wrapper
