"""Main CLI application for copybench."""

import logging
import sys
from importlib.metadata import distribution
from typing import Annotated

import typer

from copybench.cli.commands import register_all_commands
from copybench.cli.commands.benchmark import run_benchmark
from copybench.cli.decorators import handle_errors
from copybench.config import create_benchmark_config
from copybench.core.logging import get_struct_logger, setup_logging


__all__ = ["app", "main", "__version__"]


__version__ = distribution("copybench").version

logger = get_struct_logger(__name__)


class AppContext:
    """Application context for storing shared state."""

    def __init__(self, verbose: int = 0, log_file: str | None = None):
        self.verbose = verbose
        self.log_file = log_file

    @property
    def log_level(self) -> int:
        if self.verbose >= 2:
            return logging.DEBUG
        if self.verbose == 1:
            return logging.INFO
        return logging.WARNING


app = typer.Typer(
    name="copybench",
    help=f"""copybench v{__version__}

Times byte-by-byte, block-buffered and line-by-line file copies.
Run without a command to benchmark the default file and block sizes.""",
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "-v",
            "--verbose",
            count=True,
            help="Increase verbosity (-v=INFO, -vv=DEBUG)",
        ),
    ] = 0,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging (equivalent to -vv)"),
    ] = False,
    log_file: Annotated[
        str | None, typer.Option("--log-file", help="Log to file")
    ] = None,
    version: Annotated[
        bool, typer.Option("--version", help="Show version and exit")
    ] = False,
) -> None:
    """copybench file copy benchmark."""
    if version:
        print(f"copybench v{__version__}")
        raise typer.Exit()

    app_context = AppContext(verbose=2 if debug else verbose, log_file=log_file)
    setup_logging(level=app_context.log_level, log_file=log_file)

    if ctx.invoked_subcommand is None:
        _run_defaults()


@handle_errors
def _run_defaults() -> None:
    run_benchmark(create_benchmark_config())


register_all_commands(app)


def main() -> int:
    """Main CLI entry point."""
    exit_code = 0

    try:
        app()
    except SystemExit as e:
        exit_code = e.code if isinstance(e.code, int) else 0
    except Exception as e:
        logger.exception("unexpected_error", error=str(e))
        exit_code = 1

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
