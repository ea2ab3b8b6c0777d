"""CLI command registration."""

import typer

from copybench.cli.commands.benchmark import register_commands as register_benchmark


def register_all_commands(app: typer.Typer) -> None:
    """Register all CLI commands with the main app."""
    register_benchmark(app)


__all__ = ["register_all_commands"]
