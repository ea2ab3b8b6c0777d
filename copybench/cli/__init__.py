"""Command-line interface for copybench."""

from .app import app, main


__all__ = ["app", "main"]
