"""Shared utilities for the yamlsort CLI."""

import logging
import sys

import typer
from rich.console import Console
from rich.markup import escape

console = Console()
# Diagnostics stay off stdout, which carries the documents
err_console = Console(stderr=True)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
        stream=sys.stderr,
    )


def fail(label: str, error: Exception) -> None:
    """Print a labelled error and exit with status 1."""
    err_console.print(f"[red]{label}:[/red] {escape(str(error))}")
    raise typer.Exit(1) from None
