"""
CLI Context for fieldext.

Provides shared console output and file loading for all CLI commands.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from fieldext.common.exceptions import FieldExtError
from fieldext.loader import PipelineLoader


@dataclass
class CLIContext:
    """
    Context object for CLI commands.

    Created once by the app callback and passed to commands through
    Typer's context object.

    Attributes:
        console: Rich console for output
        verbose: Enable verbose output and DEBUG logging
        loader: Pipeline loader shared across commands
        json_mode: When True, only JSON is written to the console
    """

    console: Console
    verbose: bool = False
    loader: PipelineLoader = field(init=False)
    json_mode: bool = False

    def __post_init__(self):
        """Initialize loader and logging."""
        self.loader = PipelineLoader()
        if self.verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format="%(message)s",
                handlers=[RichHandler(console=self.console, show_path=False)],
                force=True,
            )

    def print_verbose(self, message: str) -> None:
        """Print a message only in verbose, non-JSON mode."""
        if self.verbose and not self.json_mode:
            self.console.print(escape(message))

    def read_data(self, path: Path) -> Any:
        """Read a YAML or JSON data file, exiting on failure."""
        try:
            return self.loader.read_file(path)
        except FieldExtError as e:
            self.fail(e)

    def fail(self, error: Exception) -> None:
        """Report an error and exit with status 1."""
        self.console.print(f"[bold red]Error:[/bold red] {escape(str(error))}")
        if self.verbose and isinstance(error, FieldExtError) and error.context:
            self.console.print(error.context)
        raise typer.Exit(code=1)
