"""Console output for the drivepath CLI."""

import json
from typing import Any

import click
from rich.console import Console


class OutputFormatter:
    """Prints messages and results as styled text or JSON."""

    def __init__(self, json_output: bool = False, quiet: bool = False):
        """Initialize the formatter.

        Args:
            json_output: Print results as JSON instead of text
            quiet: Suppress informational messages
        """
        self.json_output = json_output
        self.quiet = quiet
        self.console = Console(highlight=False, emoji=False, soft_wrap=True)
        self.err_console = Console(
            stderr=True, highlight=False, emoji=False, soft_wrap=True
        )

    def print(self, message: str) -> None:
        """Print a result line exactly as given."""
        self.console.print(message, markup=False)

    def info(self, message: str) -> None:
        """Print an informational message unless quiet or in JSON mode."""
        if not self.quiet and not self.json_output:
            self.console.print(message, style="dim", markup=False)

    def success(self, message: str) -> None:
        if not self.quiet and not self.json_output:
            self.console.print(f"✓ {message}", style="green", markup=False)

    def warning(self, message: str) -> None:
        if not self.quiet:
            self.err_console.print(f"Warning: {message}", style="yellow", markup=False)

    def error(self, message: str) -> None:
        """Print an error message; never suppressed."""
        self.err_console.print(f"Error: {message}", style="bold red", markup=False)

    def output_json(self, data: Any) -> None:
        click.echo(json.dumps(data, indent=2, ensure_ascii=False))
