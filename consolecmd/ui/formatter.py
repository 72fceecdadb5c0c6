"""
Output formatting utilities for consolecmd.

Provides consistent console output for host-facing messages, including the
default error line written when nobody subscribes to loop errors.
"""

from typing import Any, List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table


class ShellFormatter:
    """Formatter for console output."""

    def __init__(self, console: Optional[Console] = None):
        """
        Initialize formatter.

        Args:
            console: Rich console to print to. Defaults to one bound to stdout.
        """
        self.console = console or Console(highlight=False, soft_wrap=True)

    def print(self, message: str, style: Optional[str] = None):
        """Print a plain message without markup interpretation."""
        self.console.print(message, style=style, markup=False)

    def print_success(self, message: str):
        """Print a success message."""
        self.console.print(f"✅ {message}", style="green", markup=False)

    def print_error(self, message: str):
        """Print an error message."""
        self.console.print(message, style="red bold", markup=False)

    def print_warning(self, message: str):
        """Print a warning message."""
        self.console.print(f"⚠️  {message}", style="yellow", markup=False)

    def print_info(self, message: str):
        """Print an info message."""
        self.console.print(message, style="blue", markup=False)

    def print_table(
        self,
        title: str,
        headers: Sequence[str],
        rows: List[List[Any]],
        show_lines: bool = False,
    ):
        """
        Print a formatted table.

        Args:
            title: Table title
            headers: Column headers
            rows: Table rows
            show_lines: Whether to show row lines
        """
        table = Table(
            title=title,
            show_header=True,
            header_style="bold cyan",
            border_style="blue",
            show_lines=show_lines,
            box=box.ROUNDED,
        )

        for header in headers:
            table.add_column(header)

        for row in rows:
            table.add_row(*[str(cell) for cell in row])

        self.console.print(table)
