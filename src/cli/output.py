"""Terminal output handling using Rich library.

This module provides the OutputHandler class for human-facing CLI messages.
Messages go to stderr so that stdout carries only the exported JSON.
"""

from typing import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.spinner import Spinner
from rich.live import Live
from rich.table import Table


class OutputHandler:
    """Handles all terminal output using Rich library.

    Attributes:
        verbosity: Logging verbosity level (0=summary, 1=info, 2=debug)
        console: Rich Console instance for output (stderr)

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.success("Status saved")
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=summary, 1=info, 2=debug)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.console = Console(
            stderr=True,
            no_color=no_color,
            highlight=False,
        )

    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    def error(self, message: str) -> None:
        self.console.print(f"[red]✗[/red] {message}", style="red")

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]⚠[/yellow] {message}", style="yellow")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1)."""
        if self.verbosity >= 1:
            self.console.print(message)

    def debug(self, message: str) -> None:
        """Display debug message (only if verbosity >= 2)."""
        if self.verbosity >= 2:
            self.console.print(f"[dim]{message}[/dim]")

    @contextmanager
    def spinner(self, message: str) -> Iterator[None]:
        """Display spinner while a request is running.

        Example:
            >>> with handler.spinner("Fetching pages..."):
            ...     service.export_pages()
        """
        spinner = Spinner("dots", text=message)
        with Live(spinner, console=self.console, refresh_per_second=10, transient=True):
            yield

    def print_page_table(self, pages: list) -> None:
        """Display exported pages as an indented tree-ordered table.

        Args:
            pages: Exported page dictionaries in list order
        """
        if not pages:
            self.console.print("\n[yellow]No pages to export[/yellow]")
            return

        depth = {0: -1}
        table = Table(title="Exported Pages")
        table.add_column("Order", justify="right")
        table.add_column("ID", justify="right")
        table.add_column("Title")
        table.add_column("Content", justify="center")
        table.add_column("Image", justify="center")

        for page in pages:
            level = depth.get(page['parent_id'], -1) + 1
            depth[page['id']] = level
            table.add_row(
                str(page.get('order', '')),
                str(page['id']),
                f"{'  ' * level}{page['title']}",
                "yes" if page['has_content'] else "no",
                "yes" if 'image' in page else "no",
            )

        self.console.print(table)
