"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI terminal output:
colored status messages, a progress bar over the catalog and the final
run summary. Supports verbosity levels and the --no-color flag.
"""

from contextlib import contextmanager
from typing import Iterator, Tuple

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TaskProgressColumn,
    TextColumn,
)

from gis_docs.cli.models import RunSummary


class OutputHandler:
    """Handles all terminal output using Rich library.

    Attributes:
        verbosity: Verbosity level (0=summary, 1=info, 2=debug)
        console: Rich Console instance for output

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.success("Saved docs/search/places-api.md")
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=summary, 1=info, 2=debug)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.console = Console(
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
    def progress_bar(self, total: int, description: str = "Processing") -> Iterator[Tuple[Progress, TaskID]]:
        """Display progress bar for multi-item operations.

        Args:
            total: Total number of items to process
            description: Description text for progress bar

        Yields:
            Progress instance and the id of its single task

        Example:
            >>> with handler.progress_bar(16, "Parsing APIs") as (progress, task):
            ...     progress.update(task, advance=1)
        """
        progress = Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            console=self.console,
            transient=True,
        )
        with progress:
            task = progress.add_task(description, total=total)
            yield progress, task

    def print_summary(self, summary: RunSummary) -> None:
        """Display run summary with color coding.

        Args:
            summary: Outcome of the documentation run
        """
        self.console.print("\n[bold]Parse Summary:[/bold]")

        if summary.docs_saved:
            self.console.print(f"  [green]✓[/green] Documents saved: {len(summary.docs_saved)}")

        if summary.docs_failed:
            self.console.print(
                f"  [red]✗[/red] Documents failed: {len(summary.docs_failed)} "
                f"({', '.join(summary.docs_failed)})"
            )

        if summary.openapi_saved:
            self.console.print(f"  [green]✓[/green] OpenAPI specs saved: {len(summary.openapi_saved)}")

        if summary.openapi_missing:
            self.console.print(
                f"  [yellow]⚠[/yellow] OpenAPI specs missing: {len(summary.openapi_missing)}"
            )

        if summary.index_files:
            self.console.print(f"  [dim]─[/dim] Index files written: {len(summary.index_files)}")

        if not summary.docs_saved and not summary.docs_failed:
            self.console.print("\n[yellow]No APIs to parse[/yellow]")
        elif summary.docs_failed:
            self.console.print("\n[yellow]Parsing completed with errors[/yellow]")
        else:
            self.console.print("\n[green]Parsing completed successfully[/green]")
