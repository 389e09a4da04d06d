"""Console reporting and progress bars for upload batches."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import final

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table

from typora_upload.models.upload import UploadResult


def make_stdout_console() -> Console:
    """Console for machine-read output: no markup, highlighting or wrapping."""
    return Console(soft_wrap=True, highlight=False, emoji=False)


def make_stderr_console() -> Console:
    """Console for diagnostics and progress bars."""
    return Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)


@final
class UploadReporter:
    """Writes upload diagnostics to standard error."""

    def __init__(self, console: Console | None = None, verbose: bool = False) -> None:
        """Initialize the reporter.

        Args:
            console: Rich console instance. If None, creates one on stderr.
            verbose: Whether ``display_debug`` messages are shown
        """
        self.console = console or make_stderr_console()
        self.verbose = verbose

    def display_failure(self, result: UploadResult) -> None:
        """Print the one-line failure report for a result.

        Args:
            result: A failed upload result
        """
        self.console.print(
            f"Upload failed for {result.file_path}: {result.error}",
            style="red",
            markup=False,
        )

    def display_error(self, message: str, exception: Exception | None = None) -> None:
        """Display an error message with optional exception details.

        Args:
            message: Error message to display
            exception: Optional exception for additional context
        """
        self.console.print(message, style="red", markup=False)
        if exception and self.verbose:
            self.console.print(f"Details: {exception!r}", style="dim", markup=False)

    def display_debug(self, message: str) -> None:
        """Display a diagnostic message, only in verbose mode."""
        if self.verbose:
            self.console.print(f"[dim]{escape(message)}[/dim]")

    def display_dry_run(self, rows: list[tuple[str, str, int | None]]) -> None:
        """Show what would be uploaded.

        Args:
            rows: ``(path, content type, size in bytes or None if missing)`` per file
        """
        table = Table(title="Dry run: nothing will be uploaded")
        table.add_column("File", style="cyan")
        table.add_column("Content-Type", style="magenta")
        table.add_column("Size", justify="right", style="green")

        for path, content_type, size in rows:
            size_text = f"{size:,} B" if size is not None else "[red]missing[/red]"
            table.add_row(escape(path), content_type, size_text)

        self.console.print(table)

    @contextmanager
    def track_uploads(self, total_files: int) -> Iterator[UploadProgressContext]:
        """Context manager for tracking batch upload progress.

        Args:
            total_files: Number of files in the batch

        Yields:
            Context for advancing the progress bar
        """
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=self.console,
            transient=True,
        ) as progress:
            task_id = progress.add_task("Uploading images...", total=total_files)
            yield UploadProgressContext(progress, task_id)


@final
class UploadProgressContext:
    """Context for tracking upload progress."""

    def __init__(self, progress: Progress, task_id: TaskID) -> None:
        """Initialize the context.

        Args:
            progress: Rich Progress instance
            task_id: Task ID for the progress bar
        """
        self.progress = progress
        self.task_id = task_id

    def advance(self, result: UploadResult) -> None:
        """Mark one upload as finished.

        Args:
            result: The finished upload
        """
        name = escape(Path(result.file_path).name)
        if result.success:
            description = f"[green]Uploaded[/green] {name}"
        else:
            description = f"[red]Failed[/red] {name}"
        self.progress.update(self.task_id, advance=1, description=description)
