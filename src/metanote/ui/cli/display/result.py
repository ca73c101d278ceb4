"""src/metanote/ui/cli/display/result.py
What: Render read failures and per-file write outcomes for CLI flows.
Why: Keep console output formatting consistent across commands.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich.console import Console
from rich.text import Text

from metanote.features.editing import ReadFailure, WriteResult


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize result display."""
        self.console = console or Console()

    def show_read_failures(self, failures: Sequence[ReadFailure]) -> None:
        """List files that were left out of the selection.

        Failures are always shown, even in quiet mode.
        """
        if not failures:
            return

        self.console.print(f"[red]Skipped {len(failures)} unreadable file(s):[/red]")
        for failure in failures:
            self.console.print(Text(f"  • {failure.path}: {failure.error}", style="red"))

    def show_results(self, results: Sequence[WriteResult], quiet: bool = False) -> None:
        """Display write results.

        Args:
            results: Per-file write results.
            quiet: Whether to suppress non-error output.
        """
        success_count = sum(1 for result in results if result.success)
        failure_results = [result for result in results if not result.success]

        if not quiet:
            self.console.print("\n[bold]Save Summary:[/bold]")
            self.console.print(f"Total files: {len(results)}")
            self.console.print(f"[green]Saved: {success_count}[/green]")

        if not failure_results:
            return

        self.console.print(f"[red]Failed: {len(failure_results)}[/red]")
        for failed_result in failure_results:
            self.console.print(
                Text(f"  • {failed_result.path}: {failed_result.error_message}", style="red")
            )


__all__ = ["ResultDisplay"]
