"""
Rich console output for roundtrip

Status messages, the progress bar and the summary all go to stderr so
that stdout stays clean for the CSV output.
"""

import os
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TaskProgressColumn, TimeElapsedColumn
from rich.text import Text

from ..models import RunSummary


def make_console() -> Console:
    """Console on stderr, forced to color when CLICOLOR_FORCE is set"""
    force = True if os.environ.get('CLICOLOR_FORCE') else None
    return Console(stderr=True, force_terminal=force, highlight=False)


class ConsoleOutput:
    """
    Rich console output for a run.

    Features:
    - Color-coded status lines
    - Transient progress bar showing the current identifier
    - Summary panel
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or make_console()

    def print_success(self, message: str):
        self.console.print(Text(message, style="green"))

    def print_warning(self, message: str):
        """Print warning message"""
        self.console.print(Text(message, style="yellow"))

    def print_error(self, message: str):
        """Print error message"""
        line = Text("Error: ", style="bold red")
        line.append(message, style="red")
        self.console.print(line)

    def create_progress(self, total: int) -> tuple[Progress, int]:
        """Create progress bar for resolving rows"""
        progress = Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]Resolving"),
            BarColumn(complete_style="cyan", finished_style="green"),
            TaskProgressColumn(),
            TimeElapsedColumn(),
            TextColumn("{task.fields[identifier]}", style="dim", markup=False),
            console=self.console,
            transient=True
        )
        task_id = progress.add_task("resolve", total=total, identifier="")
        return progress, task_id

    def print_summary(self, summary: RunSummary):
        """Print summary panel"""
        content = Text()

        content.append("Rows: ", style="bold")
        content.append(f"{summary.total}", style="dim")

        content.append("\n")
        content.append("Round-trip OK: ", style="bold")
        content.append(f"{summary.consistent}", style="green")

        content.append("\n")
        content.append("Round-trip failed: ", style="bold")
        content.append(f"{summary.inconsistent}", style="red" if summary.inconsistent else "dim")
        if summary.errors:
            content.append(f" ({summary.errors} with lookup errors)", style="dim italic")

        if summary.discarded:
            content.append("\n")
            content.append("Discarded: ", style="bold")
            content.append(f"{summary.discarded}", style="yellow")

        ok = summary.inconsistent == 0
        panel = Panel(
            content,
            title=Text("Summary", style="bold"),
            border_style="green" if ok else "red",
            padding=(0, 1),
            expand=False
        )
        self.console.print(panel)
