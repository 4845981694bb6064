"""
CLI Reporter Module
===================

Provides rich terminal output for the leftovers command.

Classes
-------
CLIReporter
    Renders candidate tables, per-resource progress and deletion
    summaries.

Example
-------
>>> from boshkit.reporters import CLIReporter
>>>
>>> reporter = CLIReporter()
>>> reporter.print_resources(resources)
>>> reporter.print_delete_summary(summary, dry_run=False)

See Also
--------
rich : Python library for rich text and formatting.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from boshkit.leftovers.base import Deletable
from boshkit.leftovers.cleaner import DeleteResult, DeleteStatus, DeleteSummary

# Module logger
logger = logging.getLogger(__name__)


class CLIReporter:
    """
    Reporter for displaying leftovers in the terminal.

    Parameters
    ----------
    console : Console, optional
        Rich Console instance. If not provided, creates a new one.
    """

    STATUS_ICONS = {
        DeleteStatus.SUCCESS: "[green]✓[/green]",
        DeleteStatus.FAILED: "[red]✗[/red]",
        DeleteStatus.DRY_RUN: "[blue]~[/blue]",
    }

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize the CLI reporter with a Rich Console."""
        self.console = console or Console()
        logger.debug("Initialized CLIReporter")

    def print_mode(self, dry_run: bool, no_confirm: bool) -> None:
        """Print a banner for dry-run or no-confirm mode."""
        if dry_run:
            self.console.print(
                Panel(
                    "[yellow bold]DRY-RUN MODE[/yellow bold]\n"
                    "No resources will actually be deleted.",
                    border_style="yellow",
                )
            )
        elif no_confirm:
            self.console.print(
                Panel(
                    "[red bold]NO-CONFIRM MODE[/red bold]\n"
                    "Matching resources will be deleted WITHOUT confirmation!",
                    border_style="red",
                )
            )

    def print_resources(self, resources: List[Deletable]) -> None:
        """
        Print a table of resources selected for deletion.

        Parameters
        ----------
        resources : list of Deletable
            Resources in the order they will be deleted.
        """
        if not resources:
            self.console.print("\n[green]No matching resources. Nothing to delete.[/green]")
            return

        table = Table(show_lines=False, title=f"{len(resources)} selected")
        table.add_column("#", style="dim", width=4)
        table.add_column("Type", style="yellow")
        table.add_column("Name", style="cyan")

        for i, resource in enumerate(resources, 1):
            table.add_row(str(i), resource.type(), Text(resource.name()))

        self.console.print(table)

    def print_result(self, result: DeleteResult) -> None:
        """Print one line of deletion progress."""
        status_text = {
            DeleteStatus.SUCCESS: "Deleted",
            DeleteStatus.FAILED: f"Failed: {result.error_message}",
            DeleteStatus.DRY_RUN: "Would delete",
        }.get(result.status, "Unknown")

        line = Text.from_markup(f"  {self.STATUS_ICONS.get(result.status, '?')} ")
        line.append(f"{result.resource_type} {result.name} - {status_text}")
        self.console.print(line)

    def print_delete_summary(self, summary: DeleteSummary, dry_run: bool) -> None:
        """Print deletion summary."""
        self.console.print("\n" + "=" * 50)
        self.console.print("[bold]Summary[/bold]")
        self.console.print("=" * 50)

        if dry_run:
            self.console.print(f"  Would delete: [blue]{summary.dry_run}[/blue]")
        else:
            self.console.print(f"  Deleted:  [green]{summary.deleted}[/green]")
            self.console.print(f"  Failed:   [red]{summary.failed}[/red]")

        self.console.print(f"  Total:    {summary.total}")

        if summary.failed > 0:
            self.console.print("\n[yellow]Some deletions failed. Common reasons:[/yellow]")
            self.console.print("  • A resource lock is set on the resource group")
            self.console.print("  • Another deployment is still running in the group")
            self.console.print("  • Insufficient role assignments on the subscription")

        self.console.print()
