"""Rich display functions for a cleaning pass."""

from datetime import datetime
from pathlib import Path

from rich.table import Table

from tempsweep.boot.oracle import BOOT_INSTANT_MIN
from tempsweep.cleaner.models import CleanSummary


def format_boot_instant(boot_instant: datetime) -> str:
    """Format the boot instant for display in local time."""
    if boot_instant == BOOT_INSTANT_MIN:
        return "unknown"
    return boot_instant.astimezone().strftime("%Y-%m-%d %H:%M:%S %Z")


def create_summary_table(root: Path, boot_instant: datetime, summary: CleanSummary) -> Table:
    """Create a Rich table summarizing one pass.

    Args:
        root: Directory that was cleaned.
        boot_instant: Boot instant the pass compared against.
        summary: Outcome counts collected during the pass.

    Returns:
        Rich Table with one row per outcome category.
    """
    table = Table(
        title=f"Cleaned {root}",
        caption=f"Last boot: {format_boot_instant(boot_instant)}",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Outcome")
    table.add_column("Entries", justify="right")

    table.add_row("[deleted]Deleted[/]", str(summary.deleted))
    table.add_row("[skipped]Kept (in use since boot)[/]", str(summary.ineligible))
    table.add_row(
        "[error]Skipped (error)[/]" if summary.errors else "[muted]Skipped (error)[/]",
        str(summary.errors),
    )
    return table
