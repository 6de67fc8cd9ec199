"""Main CLI application entry point.

Defines the Typer application that runs a single cleaning pass.
"""

from typing import Annotated

import typer

from tempsweep import __version__
from tempsweep.boot.oracle import BOOT_INSTANT_MIN, BootTimeOracle
from tempsweep.cleaner.models import CleanSummary
from tempsweep.cleaner.runlog import RunLog
from tempsweep.cleaner.walker import TreeCleaner, fan_out
from tempsweep.cli.display import create_summary_table, format_boot_instant
from tempsweep.core.log import setup_logging
from tempsweep.core.paths import get_temp_root
from tempsweep.utils.formatting import console, print_info, print_warning

app = typer.Typer(
    name="tempsweep",
    help="Delete temp files and folders left over from before the last boot.",
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"tempsweep version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log every entry as it is evaluated.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Print only warnings and errors.",
        ),
    ] = False,
    log: Annotated[
        bool,
        typer.Option(
            "--log/--no-log",
            help="Append skipped entries to the daily run log.",
        ),
    ] = True,
) -> None:
    """Conservatively clean the temp directory.

    Deletes files and empty folders whose creation, access and
    modification times all predate the last system boot. Anything
    touched since boot, or that cannot be deleted, is left in place.
    """
    setup_logging(verbose=verbose)

    root = get_temp_root()
    run_log = RunLog() if log else None
    if run_log is not None:
        run_log.write_event("INFO", "START RUN")

    boot_instant = BootTimeOracle().resolve()
    if boot_instant == BOOT_INSTANT_MIN:
        print_warning("Could not determine the last boot time; nothing will be deleted.")
    elif not quiet:
        print_info(f"Last boot: {format_boot_instant(boot_instant)}")

    summary = CleanSummary()
    TreeCleaner(boot_instant, sink=fan_out(summary, run_log)).clean(root)

    if run_log is not None:
        run_log.write_event("INFO", "END RUN")

    if not quiet:
        console.print(create_summary_table(root, boot_instant, summary))
        if run_log is not None and summary.errors:
            print_info(f"Skipped entries logged to {run_log.log_path}")


if __name__ == "__main__":
    app()
