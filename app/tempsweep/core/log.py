"""Console logging setup for the CLI.

Library modules only create module-level loggers; handlers are attached
here, once, by the command line entry point.
"""

import logging

from rich.logging import RichHandler

from tempsweep.utils.formatting import err_console


def setup_logging(*, verbose: bool = False) -> None:
    """Route log records to stderr through Rich.

    Warnings and errors are always shown; ``--quiet`` only silences the
    summary on stdout.

    Args:
        verbose: Show DEBUG and above, including every kept entry.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    handler = RichHandler(
        console=err_console,
        show_path=False,
        show_time=verbose,
        rich_tracebacks=True,
    )
    logging.basicConfig(level=level, format="%(message)s", handlers=[handler], force=True)
