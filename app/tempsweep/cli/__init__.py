"""CLI package for tempsweep.

This package contains the Typer application.
"""

from tempsweep.cli.main import app

__all__ = ["app"]
