"""CLI package for cull.

This package contains the Typer application.
"""

from cull.cli.main import app

__all__ = ["app"]
