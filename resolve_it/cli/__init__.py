"""Command-line interface for resolve_it."""

from resolve_it.cli.main import main

# Define what's available when doing "from resolve_it.cli import *"
__all__ = ["main"]
