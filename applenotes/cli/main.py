#!/usr/bin/env python
"""Command line interface for applenotes."""

import typer
from rich.console import Console

from applenotes.cli.commands import config, notes
from applenotes.cli.utils.service import setup_logging

app = typer.Typer(help="Command Line Interface for Apple Notes")
console = Console()

# Add command groups
app.add_typer(notes.app, name="notes")
app.command("config", help="Show or update saved settings")(config.main)


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logs"),
):
    """Create, search and read Apple Notes from the shell."""
    setup_logging(verbose)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
