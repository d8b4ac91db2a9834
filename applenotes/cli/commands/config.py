"""Config command for the applenotes CLI."""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from applenotes.cli.utils import service as cli_service

console = Console()


def main(
    account: Optional[str] = typer.Option(
        None, help='Preferred Notes account ("" for the default account)'
    ),
    timeout: Optional[float] = typer.Option(None, help="osascript timeout in seconds"),
):
    """Save the given settings, then print the effective ones."""
    if account is not None or timeout is not None:
        saved = cli_service.load_config()
        if account is not None:
            saved["account"] = account
        if timeout is not None:
            if timeout <= 0:
                console.print("[bold red]Error:[/bold red] Timeout must be positive")
                raise typer.Exit(1)
            saved["timeout"] = timeout
        cli_service.save_config(saved)

    settings = cli_service.get_settings()
    table = Table("Setting", "Value")
    table.add_row("account", settings.account or "(default)")
    table.add_row("timeout", f"{settings.timeout:g}s")
    table.add_row("osascript", settings.osascript)
    table.add_row("config file", cli_service.config_path)
    console.print(table)
