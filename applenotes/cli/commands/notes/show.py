"""Show command for the Notes service."""

from typing import Optional

import typer
from rich.console import Console

from applenotes.cli.utils import service as cli_service
from applenotes.services.notes import tools

console = Console()


def main(
    title: str = typer.Argument(..., help="Exact title of the note"),
    account: Optional[str] = typer.Option(None, help="Notes account to use"),
):
    """Print the HTML body of the note titled TITLE."""
    api = cli_service.get_service(account)

    response = tools.get_note_content(api, {"title": title})
    if response.is_error:
        console.print(f"[bold red]Error:[/bold red] {response.text}")
        raise typer.Exit(1)
    typer.echo(response.text)
