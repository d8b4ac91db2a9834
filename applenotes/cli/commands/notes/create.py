"""Create command for the Notes service."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from applenotes.cli.utils import service as cli_service
from applenotes.services.notes import tools

console = Console()


def main(
    title: str = typer.Argument(..., help="Title of the note"),
    content: Optional[str] = typer.Option(
        None, "--content", "-c", help='Note body (text or HTML); "-" reads stdin'
    ),
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", help="Read the note body from a file"
    ),
    tag: Optional[List[str]] = typer.Option(None, "--tag", "-t", help="Tag (repeatable)"),
    account: Optional[str] = typer.Option(None, help="Notes account to use"),
):
    """Create a note from text or an HTML fragment."""
    body = cli_service.read_content(content, file)
    api = cli_service.get_service(account)

    response = tools.create_note(
        api, {"title": title, "content": body, "tags": list(tag or [])}
    )
    if response.is_error:
        console.print(f"[bold red]Error:[/bold red] {response.text}")
        raise typer.Exit(1)
    console.print(response.text, style="green", markup=False, highlight=False)
