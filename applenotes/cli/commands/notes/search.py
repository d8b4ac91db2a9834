"""Search command for the Notes service."""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from applenotes.cli.utils import service as cli_service
from applenotes.services.notes.models import SearchParams
from applenotes.services.notes.tools import parse_params

console = Console()


def main(
    query: str = typer.Argument(..., help="Text the note title must contain"),
    account: Optional[str] = typer.Option(None, help="Notes account to use"),
):
    """List notes whose title contains QUERY."""
    try:
        params = parse_params(SearchParams, {"query": query})
        api = cli_service.get_service(account)
        notes = api.search_notes(params.query)

        if not notes:
            console.print("No notes found matching your query")
            return

        table = Table("Title")
        for note in notes:
            table.add_row(note.title)

        console.print(table)
    except typer.Exit:
        raise
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        raise typer.Exit(1)
