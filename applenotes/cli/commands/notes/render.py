"""Format command: show the body payload a note would be created with."""

from pathlib import Path
from typing import Optional

import typer

from applenotes.cli.utils import service as cli_service
from applenotes.services.notes.formatting import FormatConfig, format_note_content


def main(
    content: Optional[str] = typer.Argument(
        None, help='Note body (text or HTML); "-" reads stdin'
    ),
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", help="Read the note body from a file"
    ),
    bullet: str = typer.Option("•", help="Glyph for flattened nested items"),
    indent: int = typer.Option(4, help="Non-breaking spaces before nested items"),
):
    """Run the formatting pipeline and print the payload."""
    raw = cli_service.read_content(content, file)
    config = FormatConfig(bullet=bullet, indent_width=indent)
    typer.echo(format_note_content(raw, config))
