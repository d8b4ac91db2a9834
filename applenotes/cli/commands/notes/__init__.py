"""Notes commands for the applenotes CLI."""

import typer

from . import create, render, search, show

app = typer.Typer(help="Notes commands")
app.command("create", help="Create a new note")(create.main)
app.command("search", help="Search notes by title")(search.main)
app.command("show", help="Print the body of a note")(show.main)
app.command("format", help="Print the formatted body without touching Notes")(
    render.main
)
