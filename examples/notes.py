"""Example of how to use the Notes service."""

import argparse
import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.traceback import install

from applenotes import NotesService
from applenotes.exceptions import AppleNotesUnavailable
from applenotes.services.notes.formatting import format_note_content
from applenotes.services.notes.scripting import ensure_osascript

install(show_locals=True)

console = Console()

SAMPLE = """<p>Weekend plan</p>
<ol>
  <li>Buy groceries</li>
  <li>Cook "dinner"
    <ul>
      <li>Pasta</li>
      <li>Salad</li>
    </ul>
  </li>
  <li>Call Mom</li>
</ol>"""


def main():
    """Main function."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True)],
    )

    parser = argparse.ArgumentParser(description="Notes service example.")
    parser.add_argument("--title", default="applenotes example", help="Note title.")
    parser.add_argument(
        "--create",
        action="store_true",
        help="Actually create the note (macOS only). Otherwise only print the body.",
    )
    args = parser.parse_args()

    console.rule("Formatted body")
    console.print(format_note_content(SAMPLE), markup=False)

    if not args.create:
        return

    try:
        ensure_osascript()
    except AppleNotesUnavailable as exc:
        logging.error("%s", exc)
        return

    service = NotesService()
    logging.info("Using account: %s", service.account_name or "default")
    note = service.create_note(args.title, SAMPLE, tags=["example"])
    if note is None:
        logging.error("Note was not created.")
        return
    console.print(note)


if __name__ == "__main__":
    main()
